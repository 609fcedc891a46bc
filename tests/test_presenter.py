import pytest

from cheatsheet.core.errors import OverlayStateError, SurfaceNotRealizedError, SurfaceUnavailableError
from cheatsheet.core.events import EventBus
from cheatsheet.core.state import Edge, KeyboardMode, Layer, OverlayStage, RuntimeState
from cheatsheet.services.content import ContentLoader, LoadedContent
from cheatsheet.ui.presenter import OverlayPresenter


@pytest.fixture
def presenter(toolkit, settings):
    return OverlayPresenter(toolkit, ContentLoader(), settings.window, EventBus(), RuntimeState())


def test_activate_runs_full_sequence(presenter, toolkit, content_file):
    surface = presenter.activate(content_file, lambda s: (lambda key: False))

    assert presenter.stage is OverlayStage.PRESENTED
    assert surface is toolkit.surfaces[0]
    assert surface.markup == "Hello <b>World</b>"
    assert surface.calls == [
        "init_layer_shell",
        "realize",
        "set_layer",
        "set_keyboard_mode",
        "set_anchor",
        "add_key_handler",
        "present",
    ]
    assert surface.layer is Layer.OVERLAY
    assert surface.anchors == {Edge.RIGHT: True}
    assert surface.keyboard_mode is KeyboardMode.EXCLUSIVE


def test_unreadable_content_still_presents(presenter, toolkit, tmp_path):
    surface = presenter.activate(tmp_path / "missing.pango", lambda s: (lambda key: False))
    assert presenter.stage is OverlayStage.PRESENTED
    assert surface.markup.startswith("Error loading file: ")
    assert presenter.state.content_fallback is True


def test_configure_before_realize_is_rejected(presenter, toolkit):
    presenter.build(LoadedContent(text="x"))
    with pytest.raises(SurfaceNotRealizedError):
        presenter.configure_layer()
    surface = toolkit.surfaces[0]
    assert surface.layer is None
    assert surface.anchors == {}
    assert presenter.stage is OverlayStage.UNREALIZED


def test_configure_before_build_is_rejected(presenter):
    with pytest.raises(OverlayStateError):
        presenter.configure_layer()


def test_surface_that_fails_to_realize_is_fatal(presenter, toolkit):
    toolkit.realizes = False
    presenter.build(LoadedContent(text="x"))
    with pytest.raises(SurfaceUnavailableError):
        presenter.realize()
    assert presenter.stage is OverlayStage.UNREALIZED


def test_present_requires_layer_configuration(presenter):
    presenter.build(LoadedContent(text="x"))
    presenter.realize()
    with pytest.raises(OverlayStateError):
        presenter.present()
    assert presenter.stage is OverlayStage.REALIZED


def test_stages_do_not_go_backwards(presenter, content_file):
    presenter.activate(content_file, lambda s: (lambda key: False))
    with pytest.raises(OverlayStateError):
        presenter.build(LoadedContent(text="again"))
    with pytest.raises(OverlayStateError):
        presenter.realize()
    with pytest.raises(OverlayStateError):
        presenter.configure_layer()


def test_presented_event_carries_surface(toolkit, settings, content_file):
    events = EventBus()
    seen = []
    events.subscribe("overlay.presented", seen.append)
    presenter = OverlayPresenter(toolkit, ContentLoader(), settings.window, events, RuntimeState())
    surface = presenter.activate(content_file, lambda s: (lambda key: False))
    assert seen == [surface]


def test_window_settings_reach_the_factory(presenter, toolkit, settings):
    presenter.build(LoadedContent(text="x"))
    assert toolkit.surfaces[0].window is settings.window
