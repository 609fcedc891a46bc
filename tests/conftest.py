import pytest

from cheatsheet.config import AppPaths, CheatsheetSettings, LaunchConfig
from cheatsheet.core.errors import DisplayUnavailableError
from cheatsheet.core.state import KeyboardMode


class FakeSurface:
    """Records layer-shell calls the way the compositor would see them."""

    def __init__(self, markup, window, realizes=True):
        self.markup = markup
        self.window = window
        self.realizes = realizes
        self.calls = []
        self.layer_shell = False
        self.realized = False
        self.layer = None
        self.anchors = {}
        self.keyboard_mode = KeyboardMode.NONE
        self.handlers = []
        self.presented = 0

    def init_layer_shell(self):
        assert not self.realized, "layer shell must be initialised before realization"
        self.calls.append("init_layer_shell")
        self.layer_shell = True

    def realize(self):
        self.calls.append("realize")
        self.realized = self.realizes

    def is_realized(self):
        return self.realized

    def set_layer(self, layer):
        self.calls.append("set_layer")
        self.layer = layer

    def set_anchor(self, edge, anchored):
        self.calls.append("set_anchor")
        self.anchors[edge] = anchored

    def get_keyboard_mode(self):
        return self.keyboard_mode

    def set_keyboard_mode(self, mode):
        self.calls.append("set_keyboard_mode")
        self.keyboard_mode = mode

    def add_key_handler(self, handler):
        self.calls.append("add_key_handler")
        self.handlers.append(handler)

    def present(self):
        self.calls.append("present")
        self.presented += 1

    def press(self, key):
        return any(handler(key) for handler in self.handlers)


class FakeRegistry:
    def __init__(self):
        self.sheets = []

    def add_stylesheet(self, css, priority):
        self.sheets.append((css, priority))


class FakeToolkit:
    def __init__(self):
        self.registry = FakeRegistry()
        self.surfaces = []
        self.quit_calls = 0
        self.has_display = True
        self.realizes = True

    def style_registry(self):
        if not self.has_display:
            raise DisplayUnavailableError("Could not connect to a display.")
        return self.registry

    def create_surface(self, markup, window):
        surface = FakeSurface(markup, window, realizes=self.realizes)
        self.surfaces.append(surface)
        return surface

    def quit(self):
        self.quit_calls += 1


@pytest.fixture
def toolkit():
    return FakeToolkit()


@pytest.fixture
def settings(tmp_path):
    return CheatsheetSettings(paths=AppPaths(base_dir=tmp_path / "home"))


@pytest.fixture
def content_file(tmp_path):
    path = tmp_path / "cheatsheet.pango"
    path.write_text("Hello <b>World</b>", encoding="utf-8")
    return path


@pytest.fixture
def style_file(tmp_path):
    path = tmp_path / "style.css"
    path.write_text("label { font-size: 14px; }", encoding="utf-8")
    return path


@pytest.fixture
def launch(content_file, style_file):
    return LaunchConfig(style_path=style_file, content_path=content_file)
