import pytest

from cheatsheet.core.state import StylePriority
from cheatsheet.services.content import LoadedStyle
from cheatsheet.services.styles import StyleApplicator


def test_stylesheet_registered_at_application_priority(toolkit, tmp_path):
    applied = StyleApplicator(toolkit.registry).apply(LoadedStyle(text="window {}", source=tmp_path / "s.css"))
    assert applied is True
    assert toolkit.registry.sheets == [("window {}", 600)]


def test_application_priority_sits_between_tiers():
    assert StylePriority.SETTINGS < StylePriority.APPLICATION < StylePriority.USER


def test_no_stylesheet_leaves_defaults(toolkit):
    assert StyleApplicator(toolkit.registry).apply(None) is False
    assert toolkit.registry.sheets == []


def test_stylesheet_applied_only_once(toolkit, tmp_path):
    styles = StyleApplicator(toolkit.registry)
    styles.apply(None)
    with pytest.raises(RuntimeError):
        styles.apply(LoadedStyle(text="", source=tmp_path / "s.css"))
