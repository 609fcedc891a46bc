"""Normalise user-facing key names to GDK key names."""

from __future__ import annotations

# Aliases accepted in settings, keyed by lower-case spelling.
KEY_NAMES: dict[str, str] = {
    "escape": "Escape",
    "esc": "Escape",
    "enter": "Return",
    "return": "Return",
    "tab": "Tab",
    "space": "space",
    "backspace": "BackSpace",
    "delete": "Delete",
    "del": "Delete",
    "insert": "Insert",
    "home": "Home",
    "end": "End",
    "page up": "Page_Up",
    "page down": "Page_Down",
    "pgup": "Page_Up",
    "pgdn": "Page_Down",
    "up": "Up",
    "down": "Down",
    "left": "Left",
    "right": "Right",
}

# Function keys
KEY_NAMES.update({f"f{n}": f"F{n}" for n in range(1, 25)})


def normalize_key(name: str) -> str:
    """
    Map a key name from settings to the name GDK reports for it.

    Examples:
        "esc" -> "Escape"
        "f12" -> "F12"
        "q"   -> "q"

    Raises:
        ValueError: If the name is empty or not a known key
    """
    cleaned = name.strip()
    if not cleaned:
        raise ValueError(f"Empty key name: {name!r}")

    lowered = cleaned.lower()
    if lowered in KEY_NAMES:
        return KEY_NAMES[lowered]

    # GDK names single letters and digits by the character itself
    if len(cleaned) == 1 and cleaned.isalnum():
        return cleaned

    raise ValueError(f"Unknown key: {name}")
