"""Runtime state containers and toolkit-neutral enums."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class OverlayStage(Enum):
    UNREALIZED = "unrealized"
    REALIZED = "realized"
    LAYER_CONFIGURED = "layer-configured"
    PRESENTED = "presented"


class Layer(Enum):
    BACKGROUND = "background"
    BOTTOM = "bottom"
    TOP = "top"
    OVERLAY = "overlay"


class Edge(Enum):
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


class KeyboardMode(Enum):
    NONE = "none"
    EXCLUSIVE = "exclusive"
    ON_DEMAND = "on-demand"


class StylePriority(IntEnum):
    """Style cascade tiers, numerically equal to GTK's provider priorities."""

    FALLBACK = 1
    THEME = 200
    SETTINGS = 400
    APPLICATION = 600
    USER = 800


@dataclass(slots=True)
class RuntimeState:
    stage: OverlayStage = OverlayStage.UNREALIZED
    style_applied: bool = False
    content_fallback: bool = False
    dismissed: bool = False
