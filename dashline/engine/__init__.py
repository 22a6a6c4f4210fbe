"""Dash engine: pattern, cursor and path dasher."""

from dashline.engine.config import DasherConfig
from dashline.engine.cursor import DashAction, DashCursor, DashKind
from dashline.engine.dasher import Dash, DashOrGap, Gap, PathDasher, dash_path
from dashline.engine.errors import CursorConsistencyError, DashError, InvalidPattern, UnsupportedSegmentKind
from dashline.engine.pattern import DashPattern

__all__ = [
    "DasherConfig",
    "DashAction",
    "DashCursor",
    "DashKind",
    "Dash",
    "DashOrGap",
    "Gap",
    "PathDasher",
    "dash_path",
    "CursorConsistencyError",
    "DashError",
    "InvalidPattern",
    "UnsupportedSegmentKind",
    "DashPattern",
]
