"""View data model and rendering helpers."""

from .view_data import DisplayColor, LineSegment, ViewData, ViewLine
from .render import (
    ACTION_COLORS,
    MINIMUM_FULL_WINDOW_WIDTH,
    help_view_lines,
    plan_line_segments,
    plan_view_lines,
)

__all__ = [
    "DisplayColor",
    "LineSegment",
    "ViewData",
    "ViewLine",
    "ACTION_COLORS",
    "MINIMUM_FULL_WINDOW_WIDTH",
    "help_view_lines",
    "plan_line_segments",
    "plan_view_lines",
]
