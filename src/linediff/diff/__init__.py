"""Diff engine — line differ, context windower, change summaries."""

from linediff.diff.differ import diff_lines
from linediff.diff.models import ChangeSummary, ChangeTag, LineRecord
from linediff.diff.summary import DEFAULT_CONTEXT_LINES, count_changes, create_diff
from linediff.diff.window import MERGE_RULES, window

__all__ = [
    "ChangeSummary",
    "ChangeTag",
    "DEFAULT_CONTEXT_LINES",
    "LineRecord",
    "MERGE_RULES",
    "count_changes",
    "create_diff",
    "diff_lines",
    "window",
]
