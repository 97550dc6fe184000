"""Build a ChangeSummary from old/new file content."""

from __future__ import annotations

from typing import Sequence, Tuple

from linediff.diff.differ import diff_lines
from linediff.diff.models import ChangeSummary, ChangeTag, LineRecord
from linediff.diff.window import window

DEFAULT_CONTEXT_LINES = 2


def count_changes(lines: Sequence[LineRecord]) -> Tuple[int, int]:
    """Return ``(additions, removals)`` for an edit script."""
    additions = sum(1 for line in lines if line.tag is ChangeTag.ADDITION)
    removals = sum(1 for line in lines if line.tag is ChangeTag.REMOVAL)
    return additions, removals


def create_diff(
    file_path: str,
    old_content: str,
    new_content: str,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    *,
    merge: str = "last",
) -> ChangeSummary:
    """Diff *old_content* against *new_content* and window the result.

    Counts are taken from the full script, before windowing.
    """
    script = diff_lines(old_content, new_content)
    additions, removals = count_changes(script)
    return ChangeSummary(
        file_path=file_path,
        additions=additions,
        removals=removals,
        lines=tuple(window(script, context_lines, merge=merge)),
    )
