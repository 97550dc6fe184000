"""Context windower — keep each change run plus a little surrounding context.

Two merge rules decide what happens where the windows of neighbouring change
runs overlap:

``last``
    A leading-context line is skipped only when its line number equals the
    line number of the line emitted just before it. Overlaps of a single
    line collapse cleanly; wider overlaps repeat lines. This is the
    reference output and the default.

``full``
    Every line of the script is emitted at most once.
"""

from __future__ import annotations

from typing import List, Sequence, Set

from linediff.diff.models import ChangeTag, LineRecord

MERGE_RULES = ("last", "full")


def _context_before(lines: Sequence[LineRecord], start: int, context: int) -> range:
    """Indices of up to *context* context lines right before *start*."""
    first = start
    while first > 0 and start - first < context and lines[first - 1].tag is ChangeTag.CONTEXT:
        first -= 1
    return range(first, start)


def _context_after(lines: Sequence[LineRecord], end: int, context: int) -> range:
    """Indices of up to *context* context lines starting at *end*."""
    last = end
    while last < len(lines) and last - end < context and lines[last].tag is ChangeTag.CONTEXT:
        last += 1
    return range(end, last)


def window(
    lines: Sequence[LineRecord],
    context: int,
    merge: str = "last",
) -> List[LineRecord]:
    """Return the subsequence of *lines* shown around each change run.

    Scripts without any change produce an empty list.
    """
    if context < 0:
        raise ValueError(f"context must be >= 0, got {context}")
    if merge not in MERGE_RULES:
        raise ValueError(f"Unknown merge rule: {merge!r} (expected one of {', '.join(MERGE_RULES)})")

    result: List[LineRecord] = []
    emitted: Set[int] = set()  # script indices, used by the 'full' rule

    def push(idx: int) -> None:
        if merge == "full":
            if idx in emitted:
                return
            emitted.add(idx)
        result.append(lines[idx])

    total = len(lines)
    i = 0
    while i < total:
        if not lines[i].is_change:
            i += 1
            continue

        for j in _context_before(lines, i, context):
            if merge == "last" and result and result[-1].line_number == lines[j].line_number:
                continue
            push(j)

        end = i
        while end < total and lines[end].is_change:
            push(end)
            end += 1

        for j in _context_after(lines, end, context):
            push(j)

        i = end

    return result
