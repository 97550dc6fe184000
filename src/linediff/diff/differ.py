"""Line differ — turns two texts into a numbered edit script.

Alignment is delegated to :class:`difflib.SequenceMatcher`, which grows the
longest matching block first, so long runs of equal lines stay intact as
context instead of being split into small insert/delete pairs.
"""

from __future__ import annotations

import io
from difflib import SequenceMatcher
from typing import List

from linediff.diff.models import ChangeTag, LineRecord


def _split_lines(text: str) -> List[str]:
    """Split at LF, CRLF and CR only, keeping the terminators."""
    return io.StringIO(text, newline="").readlines()


def _strip_terminator(line: str) -> str:
    """Drop the trailing LF / CRLF / CR of a line."""
    return line.rstrip("\r\n")


def diff_lines(old: str, new: str) -> List[LineRecord]:
    """Return the edit script that turns *old* into *new*.

    Lines are compared with their terminators, so a missing final newline
    counts as a change of the last line.

    Numbering: one counter starting at 1 is stamped on every record and
    advanced after every record that is not a removal. Context and added
    lines therefore carry their new-file position, and a removed line shares
    the number of whatever follows it.
    """
    old_lines = _split_lines(old)
    new_lines = _split_lines(new)

    matcher = SequenceMatcher(None, old_lines, new_lines, autojunk=False)
    records: List[LineRecord] = []
    current_line = 1

    def emit(tag: ChangeTag, raw: str) -> None:
        nonlocal current_line
        records.append(LineRecord(current_line, tag, _strip_terminator(raw)))
        if tag is not ChangeTag.REMOVAL:
            current_line += 1

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            for line in new_lines[j1:j2]:
                emit(ChangeTag.CONTEXT, line)
            continue
        # 'replace' is a delete followed by an insert
        if tag in ("delete", "replace"):
            for line in old_lines[i1:i2]:
                emit(ChangeTag.REMOVAL, line)
        if tag in ("insert", "replace"):
            for line in new_lines[j1:j2]:
                emit(ChangeTag.ADDITION, line)

    return records
