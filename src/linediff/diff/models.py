"""Data models for line diffs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class ChangeTag(str, Enum):
    CONTEXT = "context"
    ADDITION = "addition"
    REMOVAL = "removal"


@dataclass(frozen=True, slots=True)
class LineRecord:
    """One line of an edit script.

    ``line_number`` is the new-file position; a removal carries the number of
    the line it was removed before.
    """

    line_number: int
    tag: ChangeTag
    content: str  # no trailing line terminator

    @property
    def is_change(self) -> bool:
        return self.tag is not ChangeTag.CONTEXT


@dataclass(frozen=True)
class ChangeSummary:
    """Windowed diff of one file plus whole-file change counts."""

    file_path: str
    additions: int = 0
    removals: int = 0
    lines: Tuple[LineRecord, ...] = field(default_factory=tuple)
