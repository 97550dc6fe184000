"""Operation report model."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from linediff.diff.models import ChangeSummary


@dataclass(frozen=True)
class OperationReport:
    """What a file operation did — a header plus either details or a diff."""

    tool_name: str
    summary: str
    details: Optional[str] = None
    diff: Optional[ChangeSummary] = None

    def with_details(self, details: str) -> OperationReport:
        return replace(self, details=details)

    def with_diff(self, diff: ChangeSummary) -> OperationReport:
        return replace(self, diff=diff)
