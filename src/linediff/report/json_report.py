"""JSON reporter for tooling that wants structured output."""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List

from linediff.diff.models import ChangeSummary
from linediff.report.models import OperationReport

SCHEMA_VERSION = "1.0"


def _diff_to_dict(diff: ChangeSummary) -> Dict[str, Any]:
    return {
        "file": diff.file_path,
        "additions": diff.additions,
        "removals": diff.removals,
        "lines": [
            {"line": line.line_number, "tag": line.tag.value, "content": line.content}
            for line in diff.lines
        ],
    }


def to_dict(report: OperationReport) -> Dict[str, Any]:
    """Convert an OperationReport to a JSON-serialisable dict."""
    return {
        "version": SCHEMA_VERSION,
        "tool": report.tool_name,
        "summary": report.summary,
        "details": report.details,
        "diff": _diff_to_dict(report.diff) if report.diff is not None else None,
    }


def render(reports: Iterable[OperationReport]) -> str:
    """Return formatted JSON — one object, or a list for several reports."""
    items: List[Dict[str, Any]] = [to_dict(r) for r in reports]
    payload: Any = items[0] if len(items) == 1 else items
    return json.dumps(payload, indent=2, ensure_ascii=False)
