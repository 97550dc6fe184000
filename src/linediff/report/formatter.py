"""Plain-text report renderer.

The output is consumed verbatim (terminal and LLM prompt context), so the
layout here is fixed:

    ⏺ Edit(app.py)
      ⎿  Updated app.py with 1 addition and 1 removal
           1      line1
           2    - line2
           2    + CHANGED
           3      line3
"""

from __future__ import annotations

from typing import Iterable, List

from linediff.diff.models import ChangeSummary, ChangeTag, LineRecord
from linediff.report.models import OperationReport

HEADER_MARK = "⏺"
RESULT_MARK = "⎿"

TAG_COLUMN = {
    ChangeTag.CONTEXT: "     ",
    ChangeTag.ADDITION: "    +",
    ChangeTag.REMOVAL: "    -",
}


def pluralize(count: int, word: str) -> str:
    """``1 addition`` but ``0 additions`` / ``2 additions``."""
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def header_line(report: OperationReport) -> str:
    return f"{HEADER_MARK} {report.tool_name}({report.summary})\n"


def summary_line(diff: ChangeSummary) -> str:
    return (
        f"  {RESULT_MARK}  Updated {diff.file_path} with "
        f"{pluralize(diff.additions, 'addition')} and "
        f"{pluralize(diff.removals, 'removal')}\n"
    )


def diff_line(line: LineRecord) -> str:
    return f"    {line.line_number:>4}{TAG_COLUMN[line.tag]} {line.content}\n"


def details_line(details: str) -> str:
    return f"  {RESULT_MARK}  {details}\n"


def render(report: OperationReport) -> str:
    """Render *report* as a text block. Pure — no I/O."""
    parts: List[str] = [header_line(report)]
    if report.diff is not None:
        parts.append(summary_line(report.diff))
        parts.extend(diff_line(line) for line in report.diff.lines)
    elif report.details is not None:
        parts.append(details_line(report.details))
    return "".join(parts)


def render_all(reports: Iterable[OperationReport]) -> str:
    """Render several reports separated by a blank line."""
    return "\n".join(render(r) for r in reports)
