"""Rich terminal reporter — same characters as the text block, with colour."""

from __future__ import annotations

from typing import Iterable, Optional

from rich.console import Console
from rich.text import Text

from linediff.diff.models import ChangeTag
from linediff.report import formatter
from linediff.report.models import OperationReport

_TAG_STYLE = {
    ChangeTag.CONTEXT: "",
    ChangeTag.ADDITION: "green",
    ChangeTag.REMOVAL: "red",
}


def to_text(report: OperationReport) -> Text:
    """Build a styled Text whose plain content equals ``formatter.render``."""
    text = Text()
    text.append(formatter.header_line(report), style="bold")
    if report.diff is not None:
        text.append(formatter.summary_line(report.diff), style="dim")
        for line in report.diff.lines:
            text.append(formatter.diff_line(line), style=_TAG_STYLE[line.tag])
    elif report.details is not None:
        text.append(formatter.details_line(report.details), style="dim")
    return text


def render(
    reports: Iterable[OperationReport],
    *,
    console: Optional[Console] = None,
    color: bool = True,
) -> None:
    """Print reports to stdout using Rich."""
    console = console or Console(no_color=not color, highlight=False, soft_wrap=True)
    for idx, report in enumerate(reports):
        if idx:
            console.print()
        # the block already ends with a newline
        console.print(to_text(report), end="")
