"""Operation reports and their text, terminal and JSON renderings."""

from linediff.report.formatter import render, render_all
from linediff.report.models import OperationReport

__all__ = ["OperationReport", "render", "render_all"]
