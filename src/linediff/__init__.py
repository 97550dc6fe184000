"""linediff — numbered, context-windowed line diffs and change reports."""

__version__ = "0.1.0"
