"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

MergeRule = Literal["last", "full"]
OutputFormat = Literal["text", "terminal", "json"]

MERGE_CHOICES = ("last", "full")
FORMAT_CHOICES = ("text", "terminal", "json")


@dataclass
class DiffConfig:
    context_lines: int = 2
    merge: MergeRule = "last"  # 'full' never repeats a line across merged windows


@dataclass
class OutputConfig:
    format: OutputFormat = "text"
    color: bool = True


@dataclass
class LineDiffConfig:
    version: str = "1.0"
    diff: DiffConfig = field(default_factory=DiffConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
