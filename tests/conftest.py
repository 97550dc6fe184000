"""Shared test fixtures — sample file contents and a scratch project dir."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def three_lines() -> str:
    return "line1\nline2\nline3\n"


@pytest.fixture
def three_lines_changed() -> str:
    return "line1\nCHANGED\nline3\n"


@pytest.fixture
def padded_insert() -> tuple[str, str]:
    """Five unchanged lines, one inserted line, five unchanged lines."""
    before = [f"before{i}" for i in range(1, 6)]
    after = [f"after{i}" for i in range(1, 6)]
    old = "\n".join(before + after) + "\n"
    new = "\n".join(before + ["inserted"] + after) + "\n"
    return old, new


@pytest.fixture
def python_module() -> str:
    return textwrap.dedent("""\
        import os


        def greet(name):
            return f"Hello, {name}!"


        def main():
            print(greet(os.environ.get("USER", "world")))
    """)


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch) -> Path:
    """An empty working directory with LINEDIFF_* variables cleared."""
    for var in ("LINEDIFF_CONTEXT", "LINEDIFF_MERGE", "LINEDIFF_FORMAT", "NO_COLOR"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
