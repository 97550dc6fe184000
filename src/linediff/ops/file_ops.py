"""File operations that report their effect as an OperationReport.

These are the impure shell around the diff engine: they read the old
content, apply the change, write it back and hand both versions to
:func:`linediff.diff.create_diff`.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from linediff.diff.summary import DEFAULT_CONTEXT_LINES, create_diff
from linediff.report.models import OperationReport

OPERATIONS = ("delete", "move", "copy")


class OperationError(Exception):
    """Raised when a file operation cannot be carried out."""


def read_text(path: Path) -> str:
    """Read UTF-8 text with line endings left as they are."""
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def _read_or_empty(path: Path) -> str:
    """Old content of a file that may not exist yet."""
    try:
        return read_text(path)
    except (FileNotFoundError, IsADirectoryError, UnicodeDecodeError):
        return ""


def _write_text(path: Path, content: str) -> None:
    try:
        # newline="" keeps the caller's line endings untouched
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as exc:
        raise OperationError(f"Failed to write {path}: {exc}") from exc


def edit_file(
    file_path: str,
    old_string: str,
    new_string: str,
    *,
    replace_all: bool = False,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    merge: str = "last",
) -> OperationReport:
    """Replace the first (or every) occurrence of *old_string* in a file."""
    path = Path(file_path)
    try:
        old_content = read_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise OperationError(f"Failed to read {file_path}: {exc}") from exc

    if old_string not in old_content:
        raise OperationError(f"String not found in file: '{old_string}'")

    count = -1 if replace_all else 1
    new_content = old_content.replace(old_string, new_string, count)
    _write_text(path, new_content)

    diff = create_diff(file_path, old_content, new_content, context_lines, merge=merge)
    return OperationReport("Edit", file_path).with_diff(diff)


def write_files(
    files: Iterable[Tuple[str, str]],
    *,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    merge: str = "last",
) -> List[OperationReport]:
    """Write each ``(path, content)`` pair, creating parent directories.

    A file that does not exist yet is diffed against empty content.
    """
    reports: List[OperationReport] = []
    for file_path, content in files:
        path = Path(file_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OperationError(f"Failed to create directory: {exc}") from exc

        old_content = _read_or_empty(path)
        _write_text(path, content)

        diff = create_diff(file_path, old_content, content, context_lines, merge=merge)
        reports.append(OperationReport("WriteFile", file_path).with_diff(diff))
    return reports


def copy_file(
    source: str,
    destination: str,
    *,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    merge: str = "last",
) -> OperationReport:
    """Copy a single file; show a diff when the destination had content."""
    src = Path(source)
    dst = Path(destination)
    if not src.exists():
        raise OperationError(f"Failed to access source: {source} does not exist")
    if src.is_dir():
        raise OperationError("Copying directories not yet supported")

    old_content = _read_or_empty(dst)
    try:
        source_content = read_text(src)
    except (OSError, UnicodeDecodeError) as exc:
        raise OperationError(f"Failed to read source: {exc}") from exc

    try:
        shutil.copyfile(src, dst)
    except OSError as exc:
        raise OperationError(f"Failed to copy file: {exc}") from exc

    report = OperationReport("Copy", destination)
    if not old_content:
        return report.with_details(f"Copied {source} to {destination}")
    diff = create_diff(destination, old_content, source_content, context_lines, merge=merge)
    return report.with_diff(diff)


def delete_path(source: str) -> OperationReport:
    """Delete a file or a whole directory tree."""
    path = Path(source)
    if not path.exists() and not path.is_symlink():
        raise OperationError(f"Failed to access {source}: no such file or directory")

    is_dir = path.is_dir() and not path.is_symlink()
    item_type = "directory" if is_dir else "file"
    try:
        if is_dir:
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as exc:
        raise OperationError(f"Failed to delete {item_type}: {exc}") from exc

    return OperationReport("Delete", source).with_details(f"Deleted {item_type} {source}")


def move_path(source: str, destination: str) -> OperationReport:
    """Move or rename a file or directory."""
    try:
        Path(source).rename(destination)
    except OSError as exc:
        raise OperationError(f"Failed to move file: {exc}") from exc
    return OperationReport("Move", source).with_details(f"Moved {source} to {destination}")


def run_operation(
    operation: str,
    source: str,
    destination: Optional[str] = None,
    *,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    merge: str = "last",
) -> OperationReport:
    """Dispatch one of ``delete``, ``move`` or ``copy`` by name."""
    if operation == "delete":
        return delete_path(source)
    if operation not in OPERATIONS:
        raise OperationError(
            f"Unknown operation: {operation}. Use 'delete', 'move', or 'copy'"
        )
    if not destination:
        raise OperationError(f"Destination required for {operation} operation")
    if operation == "move":
        return move_path(source, destination)
    return copy_file(source, destination, context_lines=context_lines, merge=merge)
