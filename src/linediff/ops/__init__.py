"""File operations built on the diff engine."""

from linediff.ops.file_ops import (
    OperationError,
    copy_file,
    delete_path,
    edit_file,
    move_path,
    read_text,
    run_operation,
    write_files,
)

__all__ = [
    "OperationError",
    "copy_file",
    "delete_path",
    "edit_file",
    "move_path",
    "read_text",
    "run_operation",
    "write_files",
]
