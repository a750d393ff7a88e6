"""
Safe file I/O operations.
"""
from pathlib import Path
import difflib

from prettyimports.support.models import EditResult


def read_file(path: Path) -> str:
    """Read file content, keeping its line endings intact."""
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def safe_write(path: Path, content: str, overwrite: bool = False) -> bool:
    """
    Write content to file, creating parent directories if needed.
    Returns True if written, False if skipped (exists and not overwrite).
    """
    if path.exists() and not overwrite:
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    return True


def apply_edit(path: Path, original: str, edit: EditResult) -> bool:
    """
    Apply an edit to a file as one substitution.
    Returns True if the file was rewritten.
    """
    if not edit.changed:
        return False
    return safe_write(path, edit.apply(original), overwrite=True)


def unified_diff(original: str, updated: str, file_name: str) -> str:
    """Render the change as a unified diff."""
    return "".join(
        difflib.unified_diff(
            original.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=f"a/{file_name}",
            tofile=f"b/{file_name}",
        )
    )
