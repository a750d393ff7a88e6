"""
Discovery of JavaScript / TypeScript source files to organize.
"""

from pathlib import Path
from prettyimports.support.config import OrganizeImportsConfig

SUPPORTED_SUFFIXES = frozenset(
    {".js", ".mjs", ".cjs", ".jsx", ".ts", ".mts", ".cts", ".tsx", ".vue"}
)


def is_supported_file(
    path: Path, project_root: Path | None, config: OrganizeImportsConfig
) -> bool:
    """
    Check if a file should be organized.
    Rules:
    - Must have a supported extension
    - Must not be in excluded directories
    """
    if path.suffix not in SUPPORTED_SUFFIXES:
        return False

    parts = path.parts
    if project_root is not None:
        try:
            parts = path.relative_to(project_root).parts
        except ValueError:
            pass  # outside the root, check the full path

    return not any(part in config.exclude_dirs for part in parts[:-1])


def discover_files(target_path: Path, config: OrganizeImportsConfig) -> list[Path]:
    """
    Find all supported files at `target_path`.
    A file target is returned as-is when supported.
    """
    if target_path.is_file():
        if is_supported_file(target_path, None, config):
            return [target_path]
        return []

    found = []
    for file_path in target_path.rglob("*"):
        if not file_path.is_file():
            continue
        if is_supported_file(file_path, target_path, config):
            found.append(file_path)

    return sorted(found)
