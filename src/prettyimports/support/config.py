"""
Configuration management for prettyimports.
"""

import logging
import re
import sys
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

# Compat for Python < 3.11
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

SORT_METHODS = ("alphabetical", "length-asc", "length-desc", "length-then-alpha")
DEFAULT_SORT_METHOD = "length-desc"
DEFAULT_LOCAL_PREFIXES = ("@/", "./", "../", "~/", "#/", "*/", "src/")

# Editor settings live under this section, e.g. "organizeImports.sortMethod".
SETTINGS_SECTION = "organizeImports"
CONFIG_FILE_NAME = ".prettyimports.toml"


@dataclass(frozen=True)
class OrganizeImportsConfig:
    """Configuration settings for organizing imports."""

    local_prefixes: tuple[str, ...] = DEFAULT_LOCAL_PREFIXES
    treat_relative_as_local: bool = True
    sort_method: str = DEFAULT_SORT_METHOD
    exclude_dirs: tuple[str, ...] = (
        "node_modules",
        ".git",
        "dist",
        "build",
        "coverage",
        ".next",
        ".nuxt",
        ".venv",
        "out",
    )
    debounce_seconds: float = 0.5


def _normalize_key(key: str) -> str:
    """Map camelCase / kebab-case setting names onto field names."""
    if key.startswith(SETTINGS_SECTION + "."):
        key = key[len(SETTINGS_SECTION) + 1 :]
    key = re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", key)
    return key.replace("-", "_").lower()


def _is_string_list(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value)


def config_from_settings(settings: Mapping[str, Any] | None) -> OrganizeImportsConfig:
    """
    Build a configuration from a host-provided settings object.

    Keys may use the editor's camelCase names (optionally prefixed with
    "organizeImports."), snake_case or kebab-case. Missing, unknown or
    ill-typed values fall back to the default of that field only.
    """
    if not settings:
        return OrganizeImportsConfig()

    values = {_normalize_key(k): v for k, v in settings.items()}
    known = {f.name for f in fields(OrganizeImportsConfig)}
    for key in values:
        if key not in known:
            logger.debug("Ignoring unknown setting: %s", key)

    kwargs: dict[str, Any] = {}

    prefixes = values.get("local_prefixes")
    if prefixes is not None:
        if _is_string_list(prefixes):
            kwargs["local_prefixes"] = tuple(prefixes)
        else:
            logger.warning("Invalid localPrefixes %r, using defaults", prefixes)

    relative = values.get("treat_relative_as_local")
    if relative is not None:
        if isinstance(relative, bool):
            kwargs["treat_relative_as_local"] = relative
        else:
            logger.warning("Invalid treatRelativeAsLocal %r, using default", relative)

    sort_method = values.get("sort_method")
    if sort_method is not None:
        if sort_method in SORT_METHODS:
            kwargs["sort_method"] = sort_method
        else:
            logger.warning(
                "Unknown sortMethod %r, falling back to %s",
                sort_method,
                DEFAULT_SORT_METHOD,
            )

    exclude_dirs = values.get("exclude_dirs")
    if exclude_dirs is not None:
        if _is_string_list(exclude_dirs):
            kwargs["exclude_dirs"] = tuple(exclude_dirs)
        else:
            logger.warning("Invalid excludeDirs %r, using defaults", exclude_dirs)

    debounce = values.get("debounce_seconds")
    if debounce is not None:
        if isinstance(debounce, (int, float)) and not isinstance(debounce, bool) and debounce >= 0:
            kwargs["debounce_seconds"] = float(debounce)
        else:
            logger.warning("Invalid debounceSeconds %r, using default", debounce)

    return OrganizeImportsConfig(**kwargs)


def load_config(path: Path | None = None) -> OrganizeImportsConfig:
    """
    Load configuration.
    Args:
        path: Path to a TOML config file OR a project directory.
              If None, the current working directory is searched.

    A directory is searched for `.prettyimports.toml` (top-level table) and
    then `pyproject.toml` (`[tool.prettyimports]` table).
    """
    if path is None:
        path = Path.cwd()

    if path.is_dir():
        candidates = [path / CONFIG_FILE_NAME, path / "pyproject.toml"]
        config_path = next((c for c in candidates if c.exists()), None)
    else:
        config_path = path if path.exists() else None

    if config_path is None:
        return OrganizeImportsConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        if config_path.name == "pyproject.toml":
            data = data.get("tool", {}).get("prettyimports", {})

        return config_from_settings(data)
    except Exception as e:
        # Malformed TOML or unreadable file: defaults
        logger.warning("Could not read %s (%s), using defaults", config_path, e)
        return OrganizeImportsConfig()
