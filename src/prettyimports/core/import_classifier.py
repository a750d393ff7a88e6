"""
Classification of imports into third-party or local.
"""
from collections.abc import Iterable

from prettyimports.support.config import OrganizeImportsConfig
from prettyimports.support.models import ImportStatement, ClassifiedImports

LOCAL = "local"
THIRD_PARTY = "third-party"


def is_relative_path(module_path: str) -> bool:
    """True for "./x" and "../x" style specifiers."""
    return module_path.startswith("./") or module_path.startswith("../")


def classify_import(module_path: str, config: OrganizeImportsConfig) -> str:
    """
    Classify a module path as 'local' or 'third-party'.

    Prefixes are plain, case-sensitive string prefixes; "*/" is matched
    literally, not as a glob.
    """
    relative = config.treat_relative_as_local and is_relative_path(module_path)
    matches_prefix = any(module_path.startswith(p) for p in config.local_prefixes)

    if relative or matches_prefix:
        return LOCAL
    return THIRD_PARTY


def classify_all(
    imports: Iterable[ImportStatement], config: OrganizeImportsConfig
) -> ClassifiedImports:
    """
    Split imports into groups, preserving source order inside each group.
    """
    third_party = []
    local = []

    for imp in imports:
        if classify_import(imp.module_path, config) == LOCAL:
            local.append(imp)
        else:
            third_party.append(imp)

    return ClassifiedImports(third_party=tuple(third_party), local=tuple(local))
