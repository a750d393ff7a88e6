"""
Ordering of import statements by module path.

Every policy falls back to alphabetical order when the primary key ties, so
sorting already-sorted output never changes it.
"""
from collections.abc import Iterable
from functools import cmp_to_key

from prettyimports.support.config import DEFAULT_SORT_METHOD
from prettyimports.support.models import ImportStatement


def compare_alphabetical(a: str, b: str) -> int:
    """Ordinal comparison: code point order, uppercase before lowercase."""
    return (a > b) - (a < b)


def compare_module_paths(a: str, b: str, method: str = DEFAULT_SORT_METHOD) -> int:
    """
    Compare two module paths under a sort method.
    Returns -1, 0 or 1. Unknown methods behave like 'length-desc'.
    """
    if method == "alphabetical":
        return compare_alphabetical(a, b)

    if len(a) == len(b):
        return compare_alphabetical(a, b)

    # "length-then-alpha" is an alias of "length-asc"
    if method in ("length-asc", "length-then-alpha"):
        return -1 if len(a) < len(b) else 1

    return -1 if len(a) > len(b) else 1


def sort_imports(
    imports: Iterable[ImportStatement], method: str = DEFAULT_SORT_METHOD
) -> list[ImportStatement]:
    """
    Return a new list of imports ordered by module path.
    Statements importing the same module keep their source order.
    """
    key = cmp_to_key(lambda x, y: compare_module_paths(x.module_path, y.module_path, method))
    return sorted(imports, key=key)
