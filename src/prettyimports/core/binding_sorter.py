"""
Sorting of the named bindings inside one import statement.
"""
from collections.abc import Iterable
from dataclasses import replace

from prettyimports.support.models import ImportStatement, NamedBinding


def sort_named_bindings(bindings: Iterable[NamedBinding]) -> tuple[NamedBinding, ...]:
    """Order bindings by display name, case-sensitive."""
    return tuple(sorted(bindings, key=lambda b: b.display_name))


def with_sorted_bindings(statement: ImportStatement) -> ImportStatement:
    """
    Return a copy of the statement with its named bindings sorted.
    Default and namespace bindings are left as they are.
    """
    if not statement.named_bindings:
        return statement
    return replace(statement, named_bindings=sort_named_bindings(statement.named_bindings))
