"""
Canonical source text for import statements.
"""
from collections.abc import Sequence

from prettyimports.support.models import ImportStatement, NamedBinding


def render_binding(binding: NamedBinding) -> str:
    text = binding.imported_name
    if binding.is_aliased:
        text = f"{binding.imported_name} as {binding.local_name}"
    if binding.is_type_only:
        text = f"type {text}"
    return text


def render_import(statement: ImportStatement) -> str:
    """
    Render one import on a single line, keeping its form (side-effect,
    default, namespace, named, type-only) and its quote character.
    """
    keyword = "import type" if statement.is_type_only_import else "import"
    source = f"{statement.quote}{statement.module_path}{statement.quote}"

    clauses = []
    if statement.default_binding is not None:
        clauses.append(statement.default_binding)
    if statement.namespace_binding is not None:
        clauses.append(f"* as {statement.namespace_binding}")
    if statement.named_bindings is not None:
        if statement.named_bindings:
            names = ", ".join(render_binding(b) for b in statement.named_bindings)
            clauses.append(f"{{ {names} }}")
        else:
            clauses.append("{}")

    if clauses:
        line = f"{keyword} {', '.join(clauses)} from {source}"
    else:
        line = f"{keyword} {source}"

    if statement.attributes:
        line += f" {statement.attributes}"
    line += ";"

    if statement.trailing_comment:
        line += f" {statement.trailing_comment}"
    return line


def render_statement(statement: ImportStatement, newline: str = "\n") -> str:
    """Render an import preceded by the comments attached to it."""
    return newline.join([*statement.leading_trivia, render_import(statement)])


def render_block(
    third_party: Sequence[ImportStatement],
    local: Sequence[ImportStatement],
    header: str | None = None,
    header_separator: str = "\n",
    newline: str = "\n",
) -> str:
    """
    Render both groups, third-party first, separated by one blank line when
    both are non-empty.
    """
    sections = [
        newline.join(render_statement(s, newline) for s in group)
        for group in (third_party, local)
        if group
    ]
    text = (newline * 2).join(sections)

    if header is not None:
        text = header + newline * header_separator.count("\n") + text
    return text
