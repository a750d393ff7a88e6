"""
Data models for prettyimports.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class TextSpan:
    """Half-open [start, end) range of character offsets in a document."""
    start: int
    end: int


@dataclass(frozen=True)
class NamedBinding:
    """One entry inside an import's braces, e.g. `b` or `a as b`."""
    local_name: str
    imported_name: str
    is_type_only: bool = False

    @property
    def is_aliased(self) -> bool:
        return self.local_name != self.imported_name

    @property
    def display_name(self) -> str:
        """The name as written in the braces: the alias when aliased."""
        return self.local_name


@dataclass(frozen=True)
class ImportStatement:
    """A single import declaration extracted from the leading import run."""
    module_path: str
    source_span: TextSpan
    named_bindings: tuple[NamedBinding, ...] | None = None  # None means no braces
    default_binding: str | None = None
    namespace_binding: str | None = None
    is_type_only_import: bool = False
    quote: str = '"'
    attributes: str | None = None  # raw `with { ... }` / `assert { ... }` clause
    leading_trivia: tuple[str, ...] = ()
    trailing_comment: str | None = None

    @property
    def is_side_effect(self) -> bool:
        return (
            self.default_binding is None
            and self.namespace_binding is None
            and self.named_bindings is None
        )


@dataclass(frozen=True)
class ImportBlock:
    """The leading import run of a document."""
    imports: tuple[ImportStatement, ...]
    end: int
    header: str | None = None
    header_separator: str = "\n"


@dataclass(frozen=True)
class ClassifiedImports:
    """Imports split by category, in source order."""
    third_party: tuple[ImportStatement, ...] = ()
    local: tuple[ImportStatement, ...] = ()


@dataclass(frozen=True)
class NoChange:
    """The document's imports are already organized (or could not be)."""

    @property
    def changed(self) -> bool:
        return False

    def apply(self, text: str) -> str:
        return text


@dataclass(frozen=True)
class Replace:
    """Replace `span` of the document with `new_text`."""
    span: TextSpan
    new_text: str

    @property
    def changed(self) -> bool:
        return True

    def apply(self, text: str) -> str:
        """Return `text` with the span substituted."""
        return text[: self.span.start] + self.new_text + text[self.span.end :]


EditResult = NoChange | Replace
