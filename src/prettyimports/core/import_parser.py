"""
Extraction of the leading import run from JavaScript / TypeScript sources.

Parsing is done with Tree-sitter. The TypeScript grammar is used for .ts
files; everything else goes through the TSX grammar, which also accepts
plain JavaScript and JSX.
"""
import logging
from dataclasses import replace
from functools import lru_cache
from pathlib import PurePath

import tree_sitter_typescript as tsts
from tree_sitter import Language, Node, Parser, Tree

from prettyimports.support.exceptions import MalformedImportError, SourceParseError
from prettyimports.support.models import (
    ImportBlock,
    ImportStatement,
    NamedBinding,
    TextSpan,
)

logger = logging.getLogger(__name__)

TYPESCRIPT_SUFFIXES = frozenset({".ts", ".mts", ".cts"})
QUOTES = ("'", '"')


@lru_cache(maxsize=None)
def get_language(grammar: str) -> Language:
    """Load a grammar once per process."""
    if grammar == "typescript":
        return Language(tsts.language_typescript())
    return Language(tsts.language_tsx())


def grammar_for_path(file_path: str) -> str:
    """Pick the grammar for a file name: 'typescript' or 'tsx'."""
    suffix = PurePath(file_path).suffix.lower()
    return "typescript" if suffix in TYPESCRIPT_SUFFIXES else "tsx"


class ScriptDocument:
    """
    Tree-sitter parse of one document, with byte/char offset helpers.
    """

    def __init__(self, text: str, file_path: str = "untitled.ts"):
        self.text = text
        self.file_path = file_path
        try:
            self._text_bytes = text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise SourceParseError(file_path, f"text is not valid UTF-8: {e}") from e
        self._ascii = len(self._text_bytes) == len(text)
        self.tree = self._parse()

    def _parse(self) -> Tree:
        try:
            parser = Parser(get_language(grammar_for_path(self.file_path)))
            tree = parser.parse(self._text_bytes)
        except (ValueError, TypeError) as e:
            raise SourceParseError(self.file_path, str(e)) from e
        if tree is None:
            raise SourceParseError(self.file_path, "parser returned no tree")
        return tree

    @property
    def root_node(self) -> Node:
        return self.tree.root_node

    def char_offset(self, byte_pos: int) -> int:
        """Convert a byte position into an index into `self.text`."""
        if self._ascii:
            return byte_pos
        return len(self._text_bytes[:byte_pos].decode("utf-8", errors="ignore"))

    def node_text(self, node: Node) -> str:
        return self._text_bytes[node.start_byte:node.end_byte].decode("utf-8")

    def has_blank_line_between(self, end_byte: int, start_byte: int) -> bool:
        return self._text_bytes[end_byte:start_byte].count(b"\n") >= 2


def parse_named_binding(document: ScriptDocument, node: Node) -> NamedBinding:
    """Parse one `import_specifier` node."""
    modifiers = [c.type for c in node.children if not c.is_named and c.type in ("type", "typeof")]
    if "typeof" in modifiers:
        raise MalformedImportError("'typeof' import specifiers are not supported", node.start_byte)

    name_node = node.child_by_field_name("name")
    if name_node is None:
        raise MalformedImportError("Import specifier without a name", node.start_byte)
    alias_node = node.child_by_field_name("alias")

    imported_name = document.node_text(name_node)
    local_name = document.node_text(alias_node) if alias_node is not None else imported_name
    return NamedBinding(
        local_name=local_name,
        imported_name=imported_name,
        is_type_only=bool(modifiers),
    )


def parse_import_statement(document: ScriptDocument, node: Node) -> ImportStatement:
    """
    Turn an `import_statement` node into an ImportStatement.
    Raises MalformedImportError for statements that cannot be re-rendered.
    """
    if node.has_error:
        raise MalformedImportError("Syntax error inside import statement", node.start_byte)

    type_keyword = None
    clause = None
    attributes = None
    source = node.child_by_field_name("source")

    for child in node.children:
        if not child.is_named and child.type in ("type", "typeof"):
            type_keyword = child.type
        elif child.type == "import_clause":
            clause = child
        elif child.type == "import_require_clause":
            raise MalformedImportError("'import x = require()' is not an import declaration", node.start_byte)
        elif child.type == "import_attribute":
            attributes = document.node_text(child)
        elif child.type == "string" and source is None:
            source = child

    if type_keyword == "typeof":
        raise MalformedImportError("'import typeof' is not supported", node.start_byte)

    if source is None or source.type != "string":
        raise MalformedImportError("Import without a module path literal", node.start_byte)

    raw_source = document.node_text(source)
    if len(raw_source) < 2 or raw_source[0] not in QUOTES or raw_source[-1] != raw_source[0]:
        raise MalformedImportError(f"Malformed module path {raw_source!r}", source.start_byte)

    default_binding = None
    namespace_binding = None
    named_bindings = None

    if clause is not None:
        for child in clause.children:
            if child.type == "identifier":
                default_binding = document.node_text(child)
            elif child.type == "namespace_import":
                names = [c for c in child.children if c.type == "identifier"]
                if not names:
                    raise MalformedImportError("Namespace import without a name", child.start_byte)
                namespace_binding = document.node_text(names[-1])
            elif child.type == "named_imports":
                named_bindings = tuple(
                    parse_named_binding(document, c)
                    for c in child.children
                    if c.type == "import_specifier"
                )

    return ImportStatement(
        module_path=raw_source[1:-1],
        source_span=TextSpan(
            document.char_offset(node.start_byte), document.char_offset(node.end_byte)
        ),
        named_bindings=named_bindings,
        default_binding=default_binding,
        namespace_binding=namespace_binding,
        is_type_only_import=type_keyword == "type",
        quote=raw_source[0],
        attributes=attributes,
    )


def _split_header(
    document: ScriptDocument, header: list[Node], comments: list[Node], first_import: Node
) -> tuple[list[Node], list[Node]]:
    """
    Split the trivia before the first import into file header and comments
    attached to the import. Comments followed by a blank line belong to the
    header.
    """
    following = comments[1:] + [first_import]
    cut = 0
    for index, (comment, nxt) in enumerate(zip(comments, following)):
        if document.has_blank_line_between(comment.end_byte, nxt.start_byte):
            cut = index + 1
    return header + comments[:cut], comments[cut:]


def extract_leading_imports(document: ScriptDocument) -> ImportBlock:
    """
    Collect the unbroken run of import statements at the top of the document.

    Comments are trivia and do not end the run; the first other statement,
    or an import that cannot be parsed, does.
    """
    imports: list[ImportStatement] = []
    header_nodes: list[Node] = []
    pending: list[Node] = []
    previous: Node | None = None
    header_separator = "\n"

    for node in document.root_node.children:
        if node.type == "hash_bang_line" and previous is None:
            header_nodes.append(node)
            continue
        if node.type == "comment":
            pending.append(node)
            continue
        if node.type != "import_statement":
            logger.debug("Leading import run ends at %s (offset %d)", node.type, node.start_byte)
            break

        try:
            statement = parse_import_statement(document, node)
        except MalformedImportError as e:
            logger.debug("Leading import run ends at malformed import: %s", e)
            break

        if previous is not None and pending and pending[0].start_point[0] == previous.end_point[0]:
            imports[-1] = replace(imports[-1], trailing_comment=document.node_text(pending.pop(0)))

        if previous is None:
            header_nodes, pending = _split_header(document, header_nodes, pending, node)
            if header_nodes:
                following = pending[0] if pending else node
                if document.has_blank_line_between(header_nodes[-1].end_byte, following.start_byte):
                    header_separator = "\n\n"

        imports.append(
            replace(statement, leading_trivia=tuple(document.node_text(c) for c in pending))
        )
        pending = []
        previous = node

    if not imports:
        return ImportBlock(imports=(), end=0)

    end = imports[-1].source_span.end
    if pending and pending[0].start_point[0] == previous.end_point[0]:
        comment = pending[0]
        imports[-1] = replace(imports[-1], trailing_comment=document.node_text(comment))
        end = document.char_offset(comment.end_byte)

    header = None
    if header_nodes:
        header = document.text[
            document.char_offset(header_nodes[0].start_byte):document.char_offset(header_nodes[-1].end_byte)
        ]

    return ImportBlock(
        imports=tuple(imports),
        end=end,
        header=header,
        header_separator=header_separator,
    )


def parse_leading_imports(text: str, file_path: str = "untitled.ts") -> ImportBlock:
    """Parse `text` and return its leading import run."""
    return extract_leading_imports(ScriptDocument(text, file_path))
