"""
Import reorganization engine.

`organize` is a pure function of the document text and the configuration:
it never touches the file system and never raises. Diagnostics go to the
injected logger.
"""
import logging

from prettyimports.support.config import (
    DEFAULT_SORT_METHOD,
    SORT_METHODS,
    OrganizeImportsConfig,
)
from prettyimports.support.exceptions import PrettyImportsError
from prettyimports.support.models import EditResult, NoChange, Replace, TextSpan
from prettyimports.core.binding_sorter import with_sorted_bindings
from prettyimports.core.comparator import sort_imports
from prettyimports.core.import_classifier import classify_all
from prettyimports.core.import_parser import parse_leading_imports
from prettyimports.core.renderer import render_block

_logger = logging.getLogger(__name__)

BYTE_ORDER_MARK = "\ufeff"


def detect_newline(text: str) -> str:
    return "\r\n" if "\r\n" in text else "\n"


def organize(
    document_text: str,
    file_path: str,
    config: OrganizeImportsConfig | None = None,
    logger: logging.Logger | None = None,
) -> EditResult:
    """
    Organize the leading imports of a document.

    Returns Replace(span, text) covering everything from the start of the
    file to the end of the last leading import, or NoChange when the
    imports are already organized or the document could not be handled.
    """
    log = logger or _logger
    config = config or OrganizeImportsConfig()

    try:
        return _organize(document_text, file_path, config, log)
    except PrettyImportsError as e:
        log.warning("Skipping %s: %s", file_path, e)
        return NoChange()
    except Exception as e:
        # A failed reorganize must never block the caller's save
        log.error("ERROR in organize for %s: %s", file_path, e, exc_info=True)
        return NoChange()


def _organize(
    document_text: str,
    file_path: str,
    config: OrganizeImportsConfig,
    log: logging.Logger,
) -> EditResult:
    block = parse_leading_imports(document_text, file_path)

    if not block.imports:
        log.debug("No imports found in %s", file_path)
        return NoChange()

    log.debug("Found %d imports to organize", len(block.imports))

    classified = classify_all(block.imports, config)
    for imp in classified.third_party:
        log.debug("Third-party import: %s", imp.module_path)
    for imp in classified.local:
        log.debug("Local import: %s", imp.module_path)
    log.debug(
        "Categorized imports: %d third-party, %d local",
        len(classified.third_party),
        len(classified.local),
    )

    sort_method = config.sort_method
    if sort_method not in SORT_METHODS:
        log.warning("Unknown sort method %r, using %s", sort_method, DEFAULT_SORT_METHOD)
        sort_method = DEFAULT_SORT_METHOD
    log.debug("Sorting imports by %s", sort_method)

    third_party = [with_sorted_bindings(s) for s in sort_imports(classified.third_party, sort_method)]
    local = [with_sorted_bindings(s) for s in sort_imports(classified.local, sort_method)]

    new_text = render_block(
        third_party,
        local,
        header=block.header,
        header_separator=block.header_separator,
        newline=detect_newline(document_text),
    )

    # A byte order mark stays in front of the block
    start = 1 if document_text.startswith(BYTE_ORDER_MARK) else 0
    span = TextSpan(start, block.end)
    if document_text[span.start:span.end] == new_text:
        log.debug("No changes needed to imports in %s", file_path)
        return NoChange()

    log.debug("Generated new import text for %s, returning edit", file_path)
    return Replace(span, new_text)
