"""
Single entry point for everything that asks for imports to be organized.

Editor hooks (commands, save events, formatter and code-action providers)
and the file watcher all reduce to the same intent: take a snapshot of a
document, run the engine, hand the result back to the caller to apply.
"""
import logging
from enum import Enum
from pathlib import PurePath

from prettyimports.support.config import OrganizeImportsConfig
from prettyimports.support.models import EditResult, NoChange
from prettyimports.core.engine import organize

_logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES = frozenset(
    {"javascript", "typescript", "javascriptreact", "typescriptreact", "vue"}
)

LANGUAGE_BY_SUFFIX = {
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascriptreact",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "typescriptreact",
    ".vue": "vue",
}


class Trigger(str, Enum):
    """Why the engine is being invoked."""

    MANUAL = "manual"
    SHORTCUT = "shortcut"
    WILL_SAVE = "will-save"
    DID_SAVE = "did-save"
    FORMAT = "format"
    CODE_ACTION = "code-action"
    WATCH = "watch"

    @property
    def is_manual(self) -> bool:
        return self in (Trigger.MANUAL, Trigger.SHORTCUT)


def detect_language(file_path: str) -> str | None:
    """Language id for a file name, or None when unsupported."""
    return LANGUAGE_BY_SUFFIX.get(PurePath(file_path).suffix.lower())


def handle_trigger(
    trigger: Trigger,
    text: str,
    file_path: str,
    config: OrganizeImportsConfig | None = None,
    language_id: str | None = None,
    logger: logging.Logger | None = None,
) -> EditResult:
    """
    Run the engine for a document snapshot.

    Manual commands always run; automatic triggers skip documents whose
    language is not supported. Applying the result is up to the caller.
    """
    log = logger or _logger
    trigger = Trigger(trigger)
    language = language_id or detect_language(file_path)

    if not trigger.is_manual and language not in SUPPORTED_LANGUAGES:
        log.debug("Skipping unsupported language %s for %s", language, file_path)
        return NoChange()

    log.debug("Processing %s (%s trigger, language %s)", file_path, trigger.value, language)
    edit = organize(text, file_path, config, logger=log)
    log.debug("%s: %s", file_path, "edit produced" if edit.changed else "no edits needed")
    return edit
