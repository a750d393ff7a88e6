"""
Custom exceptions for prettyimports.
"""

class PrettyImportsError(Exception):
    """Base exception for all prettyimports errors."""
    pass


class SourceParseError(PrettyImportsError):
    """Raised when a document cannot be parsed into statements."""
    def __init__(self, file_path: str, message: str):
        self.file_path = file_path
        self.message = message
        super().__init__(f"Could not parse {file_path}: {message}")


class MalformedImportError(PrettyImportsError):
    """Raised when an import-like statement cannot be reorganized."""
    def __init__(self, message: str, offset: int):
        self.message = message
        self.offset = offset
        super().__init__(f"{message} (at offset {offset})")
