"""
Exception classes for metaprompt schema loading and processing.

Only two conditions are fatal to a load: a malformed source document and a
missing or unreadable asset. Everything else (missing optional elements,
unresolved template tokens, malformed default encodings) resolves to a
documented fallback value and never raises.
"""


class MetapromptError(Exception):
    """Base exception for all metaprompt errors."""

    pass


class ParseError(MetapromptError):
    """Raised when a schema document is malformed at the markup level."""

    def __init__(
        self,
        source: str,
        reason: str,
        line: int | None = None,
        column: int | None = None,
    ):
        """
        Initialize the exception.

        Params:
            source: Name of the document being parsed (file path or "<string>")
            reason: Message reported by the markup parser
            line: 1-based line of the error, if known
            column: Column offset of the error, if known
        """
        self.source = source
        self.reason = reason
        self.line = line
        self.column = column
        super().__init__(f"Invalid schema document '{source}'{self.location}: {reason}")

    @property
    def location(self) -> str:
        """Format the position of the error, empty when unknown."""
        if self.line is None:
            return ""
        if self.column is None:
            return f" at line {self.line}"
        return f" at line {self.line}, column {self.column}"


class MissingAssetError(MetapromptError):
    """Raised when no schema file is available or it cannot be read."""

    def __init__(self, path: str | None, reason: str):
        """
        Initialize the exception.

        Params:
            path: The requested path, or None when nothing was selected
            reason: Why the asset is unavailable
        """
        self.path = path
        self.reason = reason
        if path is None:
            super().__init__(f"No schema available: {reason}")
        else:
            super().__init__(f"Cannot load schema '{path}': {reason}")
