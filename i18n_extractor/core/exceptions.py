"""Custom exceptions for the extractor.

All fatal errors derive from ExtractorError so callers (the CLI in
particular) can report them uniformly. Aborting the rest of a file is
not an error and has no exception here; see LineOutcome.
"""

from typing import Any


class ExtractorError(Exception):
    """Base exception for all extractor-specific errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            details: Optional dictionary with additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidSyntax(ExtractorError):
    """A template failed structural validation (before or after rewriting)."""

    def __init__(self, path: str, reason: str, line_no: int | None = None) -> None:
        message = f"invalid syntax for haml {path}: {reason}"
        details: dict[str, Any] = {"path": path}
        if line_no is not None:
            details["line"] = line_no
        super().__init__(message, details)
        self.path = path
        self.reason = reason
        self.line_no = line_no


class NotADirectory(ExtractorError):
    """A path that must be a directory is not one."""

    def __init__(self, path: str) -> None:
        super().__init__(f"not a directory: {path}", {"path": path})
        self.path = path


class NotDefinedLineType(ExtractorError):
    """The classifier produced a line role outside the known set."""

    def __init__(self, role: Any, line_no: int | None = None) -> None:
        message = f"line type not defined: {role!r}"
        details: dict[str, Any] = {"role": repr(role)}
        if line_no is not None:
            details["line"] = line_no
        super().__init__(message, details)
        self.role = role
        self.line_no = line_no
