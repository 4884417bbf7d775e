"""Custom exception definitions for gochef."""

from collections.abc import Sequence
from typing import Any


class GoChefError(Exception):
    """Base exception for all gochef errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            details: Additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class UsageError(GoChefError):
    """Exception raised for conflicting or missing command line modes."""


class FileIOError(GoChefError):
    """Exception raised when a file cannot be read, written or listed."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize file I/O error.

        Args:
            message: Error message.
            path: File or directory that caused the error.
            details: Additional error details.
        """
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, details)


class ParseError(GoChefError):
    """Exception raised for a malformed go.mod or Go source header."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        line: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize parse error.

        Args:
            message: Error message.
            file_path: File that failed to parse.
            line: 1-based line of the offending construct.
            details: Additional error details.
        """
        details = details or {}
        if file_path:
            details["file_path"] = file_path
        if line is not None:
            details["line"] = line
        super().__init__(message, details)


class RecipeFormatError(GoChefError):
    """Exception raised for a structurally invalid recipe."""

    def __init__(
        self,
        message: str,
        recipe_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if recipe_path:
            details["recipe_path"] = recipe_path
        super().__init__(message, details)


class BuildError(GoChefError):
    """Exception raised when the external build command fails."""

    def __init__(
        self,
        message: str,
        command: str | None = None,
        return_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize build error.

        Args:
            message: Error message.
            command: The command line that was executed.
            return_code: Exit code of the command, -1 if it never ran.
            details: Additional error details.
        """
        details = details or {}
        if command:
            details["command"] = command
        if return_code is not None:
            details["return_code"] = return_code
        super().__init__(message, details)


class AggregateError(GoChefError):
    """Several independent failures reported together.

    Each underlying error is kept as-is in ``errors`` so callers can inspect
    them individually; the message lists all of them.
    """

    def __init__(
        self,
        message: str,
        errors: Sequence[BaseException],
        details: dict[str, Any] | None = None,
    ) -> None:
        self.errors: tuple[BaseException, ...] = tuple(errors)
        super().__init__(message, details)

    def __str__(self) -> str:
        lines = [super().__str__()]
        for error in self.errors:
            lines.append(f"  - {error}")
        return "\n".join(lines)


class CleanupError(AggregateError):
    """Exception raised when synthesized files could not be removed."""


class ConfigurationError(GoChefError):
    """Exception raised for configuration errors."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error message.
            config_key: Configuration key that caused the error.
            details: Additional error details.
        """
        details = details or {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
