"""Exception definitions module."""

from gochef.core.exceptions.errors import (
    AggregateError,
    BuildError,
    CleanupError,
    ConfigurationError,
    FileIOError,
    GoChefError,
    ParseError,
    RecipeFormatError,
    UsageError,
)

__all__ = [
    "GoChefError",
    "UsageError",
    "FileIOError",
    "ParseError",
    "RecipeFormatError",
    "BuildError",
    "AggregateError",
    "CleanupError",
    "ConfigurationError",
]
