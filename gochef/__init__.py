"""gochef - cache Go module dependency builds across source edits."""

__version__ = "0.1.0"
