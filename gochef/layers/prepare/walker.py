"""Source tree traversal."""

import os
from collections.abc import Iterator
from pathlib import Path

from gochef.core.exceptions.errors import FileIOError
from gochef.core.logger.logger import get_logger

logger = get_logger(__name__)


def is_hidden(name: str, hidden_prefix: str = ".") -> bool:
    """Return True if a directory entry name is hidden."""
    return name.startswith(hidden_prefix)


def walk_sources(
    root: Path,
    suffix: str = ".go",
    hidden_prefix: str = ".",
) -> Iterator[Path]:
    """Yield source files below root, relative to root.

    Hidden entries are skipped and hidden directories are not descended
    into. The root itself is never treated as hidden. Symlinked
    directories are not followed.

    Args:
        root: Directory to traverse.
        suffix: File name suffix of source files.
        hidden_prefix: Name prefix marking hidden entries.

    Yields:
        Paths of source files relative to root.

    Raises:
        FileIOError: If a directory cannot be listed.
    """
    root = Path(root)
    if not root.is_dir():
        raise FileIOError(f"Source root is not a directory: {root}", path=str(root))

    def on_error(err: OSError) -> None:
        raise FileIOError(
            f"Could not walk directory: {err.filename}",
            path=str(err.filename),
            details={"error": err.strerror or str(err)},
        ) from err

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        current = Path(dirpath)

        kept: list[str] = []
        for name in sorted(dirnames):
            if is_hidden(name, hidden_prefix):
                logger.debug(f"Skipping hidden directory: {current / name}")
                continue
            kept.append(name)
        # os.walk only descends into what is left in dirnames
        dirnames[:] = kept

        for name in sorted(filenames):
            if is_hidden(name, hidden_prefix):
                logger.debug(f"Skipping hidden file: {current / name}")
                continue
            if name.endswith(suffix):
                yield (current / name).relative_to(root)
