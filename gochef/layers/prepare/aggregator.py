"""Grouping of import paths by build constraint."""

from collections.abc import Iterable

from gochef.core.logger.logger import get_logger
from gochef.models.header import FileImports
from gochef.models.recipe import ImportGroup

logger = get_logger(__name__)


class ImportsBuilder:
    """Accumulates the external imports of a module, keyed by build constraint.

    The mutable grouping stays private; callers only ever see the sorted,
    immutable result of import_groups().
    """

    def __init__(self, module_path: str) -> None:
        """Initialize the builder.

        Args:
            module_path: Path of the module being scanned. Imports below
                "<module_path>/" are treated as self-imports and dropped.
        """
        self.module_path = module_path
        self._module_prefix = f"{module_path}/"
        self._imports: dict[str, set[str]] = {}
        self._files_added = 0

    @property
    def files_added(self) -> int:
        """Return the number of files that contributed imports."""
        return self._files_added

    def is_self_import(self, package: str) -> bool:
        """Return True if package lives inside the scanned module.

        The bare module path has no trailing separator and is not matched.
        """
        return package.startswith(self._module_prefix)

    def add_file(self, file_imports: FileImports) -> None:
        """Record the imports of one parsed file."""
        # Fast path: nothing to do for files without imports
        if not file_imports.has_imports:
            return

        self.add_imports(file_imports.build_constraints, file_imports.import_paths)
        self._files_added += 1

    def add_imports(self, build_constraints: str, packages: Iterable[str]) -> None:
        """Record import paths under the given build constraint."""
        group = self._imports.setdefault(build_constraints, set())
        for package in packages:
            if self.is_self_import(package):
                logger.debug(f"Ignoring self-import: {package}")
                continue
            group.add(package)

    def import_groups(self) -> tuple[ImportGroup, ...]:
        """Return the finalized groups, sorted for deterministic output.

        Groups are ordered by build constraint (the unconditional group
        first) and their packages lexicographically. Groups left empty
        because every import was a self-import are omitted.
        """
        return tuple(
            ImportGroup(
                build_constraints=constraint,
                packages=tuple(sorted(self._imports[constraint])),
            )
            for constraint in sorted(self._imports)
            if self._imports[constraint]
        )
