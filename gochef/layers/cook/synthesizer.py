"""Cook phase: build every dependency named in a recipe.

The cook writes go.mod and go.sum from the recipe, synthesizes one Go file
per import group that blank-imports each package of the group, builds the
resulting program and removes the synthesized files again, whether or not
the build succeeded.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import NoReturn

from gochef.core.config.settings import CookSettings
from gochef.core.exceptions.errors import (
    AggregateError,
    BuildError,
    CleanupError,
    FileIOError,
    GoChefError,
)
from gochef.core.logger.logger import get_logger
from gochef.core.utils.go_literals import quote
from gochef.layers.cook.executor import BuildExecutor, BuildResult
from gochef.layers.prepare.serializer import parse_recipe
from gochef.models.recipe import ImportGroup, Recipe

logger = get_logger(__name__)

BUILD_CONSTRAINT_PREFIX = "//go:build "
PACKAGE_NAME = "main"
GO_MOD = "go.mod"
GO_SUM = "go.sum"


class CookPhase(str, Enum):
    """Phases of a cook run."""

    IDLE = "idle"
    VALIDATING_RECIPE = "validating_recipe"
    WRITING_INPUTS = "writing_inputs"
    BUILDING = "building"
    CLEANING_UP = "cleaning_up"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class SyntheticSource:
    """A generated Go file."""

    name: str
    content: str


@dataclass
class CookResult:
    """Outcome of a successful cook run."""

    files: list[str] = field(default_factory=list)
    build: BuildResult | None = None


def render_source(group: ImportGroup, with_entry_point: bool) -> str:
    """Render the Go source that blank-imports every package of a group.

    Args:
        group: Import group to render.
        with_entry_point: Whether to add an empty main function.

    Returns:
        Go source text.
    """
    parts: list[str] = []
    if group.build_constraints:
        parts.append(f"{BUILD_CONSTRAINT_PREFIX}{group.build_constraints}\n\n")

    parts.append(f"package {PACKAGE_NAME}\n")

    if group.packages:
        parts.append("\nimport (\n")
        for package in group.packages:
            parts.append(f"\t_ {quote(package)}\n")
        parts.append(")\n")

    if with_entry_point:
        parts.append("\nfunc main() {}\n")
    return "".join(parts)


class RecipeCook:
    """Synthesizes and builds the program described by a recipe."""

    def __init__(
        self,
        root: Path,
        settings: CookSettings | None = None,
        executor: BuildExecutor | None = None,
    ) -> None:
        """Initialize the cook.

        Args:
            root: Directory the program is synthesized and built in.
            settings: Cook settings. Defaults are used if not provided.
            executor: Build executor. Built from settings if not provided.
        """
        self.root = Path(root)
        self.settings = settings or CookSettings()
        self.executor = executor or BuildExecutor(
            go_binary=self.settings.go_binary,
            output_path=self.settings.output_path,
        )
        self.phase = CookPhase.IDLE

    def _set_phase(self, phase: CookPhase) -> None:
        logger.debug(f"Cook phase: {self.phase.value} -> {phase.value}")
        self.phase = phase

    def _fail(self, *errors: GoChefError | None) -> NoReturn:
        """Enter the failed phase and raise the collected errors."""
        self._set_phase(CookPhase.FAILED)
        collected = [e for e in errors if e is not None]
        if len(collected) == 1:
            raise collected[0]
        raise AggregateError("Cook failed with multiple errors", collected)

    def load_recipe(self, recipe_path: Path) -> Recipe:
        """Read and validate a recipe file.

        Args:
            recipe_path: Recipe location, relative paths resolved against root.

        Raises:
            FileIOError: If the recipe cannot be read.
            RecipeFormatError: If the recipe is malformed.
        """
        path = self.root / recipe_path
        try:
            data = path.read_bytes()
        except OSError as e:
            raise FileIOError(
                f"Could not read recipe at {path}",
                path=str(path),
                details={"error": e.strerror or str(e)},
            ) from e
        return parse_recipe(data, recipe_path=str(path))

    def plan_sources(self, groups: tuple[ImportGroup, ...]) -> list[SyntheticSource]:
        """Lay out one synthetic file per import group.

        The first file is always unconditional and holds the entry point.
        If the first group is constrained, or there are no groups, an
        unconditional file without imports is added in front.
        """
        ordered = list(groups)
        if not ordered or not ordered[0].is_unconditional:
            ordered.insert(0, ImportGroup())

        sources: list[SyntheticSource] = []
        for index, group in enumerate(ordered):
            if index == 0:
                name = self.settings.main_file
            else:
                name = self.settings.file_pattern.format(index=index)
            sources.append(
                SyntheticSource(name=name, content=render_source(group, with_entry_point=index == 0))
            )
        return sources

    def _write(self, name: str, content: str) -> None:
        path = self.root / name
        try:
            # bytes keep line endings verbatim
            data = content.encode("utf-8")
            path.write_bytes(data)
        except (OSError, UnicodeEncodeError) as e:
            raise FileIOError(
                f"Could not write {name}",
                path=str(path),
                details={"error": getattr(e, "strerror", None) or str(e)},
            ) from e

    def _remove(self, names: list[str]) -> CleanupError | None:
        """Remove synthesized files, collecting every failure."""
        failures: list[FileIOError] = []
        for name in names:
            path = self.root / name
            try:
                path.unlink()
            except OSError as e:
                logger.error(f"Could not remove {path}: {e}")
                failures.append(
                    FileIOError(
                        f"Could not remove {name}",
                        path=str(path),
                        details={"error": e.strerror or str(e)},
                    )
                )
        if failures:
            return CleanupError(
                f"Could not remove {len(failures)} synthesized file(s)",
                failures,
            )
        return None

    def cook(self, recipe_path: Path, tags: str | None = None) -> CookResult:
        """Synthesize and build the program described by a recipe.

        Args:
            recipe_path: Recipe location, relative paths resolved against root.
            tags: Optional value for 'go build -tags'.

        Returns:
            CookResult naming the synthesized files and the build outcome.

        Raises:
            FileIOError: If the recipe or an input file cannot be read or written.
            RecipeFormatError: If the recipe is malformed.
            BuildError: If the build command fails.
            CleanupError: If synthesized files could not be removed.
            AggregateError: If several of the above happened in one run.
        """
        self._set_phase(CookPhase.VALIDATING_RECIPE)
        try:
            recipe = self.load_recipe(recipe_path)
        except GoChefError as e:
            self._fail(e)
        logger.info(
            f"Loaded recipe with {len(recipe.import_groups)} groups, "
            f"{recipe.package_count} packages"
        )

        self._set_phase(CookPhase.WRITING_INPUTS)
        sources = self.plan_sources(recipe.import_groups)
        written: list[str] = []
        try:
            self._write(GO_MOD, recipe.go_mod)
            self._write(GO_SUM, recipe.go_sum)
            for source in sources:
                try:
                    self._write(source.name, source.content)
                finally:
                    if (self.root / source.name).exists():
                        written.append(source.name)
                logger.debug(f"Synthesized {source.name}")
        except FileIOError as e:
            self._fail(e, self._remove(written))

        self._set_phase(CookPhase.BUILDING)
        try:
            build = self.executor.build(self.root, tags)
        finally:
            self._set_phase(CookPhase.CLEANING_UP)
            cleanup_error = self._remove(written)

        build_error: BuildError | None = None
        if not build.success:
            build_error = BuildError(
                build.error_message or "Build failed",
                command=build.command,
                return_code=build.return_code,
            )
        if build_error or cleanup_error:
            self._fail(build_error, cleanup_error)

        self._set_phase(CookPhase.DONE)
        return CookResult(files=[source.name for source in sources], build=build)


def cook(
    root: Path,
    recipe_path: Path,
    tags: str | None = None,
    settings: CookSettings | None = None,
    executor: BuildExecutor | None = None,
) -> CookResult:
    """Synthesize and build the program described by a recipe in root.

    See RecipeCook.cook for details.
    """
    return RecipeCook(root, settings=settings, executor=executor).cook(recipe_path, tags=tags)
