"""Prepare phase: scan a module and write its recipe."""

from pathlib import Path

from gochef.core.config.settings import PrepareSettings
from gochef.core.exceptions.errors import FileIOError
from gochef.core.logger.logger import get_logger
from gochef.layers.prepare.aggregator import ImportsBuilder
from gochef.layers.prepare.extractor import GoHeaderParser
from gochef.layers.prepare.gomod import read_module_path
from gochef.layers.prepare.serializer import serialize_recipe
from gochef.layers.prepare.walker import walk_sources
from gochef.models.recipe import Recipe

logger = get_logger(__name__)

GO_MOD = "go.mod"
GO_SUM = "go.sum"


def _read_text(path: Path, description: str) -> str:
    # Bytes are decoded directly so line endings survive verbatim
    try:
        return path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileIOError(
            f"Could not read {description}: {path}",
            path=str(path),
            details={"error": str(e)},
        ) from e


def build_recipe(root: Path, settings: PrepareSettings | None = None) -> Recipe:
    """Scan a module and build its recipe without writing anything.

    Args:
        root: Module root containing go.mod and go.sum.
        settings: Prepare settings. Defaults are used if not provided.

    Returns:
        The recipe describing the module's external imports.

    Raises:
        FileIOError: If go.mod, go.sum or a source file cannot be read.
        ParseError: If go.mod or a source file header is malformed.
    """
    settings = settings or PrepareSettings()
    root = Path(root)

    # The module path identifies intra-module imports to be filtered out
    go_mod = _read_text(root / GO_MOD, GO_MOD)
    module_path = read_module_path(go_mod, file_path=str(root / GO_MOD))
    go_sum = _read_text(root / GO_SUM, GO_SUM)
    logger.info(f"Preparing recipe for module {module_path}")

    parser = GoHeaderParser(constraint_prefix=settings.constraint_prefix)
    builder = ImportsBuilder(module_path)

    scanned = 0
    for relative in walk_sources(
        root,
        suffix=settings.source_suffix,
        hidden_prefix=settings.hidden_prefix,
    ):
        builder.add_file(parser.parse_file(root / relative, display_path=relative.as_posix()))
        scanned += 1

    groups = builder.import_groups()
    recipe = Recipe(import_groups=groups, go_mod=go_mod, go_sum=go_sum)
    logger.info(
        f"Scanned {scanned} files ({builder.files_added} with imports): "
        f"{recipe.package_count} packages in {len(groups)} groups"
    )
    return recipe


def prepare(
    root: Path,
    output_path: Path,
    settings: PrepareSettings | None = None,
) -> Recipe:
    """Scan a module and write its recipe to output_path.

    Nothing is written if scanning fails.

    Args:
        root: Module root containing go.mod and go.sum.
        output_path: Recipe destination; relative paths are resolved against root.
        settings: Prepare settings.

    Returns:
        The recipe that was written.

    Raises:
        FileIOError: If an input cannot be read or the recipe cannot be written.
        ParseError: If go.mod or a source file header is malformed.
    """
    root = Path(root)
    recipe = build_recipe(root, settings)

    destination = root / output_path
    # encode before the destination is opened
    data = serialize_recipe(recipe).encode("utf-8")
    try:
        destination.write_bytes(data)
    except OSError as e:
        raise FileIOError(
            f"Could not write recipe to file {destination}",
            path=str(destination),
            details={"error": e.strerror or str(e)},
        ) from e

    logger.info(f"Wrote recipe to {destination}")
    return recipe
