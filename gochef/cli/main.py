"""Main CLI entry point for gochef."""

from pathlib import Path

import click
from pydantic import ValidationError

from gochef import __version__
from gochef.cli.display import show_error, show_exception, show_recipe_summary, show_success
from gochef.core.config.settings import Settings
from gochef.core.exceptions.errors import ConfigurationError, GoChefError, UsageError
from gochef.core.logger.logger import get_logger, setup_logging
from gochef.layers.cook import cook
from gochef.layers.prepare import prepare

logger = get_logger(__name__)


def validate_modes(prepare_path: str | None, cook_path: str | None, tags: str | None) -> None:
    """Check that exactly one mode was requested.

    Raises:
        UsageError: If both or neither of --prepare/--cook are given, or
            --tags is combined with --prepare.
    """
    if bool(prepare_path) == bool(cook_path):
        raise UsageError("Must provide exactly one of --prepare or --cook")
    if prepare_path and tags:
        raise UsageError("Cannot specify --tags with --prepare")


def load_settings(config_path: Path | None, root: Path) -> Settings:
    """Load settings from an explicit YAML file or from gochef.yaml and .env in root."""
    try:
        return Settings.load(config_path, root=root)
    except ValidationError as e:
        source = config_path or root
        raise ConfigurationError(
            f"Invalid configuration in {source}",
            config_key=str(source),
            details={"error": str(e)},
        ) from e


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--prepare",
    "prepare_path",
    metavar="PATH",
    help="Prepare a recipe with information on dependencies and write it to PATH",
)
@click.option(
    "--cook",
    "cook_path",
    metavar="PATH",
    help="Build all the dependencies specified by the recipe at PATH",
)
@click.option(
    "--tags",
    metavar="TAGS",
    help="Set the -tags flag to use with 'go build'. Only affects --cook",
)
@click.option(
    "--root",
    "-C",
    default=".",
    show_default=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Module directory to operate in",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.version_option(__version__, prog_name="gochef")
@click.pass_context
def main(
    ctx: click.Context,
    prepare_path: str | None,
    cook_path: str | None,
    tags: str | None,
    root: Path,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """gochef - cache Go module dependency builds.

    Prepare a recipe from the imports of a module, then cook it in a
    separate step to download and compile exactly those dependencies.

    Example:
        gochef --prepare recipe.json
        gochef --cook recipe.json --tags netgo
    """
    try:
        validate_modes(prepare_path, cook_path, tags)
        settings = load_settings(config_path, root)
        setup_logging(settings.logging, level="DEBUG" if verbose else None)

        if prepare_path:
            recipe = prepare(root, Path(prepare_path), settings=settings.prepare)
            if verbose:
                show_recipe_summary(recipe)
                show_success(f"Recipe written to {prepare_path}")
        else:
            result = cook(root, Path(cook_path), tags=tags or None, settings=settings.cook)
            logger.debug(f"Cook finished: {result.build.to_dict() if result.build else {}}")
            if verbose:
                show_success(f"Built {len(result.files)} synthesized file(s)")
    except GoChefError as e:
        show_exception(e)
        ctx.exit(1)


def cli(argv: list[str] | None = None) -> int:
    """Console script entry point.

    Runs main and maps every failure, including click's own usage
    errors, to exit code 1.
    """
    try:
        rv = main.main(args=argv, prog_name="gochef", standalone_mode=False)
    except click.ClickException as e:
        show_error(e.format_message())
        return 1
    except click.Abort:
        show_error("Aborted!")
        return 1
    return rv if isinstance(rv, int) else 0


if __name__ == "__main__":
    raise SystemExit(cli())
