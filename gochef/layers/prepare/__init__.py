"""Prepare phase.

Scans a Go module for its external imports and records them, grouped by
build constraint, in a deterministic recipe.

Example usage:
    from gochef.layers.prepare import prepare

    recipe = prepare(Path("."), Path("recipe.json"))
    print(f"Groups: {len(recipe.import_groups)}")
"""

from gochef.layers.prepare.aggregator import ImportsBuilder
from gochef.layers.prepare.extractor import GoHeaderParser
from gochef.layers.prepare.gomod import read_module_path
from gochef.layers.prepare.pipeline import build_recipe, prepare
from gochef.layers.prepare.serializer import parse_recipe, serialize_recipe
from gochef.layers.prepare.walker import walk_sources

__all__ = [
    "GoHeaderParser",
    "ImportsBuilder",
    "build_recipe",
    "parse_recipe",
    "prepare",
    "read_module_path",
    "serialize_recipe",
    "walk_sources",
]
