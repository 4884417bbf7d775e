"""Recipe (de)serialization.

The serialized recipe is compact JSON with a fixed key order. Given equal
recipes the output is byte-for-byte identical, which is what lets a build
cache keyed on the recipe file survive unrelated source edits.
"""

import json

from pydantic import ValidationError

from gochef.core.exceptions.errors import RecipeFormatError
from gochef.models.recipe import Recipe


def serialize_recipe(recipe: Recipe) -> str:
    """Render a recipe as deterministic JSON text.

    Args:
        recipe: Recipe to serialize.

    Returns:
        Compact JSON text.
    """
    return json.dumps(recipe.to_dict(), separators=(",", ":"), ensure_ascii=False)


def parse_recipe(text: str | bytes, recipe_path: str | None = None) -> Recipe:
    """Parse and structurally validate recipe JSON.

    Args:
        text: Serialized recipe.
        recipe_path: Path used in error messages.

    Returns:
        The parsed recipe.

    Raises:
        RecipeFormatError: If the text is not valid JSON or not a recipe.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RecipeFormatError(
            f"Recipe is not valid JSON: {e}",
            recipe_path=recipe_path,
        ) from e

    if not isinstance(data, dict):
        raise RecipeFormatError(
            "Recipe must be a JSON object",
            recipe_path=recipe_path,
            details={"type": type(data).__name__},
        )

    try:
        return Recipe.model_validate(data)
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        ]
        raise RecipeFormatError(
            "Recipe has an invalid structure",
            recipe_path=recipe_path,
            details={"errors": problems},
        ) from e
