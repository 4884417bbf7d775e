"""Cook phase.

Materializes a program that blank-imports every package of a recipe and
builds it, so the Go build cache holds all dependencies afterwards.
"""

from gochef.layers.cook.executor import BuildExecutor, BuildResult
from gochef.layers.cook.synthesizer import (
    CookPhase,
    CookResult,
    RecipeCook,
    SyntheticSource,
    cook,
    render_source,
)

__all__ = [
    "BuildExecutor",
    "BuildResult",
    "CookPhase",
    "CookResult",
    "RecipeCook",
    "SyntheticSource",
    "cook",
    "render_source",
]
