"""Data models module."""

from gochef.models.header import FileImports, ImportSpec
from gochef.models.recipe import ImportGroup, Recipe

__all__ = [
    "FileImports",
    "ImportSpec",
    "ImportGroup",
    "Recipe",
]
