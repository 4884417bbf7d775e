"""Data models for parsed Go file headers."""

from pydantic import BaseModel, Field


class ImportSpec(BaseModel):
    """A single Go import declaration."""

    path: str  # Unquoted import path
    alias: str | None = None  # "_" for blank imports, "." for dot imports
    line: int = 0


class FileImports(BaseModel):
    """Header information of one Go source file."""

    file_path: str
    package: str
    imports: list[ImportSpec] = Field(default_factory=list)
    build_constraints: str = ""  # Empty for unconditional files

    @property
    def import_paths(self) -> list[str]:
        """Return the import paths in declaration order."""
        return [spec.path for spec in self.imports]

    @property
    def has_imports(self) -> bool:
        """Return True if the file imports anything."""
        return bool(self.imports)
