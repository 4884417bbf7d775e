"""Recipe data models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ImportGroup(BaseModel):
    """Packages imported by all files sharing one build constraint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    build_constraints: str = Field(
        default="",
        alias="buildConstraints",
        description="Build constraint expression, empty for unconditional files",
    )
    packages: tuple[str, ...] = Field(
        default=(),
        description="Import paths of the group",
    )

    @field_validator("build_constraints", mode="before")
    @classmethod
    def validate_build_constraints(cls, v: Any) -> Any:
        """Treat an explicit null as unconditional."""
        return "" if v is None else v

    @field_validator("packages", mode="before")
    @classmethod
    def validate_packages(cls, v: Any) -> Any:
        """Accept null, which older recipes use for an empty list."""
        if v is None:
            return ()
        if isinstance(v, str):
            raise ValueError("packages must be a list of strings")
        return v

    @property
    def is_unconditional(self) -> bool:
        """Return True if files of this group are always compiled."""
        return not self.build_constraints

    def to_dict(self) -> dict[str, Any]:
        """Convert to the recipe's JSON shape."""
        data: dict[str, Any] = {}
        if self.build_constraints:
            data["buildConstraints"] = self.build_constraints
        data["packages"] = list(self.packages)
        return data


class Recipe(BaseModel):
    """The serialized dependency closure of a Go module."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    import_groups: tuple[ImportGroup, ...] = Field(
        default=(),
        alias="importGroups",
        description="Import groups sorted by build constraint",
    )
    go_mod: str = Field(
        alias="go.mod",
        description="Verbatim go.mod contents",
    )
    go_sum: str = Field(
        alias="go.sum",
        description="Verbatim go.sum contents",
    )

    @field_validator("import_groups", mode="before")
    @classmethod
    def validate_import_groups(cls, v: Any) -> Any:
        """Accept null for a recipe without groups."""
        return () if v is None else v

    @property
    def package_count(self) -> int:
        """Return the total number of packages across all groups."""
        return sum(len(group.packages) for group in self.import_groups)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the recipe's JSON shape, keys in artifact order."""
        return {
            "importGroups": [group.to_dict() for group in self.import_groups],
            "go.mod": self.go_mod,
            "go.sum": self.go_sum,
        }
