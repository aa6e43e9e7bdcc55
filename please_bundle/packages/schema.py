"""Pydantic schemas for package.json manifests."""

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator


class ExportTarget(BaseModel):
    """Condition-keyed targets for one exports subpath."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    import_: str | None = Field(None, alias="import", description="ESM entry for this subpath")
    default: str | None = Field(None, description="Fallback entry for this subpath")

    def selected(self) -> str | None:
        """Return the first present target (import, then default)."""
        if self.import_ is not None:
            return self.import_
        return self.default


class PackageManifest(BaseModel):
    """The subset of package.json that drives entry point discovery.

    Unknown fields are ignored. Entry point policy (name required, field
    priority) lives in EntryPointResolver, not here.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = Field(None, description="Package name used as the bare specifier")
    main: str | None = Field(None, description="CommonJS entry point")
    browser: str | None = Field(None, description="Browser-targeted entry point")
    module: str | None = Field(None, description="ESM entry point")
    exports: dict[str, ExportTarget] | None = Field(None, description="Conditional exports map")

    @field_validator("exports")
    @classmethod
    def _subpaths_are_relative(cls, value: dict[str, ExportTarget] | None) -> dict[str, ExportTarget] | None:
        if value is None:
            return value
        for key in value:
            if not key.startswith("."):
                raise ValueError(f"exports subpath {key!r} must start with '.'")
        return value

    def legacy_entry(self) -> str | None:
        """First present legacy field in priority order: browser, module, main."""
        for entry in (self.browser, self.module, self.main):
            if entry is not None:
                return entry
        return None
