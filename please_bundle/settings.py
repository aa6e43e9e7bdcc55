"""Settings management for please-bundle.

Simple, scope-aware YAML settings. Scope priority (most specific wins):
1. local (.please-bundle/settings.local.yaml) - gitignored, machine-specific
2. project (.please-bundle/settings.yaml) - committed, team-shared
3. global (~/.please-bundle/settings.yaml) - user defaults

Unlike editor-style settings, a malformed file is an error: a bundle run
built from half-read configuration would silently resolve differently.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any
from typing import Literal

import yaml
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError

from .errors import SettingsError
from .module_resolution.registry import DuplicatePolicy

Scope = Literal["local", "project", "global"]

SETTINGS_DIR = ".please-bundle"


class BundleConfig(BaseModel):
    """Effective configuration for a bundle run."""

    output: Path = Field(default=Path("bundle.js"), description="Bundle artifact path")
    source_map: Path | None = Field(None, description="Optional source map output path")
    packages: list[Path] = Field(default_factory=list, description="Package directories, each with a package.json")
    workspaces: list[Path] = Field(default_factory=list, description="Roots scanned recursively for package.json")
    entries: list[Path] = Field(default_factory=list, description="Entry files")
    on_duplicate: DuplicatePolicy = Field(default="replace", description="Policy for clashing package names")


@dataclass
class SettingsPaths:
    """Standard paths for settings files."""

    global_settings: Path
    project_settings: Path | None
    local_settings: Path | None

    @classmethod
    def default(cls) -> SettingsPaths:
        """Create default paths for the standard layout."""
        return cls(
            global_settings=Path.home() / SETTINGS_DIR / "settings.yaml",
            project_settings=Path.cwd() / SETTINGS_DIR / "settings.yaml",
            local_settings=Path.cwd() / SETTINGS_DIR / "settings.local.yaml",
        )

    def in_order(self) -> list[tuple[Scope, Path]]:
        """Available scopes from lowest to highest precedence."""
        scopes: list[tuple[Scope, Path | None]] = [
            ("global", self.global_settings),
            ("project", self.project_settings),
            ("local", self.local_settings),
        ]
        return [(scope, path) for scope, path in scopes if path is not None]


class AppSettings:
    """Settings reader with scope-aware merging.

    Usage:
        settings = AppSettings()
        config = settings.get_config(overrides={"entries": ["src/main.js"]})
    """

    def __init__(self, paths: SettingsPaths | None = None) -> None:
        self.paths = paths or SettingsPaths.default()

    def get_merged_settings(self) -> dict[str, Any]:
        """Load and merge settings from all scopes."""
        result: dict[str, Any] = {}
        for _scope, path in self.paths.in_order():
            result = deep_merge(result, self._read_file(path))
        return result

    def get_config(self, overrides: dict[str, Any] | None = None) -> BundleConfig:
        """Build the effective BundleConfig.

        Args:
            overrides: Values that win over every file scope (e.g. CLI flags).
                Keys whose value is None or an empty list are ignored.

        Raises:
            SettingsError: Merged settings fail validation
        """
        merged = self.get_merged_settings()
        for key, value in (overrides or {}).items():
            if value is None or value == [] or value == ():
                continue
            merged[key] = value

        try:
            return BundleConfig.model_validate(merged)
        except ValidationError as e:
            raise SettingsError(f"Invalid settings: {e}") from e

    def _read_file(self, path: Path) -> dict[str, Any]:
        """Read settings from one scope file."""
        if not path.exists():
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                content = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise SettingsError(f"Cannot read settings {path}: {e}", path) from e
        if not isinstance(content, dict):
            raise SettingsError(f"Settings {path} must be a mapping, got {type(content).__name__}", path)
        return content


def deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dicts, overlay wins."""
    result = base.copy()
    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
