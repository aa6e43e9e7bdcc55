"""Error taxonomy for package scanning, specifier resolution and loading.

Every failure is terminal for a bundle run: nothing here is retried or
recovered locally. Errors carry the context a user needs to find the
offending manifest, specifier or path.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .identity import FileIdentity


class ResolutionError(Exception):
    """Base class for all please-bundle errors."""


# ----- Manifest scanning -----


class ManifestError(ResolutionError):
    """Failure tied to a specific package manifest."""

    def __init__(self, message: str, manifest_path: Path | None = None):
        super().__init__(message)
        self.manifest_path = manifest_path


class ManifestReadError(ManifestError):
    """Manifest could not be read from disk."""


class ManifestParseError(ManifestError):
    """Manifest is not valid JSON or does not match the manifest schema."""


class MissingPackageName(ManifestError):
    """Manifest has no ``name`` field."""


class MissingEntryPoint(ManifestError):
    """Manifest has no exports map and none of browser/module/main."""


class MissingConditionEntry(ManifestError):
    """Exports subpath declares neither an ``import`` nor a ``default`` target."""

    def __init__(self, message: str, subpath: str, manifest_path: Path | None = None):
        super().__init__(message, manifest_path)
        self.subpath = subpath


class UnresolvedExportTarget(ManifestError):
    """Entry point target does not exist or cannot be canonicalized."""

    def __init__(self, message: str, target: Path, manifest_path: Path | None = None):
        super().__init__(message, manifest_path)
        self.target = target


class DuplicatePackageName(ManifestError):
    """Two manifests export the same name (only raised in strict mode)."""

    def __init__(self, message: str, name: str, manifest_path: Path | None = None, previous: Path | None = None):
        super().__init__(message, manifest_path)
        self.name = name
        self.previous = previous


# ----- Specifier resolution -----


class SpecifierError(ResolutionError):
    """Failure resolving an import specifier against a base file."""

    def __init__(self, message: str, specifier: str, base: FileIdentity):
        super().__init__(message)
        self.specifier = specifier
        self.base = base


class BaseNotResolvable(SpecifierError):
    """Base identity is virtual, so there is no directory to resolve against."""


class UnresolvedRelativePath(SpecifierError):
    """Relative specifier does not point at an existing path."""


# ----- Loading and bundling -----


class UnsupportedIdentity(ResolutionError):
    """Loader was asked for a non-concrete identity."""

    def __init__(self, message: str, identity: FileIdentity):
        super().__init__(message)
        self.identity = identity


class ModuleReadError(ResolutionError):
    """Concrete module file could not be read."""

    def __init__(self, message: str, identity: FileIdentity):
        super().__init__(message)
        self.identity = identity


class EntryFileNotFound(ResolutionError):
    """Configured entry file does not exist."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class DuplicateOrAmbiguousOutput(ResolutionError):
    """Bundler produced something other than exactly one output module."""

    def __init__(self, message: str, count: int):
        super().__init__(message)
        self.count = count


# ----- Configuration -----


class SettingsError(ResolutionError):
    """Settings file is malformed or fails validation."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path
