"""Package registry - exported names mapped to entry point files.

Built once from an ordered list of manifests before any specifier is
resolved, then read-only for the rest of the run. The registry is a plain
value handed to resolvers; there is no process-wide instance.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import Iterator
from pathlib import Path
from types import MappingProxyType
from typing import Literal
from typing import NamedTuple

from ..errors import DuplicatePackageName
from ..identity import FileIdentity
from ..packages.discovery import manifests_for_package_dirs
from ..packages.entry_points import EntryPointResolver
from ..packages.scanner import scan_manifest

logger = logging.getLogger(__name__)

DuplicatePolicy = Literal["replace", "error"]


class RegistryEntry(NamedTuple):
    """One exported name with the manifest that registered it."""

    name: str
    identity: FileIdentity
    manifest_path: Path


class PackageRegistry:
    """Immutable mapping of exported name to entry point identity."""

    def __init__(self, entries: Iterable[RegistryEntry] = ()):
        """Initialize from already-resolved entries.

        Later entries replace earlier ones with the same name. Use build()
        to scan manifests.
        """
        table: dict[str, RegistryEntry] = {}
        for entry in entries:
            table[entry.name] = entry
        self._entries = MappingProxyType(table)

    @classmethod
    def build(
        cls,
        manifest_paths: Iterable[str | Path],
        on_duplicate: DuplicatePolicy = "replace",
        entry_point_resolver: EntryPointResolver | None = None,
    ) -> PackageRegistry:
        """Scan manifests in order and fold their entry points into one registry.

        Args:
            manifest_paths: package.json files, in scan order (repeats are scanned once)
            on_duplicate: "replace" keeps the last scanned manifest for a clashing
                name (logged as a warning); "error" raises DuplicatePackageName
            entry_point_resolver: Resolver to use (default: EntryPointResolver())

        Returns:
            Fully built registry

        Raises:
            ResolutionError: Any manifest failure aborts the whole build
        """
        resolver = entry_point_resolver or EntryPointResolver()
        table: dict[str, RegistryEntry] = {}
        scanned: set[Path] = set()

        for manifest_path in manifest_paths:
            manifest_path = Path(manifest_path)
            if manifest_path.absolute() in scanned:
                logger.debug(f"[package:scan] {manifest_path} already scanned, skipping")
                continue
            scanned.add(manifest_path.absolute())
            manifest = scan_manifest(manifest_path)
            for name, identity in resolver.resolve(manifest, manifest_path.parent, manifest_path):
                if name in table:
                    previous = table[name].manifest_path
                    if on_duplicate == "error":
                        raise DuplicatePackageName(
                            f"Package name '{name}' exported by both {previous} and {manifest_path}",
                            name=name,
                            manifest_path=manifest_path,
                            previous=previous,
                        )
                    logger.warning(f"Package name '{name}' from {manifest_path} replaces the one from {previous}")
                    # Move to the end so iteration order reflects the winning scan
                    del table[name]
                table[name] = RegistryEntry(name, identity, manifest_path)

        logger.info(f"Built package registry with {len(table)} exported names")
        return cls(table.values())

    @classmethod
    def from_package_dirs(
        cls,
        package_dirs: Iterable[str | Path],
        on_duplicate: DuplicatePolicy = "replace",
    ) -> PackageRegistry:
        """Build from package directories that each contain a package.json."""
        return cls.build(manifests_for_package_dirs([Path(d) for d in package_dirs]), on_duplicate)

    def get(self, name: str) -> FileIdentity | None:
        entry = self._entries.get(name)
        return entry.identity if entry is not None else None

    def entry(self, name: str) -> RegistryEntry | None:
        return self._entries.get(name)

    def entries(self) -> list[RegistryEntry]:
        return list(self._entries.values())

    def names(self) -> list[str]:
        return list(self._entries)

    def as_dict(self) -> dict[str, FileIdentity]:
        """Copy of the name -> identity mapping."""
        return {name: entry.identity for name, entry in self._entries.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __getitem__(self, name: str) -> FileIdentity:
        return self._entries[name].identity

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PackageRegistry({len(self._entries)} names)"
