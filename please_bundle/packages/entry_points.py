"""Entry point resolution - turn a manifest into exported names.

Resolution policy:
- exports map present (non-empty): one entry per subpath, legacy fields ignored
- otherwise: first of browser, module, main

Bundler-oriented builds prefer browser-targeted, then ESM, then CommonJS
entry points, which is why browser outranks module and main.
"""

import logging
from pathlib import Path

from ..errors import MissingConditionEntry
from ..errors import MissingEntryPoint
from ..errors import MissingPackageName
from ..errors import UnresolvedExportTarget
from ..identity import FileIdentity
from .schema import PackageManifest

logger = logging.getLogger(__name__)

ROOT_SUBPATH = "."


def exported_name(package_name: str, subpath: str) -> str:
    """Map an exports subpath to the specifier that imports it.

    ``"."`` maps to the package name; ``"./sub"`` maps to ``name + "/sub"``.
    Only the leading dot is dropped, the rest is kept verbatim.
    """
    if subpath == ROOT_SUBPATH:
        return package_name
    return package_name + subpath[1:]


class EntryPointResolver:
    """Resolve a validated manifest into (exported name, identity) pairs."""

    def resolve(
        self,
        manifest: PackageManifest,
        package_dir: Path,
        manifest_path: Path | None = None,
    ) -> list[tuple[str, FileIdentity]]:
        """Resolve all entry points declared by a manifest.

        Args:
            manifest: Parsed manifest
            package_dir: Directory the manifest's relative paths are resolved against
            manifest_path: Manifest location, attached to errors for display

        Returns:
            Pairs in manifest order

        Raises:
            MissingPackageName: Manifest has no name
            MissingConditionEntry: An exports subpath has neither import nor default
            MissingEntryPoint: No exports and no browser/module/main
            UnresolvedExportTarget: A target file does not exist
        """
        if manifest.name is None:
            raise MissingPackageName(f"No name for package at {manifest_path or package_dir}", manifest_path)

        name = manifest.name

        if manifest.exports:
            entries = []
            for subpath, target in manifest.exports.items():
                selected = target.selected()
                if selected is None:
                    raise MissingConditionEntry(
                        f"Package '{name}' export '{subpath}' has neither an 'import' nor a 'default' target",
                        subpath=subpath,
                        manifest_path=manifest_path,
                    )
                identity = self._resolve_target(name, package_dir, selected, manifest_path)
                entries.append((exported_name(name, subpath), identity))
            return entries

        entry = manifest.legacy_entry()
        if entry is None:
            raise MissingEntryPoint(
                f"Package '{name}' declares no exports and none of browser, module, main",
                manifest_path,
            )
        return [(name, self._resolve_target(name, package_dir, entry, manifest_path))]

    def _resolve_target(
        self,
        name: str,
        package_dir: Path,
        relative: str,
        manifest_path: Path | None,
    ) -> FileIdentity:
        target = package_dir / relative
        try:
            identity = FileIdentity.from_path(target)
        except (OSError, RuntimeError, ValueError) as e:
            raise UnresolvedExportTarget(
                f"Package '{name}' entry point {target} cannot be resolved: {e}",
                target=target,
                manifest_path=manifest_path,
            ) from e

        if not identity.path.is_file():
            raise UnresolvedExportTarget(
                f"Package '{name}' entry point {target} is not a file",
                target=target,
                manifest_path=manifest_path,
            )

        logger.debug(f"[package:entry] {name}: {relative} -> {identity}")
        return identity

    def __repr__(self) -> str:
        return "EntryPointResolver(exports > browser > module > main)"
