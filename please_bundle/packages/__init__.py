"""
Packages - manifest scanning and entry point discovery.

Public API:
- PackageManifest / ExportTarget: package.json schema
- scan_manifest: Read and validate one manifest
- EntryPointResolver: Map a manifest to exported names
- discover_manifests / collect_manifests: Find manifests to scan
"""

from .discovery import collect_manifests
from .discovery import discover_manifests
from .discovery import manifests_for_package_dirs
from .entry_points import EntryPointResolver
from .entry_points import exported_name
from .scanner import scan_manifest
from .schema import ExportTarget
from .schema import PackageManifest

__all__ = [
    "ExportTarget",
    "PackageManifest",
    "scan_manifest",
    "EntryPointResolver",
    "exported_name",
    "discover_manifests",
    "collect_manifests",
    "manifests_for_package_dirs",
]
