"""Manifest discovery - find package.json files to scan.

Two conventions:
- package directories: each directory holds exactly one package.json
- workspace roots: every package.json below the root (node_modules excluded)

Results are returned in a deterministic order because registry construction
is order-sensitive (later manifests replace earlier ones on name clashes).
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

MANIFEST_FILE = "package.json"
EXCLUDED_DIRS = frozenset({"node_modules"})


def manifests_for_package_dirs(package_dirs: list[Path]) -> list[Path]:
    """Map package directories to their manifest paths, preserving order.

    Missing manifests are not filtered here; scanning reports them as read errors.
    """
    return [Path(package_dir) / MANIFEST_FILE for package_dir in package_dirs]


def discover_manifests(root: Path) -> list[Path]:
    """Find every package.json below a workspace root.

    Args:
        root: Workspace directory to search recursively

    Returns:
        Sorted manifest paths (empty if root does not exist)

    Example:
        >>> discover_manifests(Path("./example"))
        [PosixPath('example/leftpad/package.json'), PosixPath('example/utils/package.json')]
    """
    root = Path(root)
    if not root.exists() or not root.is_dir():
        logger.debug(f"Workspace root not found: {root}")
        return []

    manifests = sorted(
        f
        for f in root.glob(f"**/{MANIFEST_FILE}")
        if f.is_file() and not EXCLUDED_DIRS.intersection(f.relative_to(root).parts)
    )

    logger.debug(f"Discovered {len(manifests)} manifests under {root}")
    return manifests


def collect_manifests(package_dirs: list[Path] | None = None, workspaces: list[Path] | None = None) -> list[Path]:
    """Collect manifests from workspaces first, then explicit package directories.

    Explicit package directories come last so they win name clashes against
    anything discovered in a workspace. A manifest listed more than once
    (overlapping workspaces, repeated directories, or both) is kept once, at
    its last position.
    """
    candidates: list[Path] = []
    for workspace in workspaces or []:
        candidates.extend(discover_manifests(workspace))
    candidates.extend(manifests_for_package_dirs(package_dirs or []))

    # Keep the last occurrence of each manifest
    seen: set[Path] = set()
    manifests: list[Path] = []
    for manifest in reversed(candidates):
        key = _dedupe_key(manifest)
        if key in seen:
            continue
        seen.add(key)
        manifests.append(manifest)
    manifests.reverse()
    return manifests


def _dedupe_key(path: Path) -> Path:
    return path.resolve()
