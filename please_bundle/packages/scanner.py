"""Read and validate a single package.json manifest."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ..errors import ManifestParseError
from ..errors import ManifestReadError
from .schema import PackageManifest

logger = logging.getLogger(__name__)


def scan_manifest(manifest_path: str | Path) -> PackageManifest:
    """Read a manifest file and parse it into a PackageManifest.

    Only parses. Whether the manifest has a name or a usable entry point is
    decided by EntryPointResolver.

    Args:
        manifest_path: Path to package.json

    Returns:
        Parsed manifest

    Raises:
        ManifestReadError: File could not be read as UTF-8 text
        ManifestParseError: Invalid JSON or schema mismatch
    """
    manifest_path = Path(manifest_path)

    try:
        contents = manifest_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestReadError(f"Cannot read manifest {manifest_path}: {e}", manifest_path) from e

    try:
        data = json.loads(contents)
    except json.JSONDecodeError as e:
        raise ManifestParseError(f"Manifest {manifest_path} is not valid JSON: {e}", manifest_path) from e

    if not isinstance(data, dict):
        raise ManifestParseError(
            f"Manifest {manifest_path} must be a JSON object, got {type(data).__name__}", manifest_path
        )

    try:
        manifest = PackageManifest.model_validate(data)
    except ValidationError as e:
        raise ManifestParseError(f"Manifest {manifest_path} does not match schema: {e}", manifest_path) from e

    logger.debug(f"[package:scan] {manifest_path} -> name={manifest.name!r}")
    return manifest
