"""Module specifier resolution.

Resolution order (first match wins):
1. Package registry (exact exported name)
2. Relative path, against the importing file's directory (must exist)
3. Absolute path, taken verbatim

There is no extension probing, no directory index lookup and no
node_modules walk. Absolute specifiers are deliberately not checked or
canonicalized while relative ones are; loading a missing absolute path fails
later, in the loader.
"""

import logging
from pathlib import Path
from typing import Literal

from ..errors import BaseNotResolvable
from ..errors import UnresolvedRelativePath
from ..identity import FileIdentity
from .registry import PackageRegistry

logger = logging.getLogger(__name__)

ResolutionLayer = Literal["registry", "relative", "absolute"]


class ModuleSpecifierResolver:
    """Resolve (base file, import specifier) to the file being imported."""

    def __init__(self, registry: PackageRegistry | None = None):
        """Initialize with a built registry.

        Args:
            registry: Package registry consulted before the filesystem (default: empty)
        """
        self.registry = registry if registry is not None else PackageRegistry()

    def resolve(self, base: FileIdentity, specifier: str) -> FileIdentity:
        """Resolve a specifier imported from base."""
        identity, _layer = self.resolve_with_layer(base, specifier)
        return identity

    def resolve_with_layer(self, base: FileIdentity, specifier: str) -> tuple[FileIdentity, ResolutionLayer]:
        """Resolve a specifier and report which layer answered.

        Returns:
            Tuple of (FileIdentity, layer_name)
            layer_name is one of: registry, relative, absolute

        Raises:
            BaseNotResolvable: Specifier is not a package and base is virtual
            UnresolvedRelativePath: Relative target does not exist
        """
        # Layer 1: Registry wins even over a same-named file next to base
        if (registered := self.registry.get(specifier)) is not None:
            logger.debug(f"[module:resolve] {specifier} -> registry ({registered})")
            return (registered, "registry")

        if not base.is_concrete:
            raise BaseNotResolvable(
                f"Base {base} isn't a real file, cannot resolve '{specifier}' against it",
                specifier=specifier,
                base=base,
            )

        if not specifier:
            raise UnresolvedRelativePath("Empty import specifier", specifier=specifier, base=base)

        path = Path(specifier)

        # Layer 3: Absolute path, verbatim
        if path.is_absolute():
            logger.debug(f"[module:resolve] {specifier} -> absolute")
            return (FileIdentity.concrete(path), "absolute")

        # Layer 2: Relative to the importing file's directory
        candidate = base.path.parent / path
        try:
            identity = FileIdentity.from_path(candidate)
        except (OSError, RuntimeError, ValueError) as e:
            raise UnresolvedRelativePath(
                f"Cannot resolve '{specifier}' from {base}: {candidate} does not exist",
                specifier=specifier,
                base=base,
            ) from e

        logger.debug(f"[module:resolve] {specifier} -> relative ({identity})")
        return (identity, "relative")

    def __repr__(self) -> str:
        return f"ModuleSpecifierResolver({self.registry!r})"
