"""Boundary with the external bundler.

The bundler itself (parsing, graph construction, tree-shaking, emission)
lives outside this package. It consumes two capabilities, Resolve and Load,
and must produce exactly one output module for a run.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import Sequence
from pathlib import Path
from typing import Any
from typing import Protocol
from typing import runtime_checkable

from .errors import DuplicateOrAmbiguousOutput
from .errors import EntryFileNotFound
from .identity import FileIdentity

logger = logging.getLogger(__name__)


@runtime_checkable
class Resolver(Protocol):
    """Resolve capability consumed by the bundler."""

    def resolve(self, base: FileIdentity, specifier: str) -> FileIdentity:
        """Resolve an import specifier found in base."""
        ...


@runtime_checkable
class Loader(Protocol):
    """Load capability consumed by the bundler."""

    def load(self, identity: FileIdentity) -> bytes:
        """Return the raw source of a module."""
        ...


@runtime_checkable
class Bundler(Protocol):
    """External bundler driven with named entry files."""

    def bundle(self, entries: dict[str, FileIdentity]) -> Sequence[Any]:
        """Bundle entries and return the output modules."""
        ...


def entry_identities(entry_files: Iterable[str | Path]) -> dict[str, FileIdentity]:
    """Map entry files to canonical identities, keyed by file name.

    Raises:
        EntryFileNotFound: An entry file does not exist
    """
    entries: dict[str, FileIdentity] = {}
    for entry_file in entry_files:
        path = Path(entry_file)
        try:
            identity = FileIdentity.from_path(path)
        except (OSError, RuntimeError, ValueError) as e:
            raise EntryFileNotFound(f"Entry file not found: {path}", path) from e
        entries[path.name] = identity
    return entries


def bundle_entries(bundler: Bundler, entries: dict[str, FileIdentity]) -> Any:
    """Run the bundler and return its single output module.

    Raises:
        DuplicateOrAmbiguousOutput: Bundler returned zero or several modules
    """
    logger.info(f"Bundling {len(entries)} entries: {', '.join(entries)}")
    modules = list(bundler.bundle(entries))

    if len(modules) != 1:
        raise DuplicateOrAmbiguousOutput(
            f"Expected exactly one output module, got {len(modules)}",
            count=len(modules),
        )

    return modules[0]
