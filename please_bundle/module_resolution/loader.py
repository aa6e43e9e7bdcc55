"""Loader adapter - map file identities to source bytes.

Parsing is an external capability: the bundler may hand in a parser, in
which case load_module() returns whatever it produces.
"""

import logging
from collections.abc import Callable
from typing import Any

from ..errors import ModuleReadError
from ..errors import UnsupportedIdentity
from ..identity import FileIdentity

logger = logging.getLogger(__name__)

Parser = Callable[[FileIdentity, bytes], Any]


class ModuleLoader:
    """Read concrete module files; reject everything else."""

    def __init__(self, parser: Parser | None = None):
        self.parser = parser

    def load(self, identity: FileIdentity) -> bytes:
        """Read the raw bytes of a concrete identity.

        Raises:
            UnsupportedIdentity: Identity is virtual
            ModuleReadError: File could not be read
        """
        if not identity.is_concrete:
            raise UnsupportedIdentity(f"Cannot load {identity}: only real files can be loaded", identity)

        try:
            source = identity.path.read_bytes()
        except OSError as e:
            raise ModuleReadError(f"Cannot read module {identity}: {e}", identity) from e

        logger.debug(f"[module:load] {identity} ({len(source)} bytes)")
        return source

    def load_module(self, identity: FileIdentity) -> Any:
        """Load and hand the source to the parser, if one was supplied."""
        source = self.load(identity)
        if self.parser is None:
            return source
        return self.parser(identity, source)

    def __repr__(self) -> str:
        return f"ModuleLoader(parser={'yes' if self.parser else 'no'})"
