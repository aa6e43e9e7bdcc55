"""File identities - the canonical handle for a source file.

A FileIdentity is either a concrete filesystem path or an opaque virtual tag
(synthetic modules, generated helpers). Identities are immutable and hashable
so they can key module graphs built by the bundler.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

IdentityKind = Literal["concrete", "virtual"]


@dataclass(frozen=True)
class FileIdentity:
    """Immutable identity of a source file.

    Use the constructors rather than instantiating directly:
    - ``FileIdentity.from_path()`` canonicalizes against the filesystem
    - ``FileIdentity.concrete()`` wraps a path verbatim
    - ``FileIdentity.virtual()`` wraps an opaque tag
    """

    kind: IdentityKind
    value: str

    @classmethod
    def from_path(cls, path: str | Path) -> FileIdentity:
        """Create a concrete identity from an existing path.

        Raises:
            FileNotFoundError: Path does not exist
            OSError: Path cannot be canonicalized
            RuntimeError: Symlink loop
        """
        return cls("concrete", str(canonicalize(path)))

    @classmethod
    def concrete(cls, path: str | Path) -> FileIdentity:
        """Wrap a path without touching the filesystem."""
        return cls("concrete", str(path))

    @classmethod
    def virtual(cls, tag: str) -> FileIdentity:
        return cls("virtual", tag)

    @property
    def is_concrete(self) -> bool:
        return self.kind == "concrete"

    @property
    def is_virtual(self) -> bool:
        return self.kind == "virtual"

    @property
    def path(self) -> Path:
        """Filesystem path of a concrete identity.

        Raises:
            ValueError: Identity is virtual
        """
        if not self.is_concrete:
            raise ValueError(f"Virtual identity {self.value!r} has no filesystem path")
        return Path(self.value)

    def __str__(self) -> str:
        if self.is_virtual:
            return f"<virtual:{self.value}>"
        return self.value

    def __repr__(self) -> str:
        return f"FileIdentity.{self.kind}({self.value!r})"


def canonicalize(path: str | Path) -> Path:
    """Resolve symlinks, ``.`` and ``..`` into an absolute path that must exist."""
    return Path(path).resolve(strict=True)
