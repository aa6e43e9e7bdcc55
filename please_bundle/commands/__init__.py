"""CLI commands for please-bundle."""

from . import config
from . import packages
from . import resolve

__all__ = [
    "config",
    "packages",
    "resolve",
]
