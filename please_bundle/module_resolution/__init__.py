"""Module resolution - registry, specifier resolver and loader.

These are the two capabilities exposed to the external bundler (Resolve and
Load) plus the registry they are built on.
"""

from .loader import ModuleLoader
from .registry import PackageRegistry
from .registry import RegistryEntry
from .resolvers import ModuleSpecifierResolver

__all__ = [
    "ModuleLoader",
    "ModuleSpecifierResolver",
    "PackageRegistry",
    "RegistryEntry",
]
