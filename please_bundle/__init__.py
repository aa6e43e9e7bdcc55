"""please-bundle - module resolution core for a JavaScript bundler.

Public API:
- FileIdentity: Canonical handle for a source file
- PackageRegistry: Exported package names mapped to entry points
- ModuleSpecifierResolver: Resolve (base, specifier) to a file
- ModuleLoader: Read module sources for the bundler
"""

from .bundler import bundle_entries
from .bundler import entry_identities
from .identity import FileIdentity
from .module_resolution import ModuleLoader
from .module_resolution import ModuleSpecifierResolver
from .module_resolution import PackageRegistry

__all__ = [
    "FileIdentity",
    "ModuleLoader",
    "ModuleSpecifierResolver",
    "PackageRegistry",
    "bundle_entries",
    "entry_identities",
]
