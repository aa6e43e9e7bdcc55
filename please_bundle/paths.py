"""CLI-specific path policy and dependency injection helpers.

This module centralizes the CLI's choices: where settings live, which
manifests get scanned, and how the resolver is wired up. The core packages
receive everything via injection.
"""

from pathlib import Path

from .module_resolution import ModuleSpecifierResolver
from .module_resolution import PackageRegistry
from .packages import collect_manifests
from .settings import SETTINGS_DIR
from .settings import AppSettings
from .settings import BundleConfig
from .settings import SettingsPaths


def get_cli_settings_paths() -> SettingsPaths:
    """Get CLI settings paths.

    When cwd is the home directory, project and local scopes are disabled:
    ~/.please-bundle/ only ever holds the global settings.yaml.
    """
    home = Path.home()

    if Path.cwd() == home:
        return SettingsPaths(
            global_settings=home / SETTINGS_DIR / "settings.yaml",
            project_settings=None,
            local_settings=None,
        )

    return SettingsPaths.default()


def create_app_settings() -> AppSettings:
    return AppSettings(get_cli_settings_paths())


def get_manifest_paths(config: BundleConfig) -> list[Path]:
    """Manifests to scan, in registry order (workspaces, then explicit packages)."""
    return collect_manifests(package_dirs=config.packages, workspaces=config.workspaces)


def create_registry(config: BundleConfig) -> PackageRegistry:
    return PackageRegistry.build(get_manifest_paths(config), on_duplicate=config.on_duplicate)


def create_resolver(config: BundleConfig) -> ModuleSpecifierResolver:
    return ModuleSpecifierResolver(create_registry(config))
