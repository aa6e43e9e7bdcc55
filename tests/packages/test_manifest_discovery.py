"""Tests for manifest discovery."""

from pathlib import Path

from please_bundle.packages.discovery import collect_manifests
from please_bundle.packages.discovery import discover_manifests
from please_bundle.packages.discovery import manifests_for_package_dirs


def test_manifests_for_package_dirs_preserves_order(tmp_path):
    dirs = [tmp_path / "b", tmp_path / "a"]
    assert manifests_for_package_dirs(dirs) == [tmp_path / "b" / "package.json", tmp_path / "a" / "package.json"]


def test_discover_recursive_and_sorted(make_package, tmp_path):
    make_package("zeta", {"name": "zeta", "main": "index.js"})
    make_package("alpha", {"name": "alpha", "main": "index.js"})
    make_package("alpha/nested", {"name": "nested", "main": "index.js"})

    manifests = discover_manifests(tmp_path / "pkgs")

    assert manifests == [
        tmp_path / "pkgs" / "alpha" / "nested" / "package.json",
        tmp_path / "pkgs" / "alpha" / "package.json",
        tmp_path / "pkgs" / "zeta" / "package.json",
    ]


def test_discover_skips_node_modules(make_package, tmp_path):
    make_package("app", {"name": "app", "main": "index.js"})
    make_package("app/node_modules/dep", {"name": "dep", "main": "index.js"})

    manifests = discover_manifests(tmp_path / "pkgs")

    assert manifests == [tmp_path / "pkgs" / "app" / "package.json"]


def test_discover_missing_root():
    assert discover_manifests(Path("/nonexistent/workspace")) == []


def test_collect_explicit_packages_come_last(make_package, tmp_path):
    """Explicit package directories follow workspace results so they win clashes."""
    make_package("a", {"name": "a", "main": "index.js"})
    b = make_package("b", {"name": "b", "main": "index.js"})

    manifests = collect_manifests(package_dirs=[b], workspaces=[tmp_path / "pkgs"])

    assert manifests == [tmp_path / "pkgs" / "a" / "package.json", b / "package.json"]


def test_collect_repeated_package_dir(make_package):
    a = make_package("a", {"name": "a", "main": "index.js"})

    assert collect_manifests(package_dirs=[a, a]) == [a / "package.json"]


def test_collect_overlapping_workspaces(make_package, tmp_path):
    make_package("a", {"name": "a", "main": "index.js"})
    make_package("b", {"name": "b", "main": "index.js"})

    manifests = collect_manifests(workspaces=[tmp_path / "pkgs", tmp_path / "pkgs" / "a"])

    assert sorted(manifests) == [tmp_path / "pkgs" / "a" / "package.json", tmp_path / "pkgs" / "b" / "package.json"]
    assert len(manifests) == 2


def test_collect_keeps_last_position(make_package, tmp_path):
    a = make_package("a", {"name": "a", "main": "index.js"})
    b = make_package("b", {"name": "b", "main": "index.js"})

    manifests = collect_manifests(package_dirs=[a, b, a], workspaces=[tmp_path / "pkgs"])

    assert manifests == [b / "package.json", a / "package.json"]


def test_collect_empty():
    assert collect_manifests() == []
