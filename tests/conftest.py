"""Pytest configuration and shared fixtures for please-bundle tests."""

import json
from pathlib import Path

import pytest


@pytest.fixture
def make_package(tmp_path: Path):
    """
    Factory that creates a package directory under tmp_path/pkgs.

    Usage:
        pkg_dir = make_package("leftpad", {"name": "leftpad", "main": "index.js"})

    Args (of the returned callable):
        dir_name: Directory name below pkgs/
        manifest: dict dumped as JSON, or a raw string written verbatim
        files: Relative file paths to create inside the package
    """

    def _make(dir_name: str, manifest: dict | str, files: tuple[str, ...] = ("index.js",)) -> Path:
        package_dir = tmp_path / "pkgs" / dir_name
        package_dir.mkdir(parents=True, exist_ok=True)
        for rel in files:
            target = package_dir / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(f"// {dir_name}/{rel}\nexport default 1;\n")
        body = manifest if isinstance(manifest, str) else json.dumps(manifest)
        (package_dir / "package.json").write_text(body)
        return package_dir

    return _make


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """
    Create a small project tree:

    - proj/src/main.js
    - proj/src/util.js
    - proj/src/lib/helpers.js
    """
    src = tmp_path / "proj" / "src"
    (src / "lib").mkdir(parents=True)
    (src / "main.js").write_text('import leftpad from "leftpad";\nimport { u } from "./util.js";\n')
    (src / "util.js").write_text("export const u = 1;\n")
    (src / "lib" / "helpers.js").write_text("export const h = 2;\n")
    return tmp_path / "proj"
