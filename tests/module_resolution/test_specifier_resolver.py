"""Tests for ModuleSpecifierResolver."""

import os

import pytest

from please_bundle.errors import BaseNotResolvable
from please_bundle.errors import UnresolvedRelativePath
from please_bundle.identity import FileIdentity
from please_bundle.module_resolution.registry import PackageRegistry
from please_bundle.module_resolution.resolvers import ModuleSpecifierResolver


@pytest.fixture
def leftpad(make_package):
    return make_package("leftpad", {"name": "leftpad", "main": "index.js"})


@pytest.fixture
def resolver(leftpad):
    return ModuleSpecifierResolver(PackageRegistry.from_package_dirs([leftpad]))


@pytest.fixture
def main_js(project):
    return FileIdentity.from_path(project / "src" / "main.js")


class TestRegistryLayer:
    def test_bare_specifier(self, resolver, main_js, leftpad):
        """A registered package name resolves to its canonical entry point."""
        assert resolver.resolve(main_js, "leftpad") == FileIdentity.concrete((leftpad / "index.js").resolve())

    def test_registry_beats_sibling_file(self, resolver, main_js, project, leftpad):
        """A file literally named like a package never shadows the package."""
        (project / "src" / "leftpad").write_text("// decoy\n")

        identity, layer = resolver.resolve_with_layer(main_js, "leftpad")

        assert layer == "registry"
        assert identity.path == (leftpad / "index.js").resolve()

    def test_registry_works_from_virtual_base(self, resolver, leftpad):
        identity = resolver.resolve(FileIdentity.virtual("helpers"), "leftpad")
        assert identity.path == (leftpad / "index.js").resolve()

    def test_subpath_requires_exact_match(self, make_package, main_js):
        pkg = make_package(
            "utils",
            {"name": "utils", "exports": {"./str": {"default": "./str.js"}}},
            files=("str.js",),
        )
        resolver = ModuleSpecifierResolver(PackageRegistry.from_package_dirs([pkg]))

        assert resolver.resolve(main_js, "utils/str").path == (pkg / "str.js").resolve()
        with pytest.raises(UnresolvedRelativePath):
            resolver.resolve(main_js, "utils")


class TestRelativeLayer:
    def test_existing_relative_file(self, resolver, main_js, project):
        identity, layer = resolver.resolve_with_layer(main_js, "./util.js")

        assert layer == "relative"
        assert identity == FileIdentity.concrete((project / "src" / "util.js").resolve())

    def test_parent_directory_segments(self, resolver, project):
        helpers = FileIdentity.from_path(project / "src" / "lib" / "helpers.js")

        identity = resolver.resolve(helpers, "../util.js")

        assert identity.path == (project / "src" / "util.js").resolve()

    def test_plain_name_is_relative(self, resolver, main_js, project):
        """A specifier that is neither registered nor absolute is resolved like ./name."""
        assert resolver.resolve(main_js, "util.js").path == (project / "src" / "util.js").resolve()

    def test_missing_relative_file(self, resolver, main_js):
        with pytest.raises(UnresolvedRelativePath) as exc_info:
            resolver.resolve(main_js, "./missing.js")

        assert exc_info.value.specifier == "./missing.js"
        assert exc_info.value.base == main_js

    def test_no_extension_probing(self, resolver, main_js):
        """./util resolves only if a file literally named util exists."""
        with pytest.raises(UnresolvedRelativePath):
            resolver.resolve(main_js, "./util")

    def test_broken_symlink(self, resolver, main_js, project):
        (project / "src" / "dangling.js").symlink_to(project / "src" / "gone.js")

        with pytest.raises(UnresolvedRelativePath):
            resolver.resolve(main_js, "./dangling.js")

    def test_symlink_is_canonicalized(self, resolver, main_js, project):
        (project / "src" / "alias.js").symlink_to(project / "src" / "util.js")

        assert resolver.resolve(main_js, "./alias.js").path == (project / "src" / "util.js").resolve()

    def test_existing_directory_is_returned(self, resolver, main_js, project):
        """Directories canonicalize like files; there is no index.js lookup."""
        assert resolver.resolve(main_js, "./lib").path == (project / "src" / "lib").resolve()

    def test_null_byte_in_specifier(self, resolver, main_js):
        """A NUL character is a legal JS string but never a valid path."""
        with pytest.raises(UnresolvedRelativePath) as exc_info:
            resolver.resolve(main_js, "./a\x00b.js")

        assert exc_info.value.specifier == "./a\x00b.js"

    def test_empty_specifier(self, resolver, main_js):
        with pytest.raises(UnresolvedRelativePath):
            resolver.resolve(main_js, "")

    def test_virtual_base(self, resolver):
        base = FileIdentity.virtual("synthetic")

        with pytest.raises(BaseNotResolvable) as exc_info:
            resolver.resolve(base, "./util.js")

        assert exc_info.value.base == base


class TestAbsoluteLayer:
    def test_absolute_path_not_checked(self, resolver, main_js):
        """Absolute specifiers are passed through without an existence check."""
        missing = os.path.join(os.sep, "definitely", "not", "here.js")

        identity, layer = resolver.resolve_with_layer(main_js, missing)

        assert layer == "absolute"
        assert identity == FileIdentity.concrete(missing)

    def test_absolute_path_not_canonicalized(self, resolver, main_js, project):
        raw = str(project / "src" / "lib" / ".." / "util.js")

        assert resolver.resolve(main_js, raw).value == raw


class TestEndToEnd:
    def test_package_import(self, make_package, project):
        """pkgs/leftpad/package.json with main index.js, imported as "leftpad"."""
        pkg = make_package("leftpad", {"name": "leftpad", "main": "index.js"})
        resolver = ModuleSpecifierResolver(PackageRegistry.build([pkg / "package.json"]))
        main = FileIdentity.from_path(project / "src" / "main.js")

        assert resolver.resolve(main, "leftpad") == FileIdentity.concrete((pkg / "index.js").resolve())

    def test_relative_import(self, project):
        """src/main.js importing ./util.js with no packages registered."""
        resolver = ModuleSpecifierResolver()
        main = FileIdentity.from_path(project / "src" / "main.js")

        assert resolver.resolve(main, "./util.js") == FileIdentity.concrete((project / "src" / "util.js").resolve())
