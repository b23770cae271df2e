"""Tests for choosing a stylesheet entry from package.json."""

import pytest

from sass_package_importer.errors import ManifestLoadError
from sass_package_importer.manifest import ManifestEntry
from sass_package_importer.manifest import find_manifest_entry
from sass_package_importer.manifest import load_manifest
from sass_package_importer.manifest import resolve_manifest_entry
from sass_package_importer.manifest import select_entry
from sass_package_importer.options import ImporterOptions


class TestLoadManifest:
    """Reading package.json."""

    def test_loads_object(self, make_package):
        package_dir = make_package("pkg", {"name": "pkg", "scss": "index.scss"})
        assert load_manifest(package_dir)["scss"] == "index.scss"

    def test_missing_file(self, make_package):
        package_dir = make_package("pkg")
        with pytest.raises(ManifestLoadError) as exc_info:
            load_manifest(package_dir, "pkg")
        assert exc_info.value.package_directory == package_dir
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_invalid_json(self, make_package):
        package_dir = make_package("pkg", "{not json")
        with pytest.raises(ManifestLoadError, match="invalid JSON"):
            load_manifest(package_dir, "pkg")

    @pytest.mark.parametrize("content", ['["scss"]', '"index.scss"', "null", "42"])
    def test_not_an_object(self, make_package, content):
        package_dir = make_package("pkg", content)
        with pytest.raises(ManifestLoadError, match="expected a JSON object"):
            load_manifest(package_dir, "pkg")


class TestSelectEntry:
    """Priority scan over manifest keys."""

    def test_first_key_in_priority_order(self):
        manifest = {"main": "index.js", "style": "dist/style.css", "scss": "src/index.scss"}
        assert select_entry(manifest, ImporterOptions()) == ManifestEntry(key="scss", source="src/index.scss")

    def test_first_accepted_key_wins_not_first_present(self):
        """Test a present key with a disallowed extension is skipped."""
        manifest = {"style": "x.less", "css": "y.css"}
        assert select_entry(manifest, ImporterOptions()) == ManifestEntry(key="css", source="y.css")

    def test_main_js_is_skipped(self):
        manifest = {"main": "index.js"}
        assert select_entry(manifest, ImporterOptions()) is None

    def test_extensionless_value_is_accepted(self):
        """Test values without an extension are left for the engine to complete."""
        manifest = {"sass": "sass/main"}
        assert select_entry(manifest, ImporterOptions()).source == "sass/main"

    @pytest.mark.parametrize("value", ["", None, 1, ["a.scss"], {"scss": "a.scss"}])
    def test_non_string_or_empty_values_skipped(self, value):
        manifest = {"scss": value, "css": "fallback.css"}
        assert select_entry(manifest, ImporterOptions()).key == "css"

    def test_dotted_keys_are_literal(self):
        """Test main.scss is a top-level field, not main -> scss."""
        assert select_entry({"main": {"scss": "a.scss"}}, ImporterOptions()) is None
        assert select_entry({"main.scss": "a.scss"}, ImporterOptions()).key == "main.scss"

    def test_custom_keys_and_extensions(self):
        options = ImporterOptions(manifest_keys=["less", "style"], allowed_extensions=[".less"])
        manifest = {"style": "a.css", "less": "b.less"}
        assert select_entry(manifest, options) == ManifestEntry(key="less", source="b.less")

    def test_extension_match_is_case_sensitive(self):
        assert select_entry({"scss": "INDEX.SCSS"}, ImporterOptions()) is None


class TestFindManifestEntry:
    """Strict and loose handling of unusable manifests."""

    def test_returns_entry(self, make_package, options):
        package_dir = make_package("pkg", {"sass": "_index.sass"})
        entry = find_manifest_entry("pkg", package_dir, options)
        assert entry == ManifestEntry(key="sass", source="_index.sass")
        assert resolve_manifest_entry("pkg", package_dir, options) == "_index.sass"

    def test_loose_missing_manifest_returns_none(self, make_package, options):
        package_dir = make_package("pkg")
        assert find_manifest_entry("pkg", package_dir, options) is None

    def test_loose_invalid_manifest_returns_none(self, make_package, options):
        package_dir = make_package("pkg", "[1, 2")
        assert resolve_manifest_entry("pkg", package_dir, options) is None

    def test_strict_missing_manifest_raises(self, make_package, strict_options):
        package_dir = make_package("pkg")
        with pytest.raises(ManifestLoadError) as exc_info:
            find_manifest_entry("pkg", package_dir, strict_options)
        assert "pkg" in str(exc_info.value)
        assert str(package_dir) in str(exc_info.value)

    def test_strict_without_usable_key_returns_none(self, make_package, strict_options):
        """Test a readable manifest with no usable key is not an error."""
        package_dir = make_package("pkg", {"main": "index.js"})
        assert find_manifest_entry("pkg", package_dir, strict_options) is None
