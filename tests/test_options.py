"""Tests for importer options."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from sass_package_importer.options import DEFAULT_MANIFEST_KEYS
from sass_package_importer.options import ImporterOptions
from sass_package_importer.options import canonical_option_name
from sass_package_importer.options import coerce_options


def test_defaults():
    """Test defaults match the documented configuration."""
    options = ImporterOptions()
    assert options.strict is False
    assert options.working_directory is None
    assert options.prefix == "~"
    assert options.allowed_extensions == (".scss", ".sass", ".css")
    assert options.manifest_keys == DEFAULT_MANIFEST_KEYS
    assert options.manifest_keys[0] == "scss"
    assert options.manifest_keys[-1] == "main"
    assert options.search_roots == ("node_modules",)


def test_aliases_and_field_names():
    """Test short option names and field names are interchangeable."""
    by_alias = ImporterOptions.model_validate({"cwd": "/srv", "ext": [".css"], "keys": ["style"], "paths": ["lib"]})
    by_name = ImporterOptions(
        working_directory="/srv", allowed_extensions=[".css"], manifest_keys=["style"], search_roots=["lib"]
    )
    assert by_alias == by_name


def test_frozen():
    """Test options cannot be changed after construction."""
    options = ImporterOptions()
    with pytest.raises(ValidationError):
        options.strict = True


def test_unknown_option_rejected():
    with pytest.raises(ValidationError):
        ImporterOptions.model_validate({"extensions": [".scss"]})


def test_empty_prefix_rejected():
    with pytest.raises(ValidationError, match="prefix"):
        ImporterOptions(prefix="")


@pytest.mark.parametrize("roots", [[], [""]])
def test_empty_search_roots_rejected(roots):
    with pytest.raises(ValidationError, match="search root"):
        ImporterOptions(search_roots=roots)


def test_search_roots_accept_paths(tmp_path):
    options = ImporterOptions(search_roots=[tmp_path, "node_modules"])
    assert options.search_roots == (str(tmp_path), "node_modules")


def test_single_search_root_string():
    assert ImporterOptions(search_roots="vendor").search_roots == ("vendor",)


def test_extensions_normalized():
    """Test leading dots are added and duplicates dropped, keeping order."""
    options = ImporterOptions(allowed_extensions=["scss", ".css", ".scss", ""])
    assert options.allowed_extensions == (".scss", ".css")


def test_base_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert ImporterOptions().base_directory() == Path.cwd()
    assert ImporterOptions(working_directory=tmp_path / "sub").base_directory() == tmp_path / "sub"


def test_merged_returns_validated_copy():
    base = ImporterOptions()
    merged = base.merged({"paths": ["vendor"], "strict": True})
    assert merged.search_roots == ("vendor",)
    assert merged.strict is True
    assert base.search_roots == ("node_modules",)
    with pytest.raises(ValidationError):
        base.merged({"prefix": ""})


@pytest.mark.parametrize(
    "key,expected",
    [
        ("cwd", "working_directory"),
        ("ext", "allowed_extensions"),
        ("keys", "manifest_keys"),
        ("paths", "search_roots"),
        ("search-roots", "search_roots"),
        ("strict", "strict"),
    ],
)
def test_canonical_option_name(key, expected):
    assert canonical_option_name(key) == expected


def test_coerce_options_passthrough():
    options = ImporterOptions(strict=True)
    assert coerce_options(options) is options
