"""Tests for host compiler adapters."""

import pytest

from sass_package_importer import package_importer
from sass_package_importer.host import file_url_to_path
from sass_package_importer.host import libsass_importer
from sass_package_importer.host import register_importer
from sass_package_importer.importer import PackageImporter


def test_file_url_to_path_round_trip(tmp_path):
    path = tmp_path / "@org" / "name with space" / "x.scss"
    assert file_url_to_path(path.as_uri()) == path


def test_file_url_to_path_rejects_other_schemes():
    with pytest.raises(ValueError, match="Not a file URL"):
        file_url_to_path("https://example.com/x.scss")


def test_libsass_importer(project, make_package):
    package_dir = make_package("pkg", {"scss": "index.scss"})
    priority, importer = libsass_importer(package_importer(cwd=project), priority=5)

    assert priority == 5
    assert importer("~pkg") == [(str(package_dir / "index.scss"),)]
    assert importer("local/partial") is None


def test_register_importer_creates_list():
    compile_options = {"style": "compressed"}

    result = register_importer(compile_options)

    assert result is compile_options
    assert len(compile_options["importers"]) == 1
    assert isinstance(compile_options["importers"][0], PackageImporter)


def test_register_importer_appends(project):
    existing = object()
    importer = package_importer(cwd=project)
    compile_options = {"importers": [existing]}

    register_importer(compile_options, importer)

    assert compile_options["importers"] == [existing, importer]
