"""
test: services/scanner/license_files.py

Unit tests for the default license file classifier.
"""

import pytest

from license_matcher.models.schemas import Coordinate
from license_matcher.services.scanner.license_files import is_license_file, license_locations


@pytest.mark.parametrize("path", ["LICENSE", "license.md", "COPYING.txt", "Notice.html", "LICENCE", "copyright"])
def test_root_license_names(path):
    assert is_license_file(path, None) is True


@pytest.mark.parametrize("path", [None, "", "README.md", "src/LICENSE", "LICENSE-MIT", "license.rst"])
def test_non_license_paths(path):
    assert is_license_file(path, Coordinate(type="gem")) is False


@pytest.mark.parametrize("coordinates, path", [
    ("npm/npmjs/-/foo/1.0.0", "package/LICENSE"),
    ("maven/mavencentral/org.foo/bar/1.0.0", "META-INF/LICENSE.txt"),
    ("pypi/pypi/-/Foo/1.0.0", "foo-1.0.0/LICENSE"),
    ("debsrc/debian/-/curl/7.74.0-1.3", "debian/copyright"),
])
def test_ecosystem_license_locations(coordinates, path):
    assert is_license_file(path, Coordinate.from_string(coordinates)) is True


def test_location_is_specific_to_ecosystem():
    assert is_license_file("package/LICENSE", Coordinate.from_string("npm/npmjs/-/foo/1.0.0")) is True
    assert is_license_file("package/LICENSE", Coordinate.from_string("gem/rubygems/-/foo/1.0.0")) is False
    assert is_license_file("package/nested/LICENSE", Coordinate.from_string("npm/npmjs/-/foo/1.0.0")) is False


def test_pypi_location_needs_name_and_revision():
    assert license_locations(Coordinate(type="pypi", name="foo")) == []
    assert license_locations(Coordinate(type="pypi", name="Foo", revision="2.0")) == ["foo-2.0/"]
    assert license_locations(None) == []
