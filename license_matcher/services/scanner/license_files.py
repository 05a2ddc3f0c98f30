"""
Default license file classifier.

The matching policies only consider files that carry license text. This module decides,
from the path alone, whether a manifest entry is such a file for a given coordinate:

- well-known names (LICENSE, COPYING, NOTICE, ...) at the package root always count;
- each ecosystem also has a folder where packagers place the license file
  (e.g. `package/` for npm tarballs, `meta-inf/` for maven jars).

Callers with their own classification can pass any `(path, coordinates) -> bool`
callable to the policies instead.
"""

from typing import Callable, List, Optional
from license_matcher.models.schemas import Coordinate

LicenseFilePredicate = Callable[[Optional[str], Optional[Coordinate]], bool]

_BASE_NAMES = ["license", "licence", "copying", "copyright", "notice"]
_SUFFIXES = ["", ".md", ".txt", ".html"]

LICENSE_FILE_NAMES = frozenset(name + suffix for name in _BASE_NAMES for suffix in _SUFFIXES)


def license_locations(coordinates: Optional[Coordinate]) -> List[str]:
    """
    Returns the lower-cased folder prefixes where the ecosystem of `coordinates`
    keeps its license file. Unknown ecosystems have none.
    """
    if coordinates is None or not coordinates.type:
        return []
    ecosystem = coordinates.type.lower()
    if ecosystem == "npm":
        return ["package/"]
    if ecosystem == "maven":
        return ["meta-inf/"]
    if ecosystem == "debsrc":
        return ["debian/"]
    if ecosystem == "pypi" and coordinates.name and coordinates.revision:
        return [f"{coordinates.name}-{coordinates.revision}/".lower()]
    return []


def is_license_file(path: Optional[str], coordinates: Optional[Coordinate] = None) -> bool:
    """
    Tells whether `path` is a license file for `coordinates`.

    Args:
        path (Optional[str]): Manifest path of the file, relative to the package root.
        coordinates (Optional[Coordinate]): Coordinate of the package owning the file.
            Without it only root-level license names are recognised.

    Returns:
        bool: True if the path names a license file at the root or at one of the
              ecosystem's license locations.
    """
    if not path:
        return False
    lowered = path.lower()
    if lowered in LICENSE_FILE_NAMES:
        return True
    for prefix in license_locations(coordinates):
        if lowered.startswith(prefix) and lowered[len(prefix):] in LICENSE_FILE_NAMES:
            return True
    return False
