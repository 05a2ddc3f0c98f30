"""
Shared builders for the matching service tests.

Bundles are built from the raw JSON shape used by definition and harvest stores, so the
tests also exercise the coercion into the data model.
"""

import pytest
from license_matcher.models.schemas import Coordinate, RevisionBundle


def _bundle(coordinates=None, files=None, harvest=None) -> RevisionBundle:
    if isinstance(coordinates, str):
        coordinates = Coordinate.from_string(coordinates)
    definition = {"files": files or []}
    if coordinates is not None:
        definition["coordinates"] = coordinates
    return RevisionBundle.model_validate({"definition": definition, "harvest": harvest or {}})


@pytest.fixture
def make_bundle():
    """Factory fixture: make_bundle(coordinates, files=[...], harvest={...})."""
    return _bundle


@pytest.fixture
def clearlydefined():
    """Wraps snapshots into a `clearlydefined` harvest: clearlydefined({"1.2.0": {...}})."""
    def _wrap(versions: dict) -> dict:
        return {"clearlydefined": versions}
    return _wrap
