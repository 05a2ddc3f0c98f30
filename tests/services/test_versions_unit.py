"""
test: services/matching/versions.py

Unit tests for semantic version comparison and latest harvest snapshot selection.
"""

import logging

import pytest

from license_matcher.services.matching.lookup import ABSENT
from license_matcher.services.matching.versions import (
    UnorderableHarvestError,
    compare_versions,
    latest_tool_harvest,
    latest_tool_version,
)


@pytest.mark.parametrize("a, b, expected", [
    ("1.10.0", "1.9.0", 1),
    ("1.2.0", "1.2.0", 0),
    ("1.2.0-beta.1", "1.2.0", -1),
    ("0.9.9", "1.0.0", -1),
])
def test_compare_versions(a, b, expected):
    assert compare_versions(a, b) == expected


def test_compare_versions_rejects_invalid_strings():
    with pytest.raises(ValueError):
        compare_versions("latest", "1.0.0")


def test_latest_version_is_not_lexicographic():
    assert latest_tool_version({"1.9.0": {}, "1.10.0": {}, "1.2.0": {}}) == "1.10.0"


def test_latest_version_skips_invalid_keys(caplog):
    with caplog.at_level(logging.WARNING, logger="license_matcher.services.matching.versions"):
        assert latest_tool_version({"nightly": {}, "1.0.0": {}}) == "1.0.0"
    assert "nightly" in caplog.text
    assert latest_tool_version({"nightly": {}}) is None


def test_latest_tool_harvest_returns_snapshot():
    harvest = {"clearlydefined": {"1.2.0": {"v": "old"}, "1.3.0": {"v": "new"}}}

    assert latest_tool_harvest(harvest, "clearlydefined") == {"v": "new"}


@pytest.mark.parametrize("harvest", [None, {}, {"scancode": {"1.0.0": {}}}, {"clearlydefined": {}}])
def test_latest_tool_harvest_absent(harvest):
    assert latest_tool_harvest(harvest, "clearlydefined") is ABSENT


def test_single_snapshot_is_latest_whatever_its_key():
    harvest = {"clearlydefined": {"nightly": {"v": "only"}}}

    assert latest_tool_harvest(harvest, "clearlydefined") == {"v": "only"}


def test_unorderable_snapshots_raise():
    harvest = {"clearlydefined": {"nightly": {}, "weekly": {}}}

    with pytest.raises(UnorderableHarvestError, match="nightly"):
        latest_tool_harvest(harvest, "clearlydefined")


def test_invalid_keys_are_skipped_when_a_valid_one_exists():
    harvest = {"clearlydefined": {"nightly": {"v": "bad"}, "1.0.0": {"v": "good"}}}

    assert latest_tool_harvest(harvest, "clearlydefined") == {"v": "good"}
