"""
Selection of the most recent harvest snapshot of a tool.

A harvest record can hold several runs of the same tool, keyed by the tool version
that produced them. Only the newest run is relevant for matching, and "newest" is
decided by semantic version ordering (`1.10.0` > `1.9.0`), never by string order.
"""

import logging
from typing import Any, Dict, Optional

import semver

from .lookup import ABSENT

logger = logging.getLogger(__name__)


def _parse(version: str) -> Optional[semver.Version]:
    try:
        return semver.Version.parse(version)
    except (ValueError, TypeError):
        return None


def compare_versions(a: str, b: str) -> int:
    """
    Compares two semantic version strings.

    Returns:
        int: -1 if a < b, 0 if equal, 1 if a > b.

    Raises:
        ValueError: If either string is not a valid semantic version.
    """
    return semver.Version.parse(a).compare(b)


def latest_tool_version(tool_harvest: Dict[str, Any]) -> Optional[str]:
    """
    Returns the highest semantic version key of `tool_harvest`, or None when it has no
    valid version keys. Invalid keys are skipped with a warning.
    """
    latest_key, latest_version = None, None
    for key in tool_harvest:
        parsed = _parse(key)
        if parsed is None:
            logger.warning("Skipping harvest entry with invalid tool version %r", key)
            continue
        if latest_version is None or parsed > latest_version:
            latest_key, latest_version = key, parsed
    return latest_key


class UnorderableHarvestError(ValueError):
    """Raised when a tool has harvest data but no snapshot can be picked as the latest."""


def latest_tool_harvest(harvest: Optional[Dict[str, Dict[str, Any]]], tool: str) -> Any:
    """
    Returns the snapshot produced by the latest version of `tool`, or ABSENT if the
    harvest has no entry for that tool.

    A single snapshot is returned as is, whatever its version key.

    Raises:
        UnorderableHarvestError: If the tool has several snapshots and none of their
            keys is a valid semantic version.
    """
    tool_harvest = (harvest or {}).get(tool)
    if not tool_harvest:
        return ABSENT
    if len(tool_harvest) == 1:
        return next(iter(tool_harvest.values()))
    version = latest_tool_version(tool_harvest)
    if version is None:
        raise UnorderableHarvestError(
            f"No valid {tool} version among harvest keys: {', '.join(map(repr, tool_harvest))}"
        )
    logger.debug("Latest %s harvest version: %s", tool, version)
    return tool_harvest[version]
