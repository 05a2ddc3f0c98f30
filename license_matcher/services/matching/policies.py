"""
This module implements the license match policies.

Each policy is a self-contained equivalence test between two revisions of the same
package. Policies are stateless: their only configuration (comparison properties,
per-ecosystem field table) is fixed at construction time.

Policies:
- DefinitionPolicy: the two revisions ship a license file with the same hash or token.
- HarvestPolicy: the latest ClearlyDefined harvest snapshots declare the same license
  fields for the package ecosystem.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from license_matcher.core.config import HARVEST_TOOL
from license_matcher.models.schemas import MatchVerdict, RevisionBundle
from license_matcher.services.scanner.license_files import LicenseFilePredicate, is_license_file
from .lookup import ABSENT, deep_equal, get_path, is_present
from .versions import UnorderableHarvestError, latest_tool_harvest

logger = logging.getLogger(__name__)


class MatchPolicy(ABC):
    """Contract for a single license equivalence test."""

    name: str

    @abstractmethod
    def is_matching(self, source: RevisionBundle, target: RevisionBundle) -> MatchVerdict:
        """Return a positive verdict with a reason when source and target share their license."""


def _non_empty_equal(source_value: Any, target_value: Any) -> bool:
    """
    Equality that never holds for missing or empty values, not even between two of them.
    """
    if not is_present(source_value) or not is_present(target_value):
        return False
    return source_value == target_value


class DefinitionPolicy(MatchPolicy):
    """
    Matches when a license file of the target shares a hash or token with any license
    file of the source. Paths are only used to build the reason.
    """

    name = "definition"
    compare_props: Tuple[str, ...] = ("hashes.sha1", "hashes.sha256", "token")

    def __init__(self, license_file_predicate: Optional[LicenseFilePredicate] = None):
        self._is_license_file = license_file_predicate or is_license_file

    def _license_files(self, bundle: RevisionBundle) -> list:
        definition = bundle.definition
        return [f for f in definition.files if self._is_license_file(f.path, definition.coordinates)]

    def is_matching(self, source: RevisionBundle, target: RevisionBundle) -> MatchVerdict:
        source_files = self._license_files(source)
        target_files = self._license_files(target)
        logger.debug(
            "Comparing %d source and %d target license files",
            len(source_files), len(target_files),
        )

        for file in target_files:
            for prop in self.compare_props:
                value = get_path(file, prop)
                if any(_non_empty_equal(get_path(f, prop), value) for f in source_files):
                    reason = (
                        f"{source.definition.revision} and {target.definition.revision} "
                        f"share the same {prop} in {file.path}: {value}"
                    )
                    return MatchVerdict(is_matching=True, policy=self.name, reason=reason)

        return MatchVerdict.no_match()


# ecosystem type -> harvest properties that must all be equal
HARVEST_COMPARE_PATHS: Dict[str, Tuple[str, ...]] = {
    "maven": ("manifest.summary.licenses",),
    "crate": ("registryData.license",),
    "pod": ("registryData.license",),
    "nuget": ("manifest.licenseExpression", "manifest.licenseUrl"),
    "npm": ("registryData.manifest.license",),
    "composer": ("registryData.manifest.license",),
    "gem": ("registryData.licenses",),
    "pypi": ("declaredLicense", "registryData.info.license"),
    "deb": ("declaredLicenses", "copyrightUrl"),
    "debsrc": ("declaredLicenses", "copyrightUrl"),
}


def _to_json(value: Any) -> str:
    return json.dumps(None if value is ABSENT else value, separators=(",", ":"), ensure_ascii=False)


class HarvestPolicy(MatchPolicy):
    """
    Matches when every license field configured for the ecosystem is deep-equal in the
    latest harvest snapshots of source and target.
    """

    name = "harvest"

    def __init__(self, tool: Optional[str] = None):
        self.tool = tool or HARVEST_TOOL

    def compare_paths(self, source: RevisionBundle) -> Tuple[str, ...]:
        ecosystem = source.definition.type
        return HARVEST_COMPARE_PATHS.get(ecosystem or "", ())

    def is_matching(self, source: RevisionBundle, target: RevisionBundle) -> MatchVerdict:
        paths = self.compare_paths(source)
        if not paths:
            logger.debug("No harvest comparison rules for type %r", source.definition.type)
            return MatchVerdict.no_match()

        try:
            source_latest = latest_tool_harvest(source.harvest, self.tool)
            target_latest = latest_tool_harvest(target.harvest, self.tool)
        except UnorderableHarvestError as exc:
            logger.warning("No harvest match between %s and %s: %s",
                           source.definition.revision, target.definition.revision, exc)
            return MatchVerdict.no_match()

        evidence: List[str] = []
        for path in paths:
            source_value = get_path(source_latest, path)
            target_value = get_path(target_latest, path)
            if not deep_equal(source_value, target_value):
                return MatchVerdict.no_match()
            evidence.append(f"{path}: ```{_to_json(source_value)}```")

        if source_latest is ABSENT and target_latest is ABSENT:
            logger.warning(
                "Harvest match between %s and %s without any %s data on either side",
                source.definition.revision, target.definition.revision, self.tool,
            )

        reason = (
            f"{source.definition.revision} and {target.definition.revision} "
            f"share the same {' and '.join(evidence)}.\n"
        )
        return MatchVerdict(is_matching=True, policy=self.name, reason=reason)
