"""
This module provides the public entry point of the matching service.

Main Responsibility:
- Holds the ordered chain of match policies (definition evidence before harvest evidence).
- Runs the policies against a (source, target) pair and returns the first positive verdict.
- Builds the default chain from the configured policy names.
"""

import logging
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Sequence, Union

from license_matcher.core.config import policy_names
from license_matcher.models.schemas import MatchVerdict, RevisionBundle
from .policies import DefinitionPolicy, HarvestPolicy, MatchPolicy

logger = logging.getLogger(__name__)

POLICY_REGISTRY: Dict[str, Callable[[], MatchPolicy]] = {
    DefinitionPolicy.name: DefinitionPolicy,
    HarvestPolicy.name: HarvestPolicy,
}


def build_policies(names: Optional[Iterable[str]] = None) -> list:
    """
    Instantiates policies by registry name, preserving the given order.

    Args:
        names (Optional[Iterable[str]]): Policy names, or a comma-separated string of them;
            defaults to the MATCH_POLICIES setting.

    Returns:
        list: One new policy instance per name.

    Raises:
        ValueError: If a name is not registered.
    """
    if names is None or isinstance(names, str):
        requested = policy_names(names)
    else:
        requested = [n.strip().lower() for n in names]
    unknown = [n for n in requested if n not in POLICY_REGISTRY]
    if unknown:
        raise ValueError(f"Unknown match policies requested: {', '.join(unknown)}")
    return [POLICY_REGISTRY[n]() for n in requested]


class MatchEngine:
    """
    Decides whether two revisions of the same coordinate carry the same license.

    Any object exposing `is_matching(source, target) -> MatchVerdict` can be part of
    the chain. The engine keeps no state between calls.
    """

    def __init__(self, policies: Optional[Sequence[Any]] = None):
        self._policies = tuple(build_policies() if policies is None else policies)

    @property
    def policies(self) -> tuple:
        return self._policies

    def process(self, source: RevisionBundle, target: RevisionBundle) -> MatchVerdict:
        """
        Runs the policies in order and returns the first matching verdict.

        Returns:
            MatchVerdict: The verdict of the first matching policy, or a bare negative
                          verdict when none matches.
        """
        for policy in self._policies:
            verdict = policy.is_matching(source, target)
            if verdict.is_matching:
                logger.debug("Policy %s matched: %s", verdict.policy, verdict.reason)
                return verdict
        return MatchVerdict.no_match()


BundleLike = Union[RevisionBundle, Mapping[str, Any]]


def _as_bundle(value: BundleLike) -> RevisionBundle:
    if isinstance(value, RevisionBundle):
        return value
    return RevisionBundle.model_validate(value)


def match_revisions(source: BundleLike, target: BundleLike, engine: Optional[MatchEngine] = None) -> MatchVerdict:
    """
    Convenience wrapper accepting raw `{"definition": ..., "harvest": ...}` mappings.

    Raises:
        pydantic.ValidationError: If a mapping does not fit the data model.
    """
    return (engine or MatchEngine()).process(_as_bundle(source), _as_bundle(target))
