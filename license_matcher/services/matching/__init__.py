"""
Package `license_matcher.services.matching`

Decides whether two revisions of the same package carry equivalent license information,
and explains why.

Public API:
- MatchEngine(policies=None).process(source, target) -> MatchVerdict
- match_revisions(source, target) -> MatchVerdict

Modules:
- lookup: dotted path lookup with an ABSENT sentinel, structural equality
- versions: latest harvest snapshot selection by semantic version
- policies: DefinitionPolicy and HarvestPolicy
- engine: the ordered policy chain
"""

from .engine import MatchEngine, POLICY_REGISTRY, build_policies, match_revisions
from .policies import DefinitionPolicy, HarvestPolicy, MatchPolicy, HARVEST_COMPARE_PATHS

__all__ = [
    "MatchEngine",
    "MatchPolicy",
    "DefinitionPolicy",
    "HarvestPolicy",
    "HARVEST_COMPARE_PATHS",
    "POLICY_REGISTRY",
    "build_policies",
    "match_revisions",
]
