"""
Data model shared by the matching services.

All records are read-only inputs built from definition and harvest JSON. Field names
follow Python conventions; the JSON names used by callers (e.g. `isMatching`) are
accepted and produced through aliases.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

# tool name -> tool version -> snapshot
HarvestRecord = Dict[str, Dict[str, Dict[str, Any]]]


class Coordinate(BaseModel):
    """
    Identifies a unique artifact version, e.g. `npm/npmjs/-/mongoose/5.2.5`.
    """
    model_config = ConfigDict(frozen=True)

    type: Optional[str] = None
    provider: Optional[str] = None
    namespace: Optional[str] = None
    name: Optional[str] = None
    revision: Optional[str] = None

    @classmethod
    def from_string(cls, text: str) -> "Coordinate":
        """
        Parses the slash form `type/provider/namespace/name[/revision]`.

        A namespace of "-" means the coordinate has no namespace. Extra segments after
        the revision are ignored.

        Raises:
            ValueError: If fewer than four segments are present.
        """
        parts = [p.strip() for p in (text or "").strip().strip("/").split("/")]
        if len(parts) < 4 or not all(parts[:4]):
            raise ValueError(f"Invalid coordinate string: {text!r}")
        type_, provider, namespace, name = parts[:4]
        revision = parts[4] if len(parts) > 4 and parts[4] else None
        return cls(
            type=type_.lower(),
            provider=provider.lower(),
            namespace=None if namespace == "-" else namespace,
            name=name,
            revision=revision,
        )

    def __str__(self) -> str:
        segments = [self.type, self.provider, self.namespace or "-", self.name]
        if self.revision:
            segments.append(self.revision)
        return "/".join(s or "" for s in segments)


class FileRecord(BaseModel):
    """One file discovered in a package's contents."""
    model_config = ConfigDict(frozen=True)

    path: Optional[str] = None
    hashes: Optional[Dict[str, Optional[str]]] = None
    token: Optional[str] = None


class DefinitionRecord(BaseModel):
    """Declared file manifest of one revision."""
    model_config = ConfigDict(frozen=True)

    coordinates: Optional[Coordinate] = None
    files: List[FileRecord] = Field(default_factory=list)

    @property
    def revision(self) -> Optional[str]:
        return self.coordinates.revision if self.coordinates else None

    @property
    def type(self) -> Optional[str]:
        return self.coordinates.type if self.coordinates else None


class RevisionBundle(BaseModel):
    """
    Unit passed to the engine: the definition and the harvest data of one revision.
    """
    model_config = ConfigDict(frozen=True)

    definition: DefinitionRecord = Field(default_factory=DefinitionRecord)
    harvest: HarvestRecord = Field(default_factory=dict)


class MatchVerdict(BaseModel):
    """
    Result of a policy or of the engine. `policy` and `reason` are only set on a match.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    is_matching: bool = Field(alias="isMatching")
    policy: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def no_match(cls) -> "MatchVerdict":
        return cls(is_matching=False)

    def to_dict(self) -> Dict[str, Any]:
        """
        Renders the JSON shape, omitting unset fields: a negative verdict is exactly
        `{"isMatching": False}`.
        """
        return self.model_dump(by_alias=True, exclude_none=True)
