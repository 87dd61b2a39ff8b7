"""Pydantic schema for the map features handed to checks by the host."""

import enum

from pydantic import BaseModel, ConfigDict, Field


class FeatureKind(str, enum.Enum):
    point = "point"
    linear_segment = "linear_segment"
    area = "area"
    relation = "relation"


class Feature(BaseModel):
    """One physical map element together with its tags.

    Several linear segments can share a logical_id when they were cut from
    the same way; identifier stays unique per segment.
    """

    model_config = ConfigDict(frozen=True)

    identifier: int
    logical_id: int
    kind: FeatureKind
    # dict preserves insertion order, which fixes the order of offending tags in flags
    tags: dict[str, str] = Field(default_factory=dict)

    def __hash__(self) -> int:
        return hash((self.identifier, self.logical_id, self.kind, tuple(self.tags.items())))
