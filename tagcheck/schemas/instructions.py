"""Instruction phrase table used to word flags."""

import enum
from typing import NamedTuple


class OffendingCount(enum.Enum):
    SINGLE = "single"
    MULTIPLE = "multiple"

    @classmethod
    def of(cls, count: int) -> "OffendingCount":
        return cls.SINGLE if count == 1 else cls.MULTIPLE


class InstructionPhrases(NamedTuple):
    """Lead-in phrases placed before the list of offending items."""

    singular: str
    plural: str

    def for_count(self, category: OffendingCount) -> str:
        if category is OffendingCount.SINGLE:
            return self.singular
        return self.plural
