"""tagcheck pydantic schemas package.

Re-exports the feature, flag and instruction schemas for convenient importing:

    from tagcheck.schemas import Feature, FeatureKind, Flag, InstructionPhrases
"""

from tagcheck.schemas.feature import Feature, FeatureKind
from tagcheck.schemas.flag import Flag
from tagcheck.schemas.instructions import InstructionPhrases, OffendingCount

__all__ = [
    # Feature
    "Feature",
    "FeatureKind",
    # Flag
    "Flag",
    # Instructions
    "InstructionPhrases",
    "OffendingCount",
]
