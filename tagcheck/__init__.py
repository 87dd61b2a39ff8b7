"""tagcheck: tag value format validation for map features.

    from tagcheck import IncorrectTagCheck, Feature, FeatureKind

    check = IncorrectTagCheck()
    flag = check.check(Feature(identifier=1, logical_id=1, kind=FeatureKind.point,
                               tags={"highway": "Primary"}))
"""

from tagcheck.checks import BaseCheck, CheckPreconditionError, IncorrectTagCheck, run_checks
from tagcheck.schemas import Feature, FeatureKind, Flag

__version__ = "0.1.0"

__all__ = [
    "BaseCheck",
    "CheckPreconditionError",
    "IncorrectTagCheck",
    "run_checks",
    "Feature",
    "FeatureKind",
    "Flag",
]
