"""Base class shared by every feature check.

The host holds a collection of checks and, for each feature, calls
BaseCheck.check: the cheap is_eligible gate first, then evaluate.
"""

import abc
from collections.abc import Iterable
from typing import Optional

import structlog

from tagcheck.metrics import features_evaluated
from tagcheck.schemas import Feature, Flag, InstructionPhrases, OffendingCount

log = structlog.get_logger(__name__)


class CheckPreconditionError(Exception):
    """Raised when the host hands a check malformed input.

    This is a programming error on the host side (missing feature, missing
    tags mapping, or a None tag value) and is never reported as a flag.
    """


class BaseCheck(abc.ABC):
    """A rule evaluated once per feature."""

    # Subclasses that word their flags with instruction() declare their phrases here
    fallback_instructions: Optional[InstructionPhrases] = None

    def __init__(self, instructions: Optional[InstructionPhrases] = None) -> None:
        self.instructions = instructions or self.fallback_instructions

    @property
    def name(self) -> str:
        return type(self).__name__

    @abc.abstractmethod
    def is_eligible(self, feature: Feature) -> bool:
        """Return False to skip the feature without evaluating it. Must not mutate state."""

    @abc.abstractmethod
    def evaluate(self, feature: Feature) -> Optional[Flag]:
        """Run the rule against one feature and return a Flag when it fails."""

    def check(self, feature: Feature) -> Optional[Flag]:
        if feature is None:
            raise CheckPreconditionError(f"{self.name} received no feature")
        if not self.is_eligible(feature):
            self.record_outcome("skipped")
            log.debug("feature_skipped_already_seen", check=self.name, logical_id=feature.logical_id)
            return None
        return self.evaluate(feature)

    def instruction(self, count: int) -> str:
        """Lead-in phrase for a flag concerning count items."""
        return self.instructions.for_count(OffendingCount.of(count))

    def create_flag(self, feature: Feature, instruction: str) -> Flag:
        return Flag(check_name=self.name, feature=feature, instruction=instruction)

    def record_outcome(self, outcome: str) -> None:
        features_evaluated.labels(check=self.name, outcome=outcome).inc()


def run_checks(checks: Iterable[BaseCheck], features: Iterable[Feature]) -> list[Flag]:
    """Dispatch every feature to every check, collecting flags in feature order."""
    checks = list(checks)
    flags: list[Flag] = []
    for feature in features:
        for check in checks:
            flag = check.check(feature)
            if flag is not None:
                flags.append(flag)
    return flags
