"""IncorrectTagCheck: flags tag values that break the usual value format.

OSM tag values are conventionally lowercase alphanumeric with underscores,
multiple values separated by ';'. Values like highway=Primary or
barrier=Wall Type are flagged unless listed as an accepted exception for
their key.

A way is split into several linear segments that share one logical id. Only
the first segment of a way is evaluated; later segments are skipped both at
the eligibility gate and inside evaluate, which records the logical id
atomically. Points, areas and relations are never recorded.
"""

from collections.abc import Mapping
from typing import Any, Optional

import structlog

from tagcheck.checks.base import BaseCheck, CheckPreconditionError
from tagcheck.config import IncorrectTagCheckConfig
from tagcheck.metrics import incorrect_tags
from tagcheck.schemas import Feature, FeatureKind, Flag, InstructionPhrases
from tagcheck.services.seen import SeenSet
from tagcheck.services.tags import find_incorrect_tags, format_tag

log = structlog.get_logger(__name__)


class IncorrectTagCheck(BaseCheck):
    """Flags features whose inspected tag values are not lowercase alphanumeric."""

    fallback_instructions = InstructionPhrases("Concerns tag ", "Concerns tags ")

    def __init__(self, config: Optional[IncorrectTagCheckConfig] = None) -> None:
        self.config = config or IncorrectTagCheckConfig()
        super().__init__(self.config.fallback_instructions)
        self.seen = SeenSet()

    @classmethod
    def from_configuration(cls, configuration: Optional[Mapping[str, Any]] = None) -> "IncorrectTagCheck":
        """Build the check from host configuration.

        Accepts the check's own options ({"tagsToCheck": [...], ...}) or a host
        mapping keyed by check name ({"IncorrectTagCheck": {...}}).

        Raises:
            pydantic.ValidationError: If a recognized option has the wrong shape.
        """
        configuration = configuration or {}
        section = configuration.get(cls.__name__)
        if isinstance(section, Mapping):
            configuration = section
        return cls(IncorrectTagCheckConfig.model_validate(dict(configuration)))

    def is_eligible(self, feature: Feature) -> bool:
        if feature is None:
            raise CheckPreconditionError(f"{self.name} received no feature")
        return feature.logical_id not in self.seen

    def evaluate(self, feature: Feature) -> Optional[Flag]:
        if feature is None:
            raise CheckPreconditionError(f"{self.name} received no feature")

        if feature.kind is FeatureKind.linear_segment and not self.seen.add_if_absent(feature.logical_id):
            # Another segment of this way got here first
            self.record_outcome("skipped")
            log.debug("feature_skipped_already_seen", check=self.name, logical_id=feature.logical_id)
            return None

        tags = feature.tags
        if tags is None:
            raise CheckPreconditionError(f"feature {feature.identifier} has no tags mapping")
        missing = [key for key, value in tags.items() if value is None]
        if missing:
            raise CheckPreconditionError(f"feature {feature.identifier} has no value for tags {missing}")

        offending = find_incorrect_tags(tags, self.config.tags_to_check, self.config.exceptions)
        if not offending:
            self.record_outcome("clean")
            return None

        for key, _ in offending:
            incorrect_tags.labels(check=self.name, key=key).inc()
        self.record_outcome("flagged")
        log.info(
            "incorrect_tags_found",
            check=self.name,
            logical_id=feature.logical_id,
            count=len(offending),
        )
        listed = ", ".join(format_tag(key, value) for key, value in offending)
        return self.create_flag(feature, self.instruction(len(offending)) + listed)
