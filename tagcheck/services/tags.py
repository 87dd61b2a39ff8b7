"""Tag value format rules for IncorrectTagCheck.

Holds the canonical value pattern, the built-in set of tag keys whose values
are inspected, and the per-key values accepted even though they break the
pattern (established OSM values such as surface=concrete:plates).
"""

import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType

# Lowercase alphanumeric/underscore segments, optionally separated by ';'
VALID_PATTERN = re.compile(r"^[a-z0-9_]+( *; *[a-z0-9_]+)*$")

DEFAULT_TAGS_TO_CHECK: frozenset[str] = frozenset({
    "abutters", "access", "admin_level", "aerialway", "aeroway", "amenity",
    "barrier", "bicycle", "boat", "border_type", "boundary", "bridge", "building", "construction",
    "covered", "craft", "crossing", "cutting",
    "disused", "drive_in", "drive_through",
    "electrified", "embankment", "emergency",
    "fenced", "foot", "ford",
    "geological", "goods",
    "hgv", "highway", "historic",
    "internet_access",
    "landuse", "lanes", "leisure",
    "man_made", "military", "mooring", "motorboat", "mountain_pass", "natural", "noexit",
    "office",
    "power", "public_transport",
    "railway", "route",
    "sac_scale", "service", "shop", "smoothness", "sport", "surface",
    "tactile_paving", "toll", "tourism", "tracktype", "traffic_calming", "trail_visibility",
    "tunnel",
    "usage",
    "vehicle",
    "wall", "waterway", "wheelchair", "wood",
})

DEFAULT_EXCEPTIONS: Mapping[str, frozenset[str]] = MappingProxyType({
    "type": frozenset({
        "associatedStreet", "turnlanes:lengths", "turnlanes:turns",
        "restriction:hgv", "restriction:caravan", "restriction:motorcar", "restriction:bus",
        "restriction:agricultural", "restriction:bicycle", "restriction:hazmat", "TMC",
    }),
    "service": frozenset({"drive-through"}),
    "aerialway": frozenset({"j-bar", "t-bar"}),
    "surface": frozenset({
        "concrete:plates", "concrete:lanes", "paving_stones:20", "paving_stones:30",
        "paving_stones:50", "cobblestone:10", "cobblestone:20", "cobblestone:flattened",
    }),
    "shop": frozenset({"e-cigarette"}),
    "barrier": frozenset({"full-height_turnstile"}),
    "man_made": frozenset({"MDF"}),
})


def is_valid_value(value: str) -> bool:
    """Check that a tag value follows the usual lowercase format.

    A valid value is one or more runs of lowercase ASCII letters, digits and
    underscores, optionally separated by semicolons with spaces around them:
    "residential", "yes;no", "yes ; no". The whole value must match.

    Args:
        value: The raw tag value.

    Returns:
        True if the value matches VALID_PATTERN, False otherwise (including "").
    """
    # fullmatch so that a trailing newline cannot satisfy "$"
    return VALID_PATTERN.fullmatch(value) is not None


def is_excepted(key: str, value: str, exceptions: Mapping[str, Iterable[str]]) -> bool:
    """Return True when value is explicitly allowed for key (exact match)."""
    allowed = exceptions.get(key)
    if allowed is None:
        return False
    return value in allowed


def format_tag(key: str, value: str) -> str:
    return f"'{key}={value}'"


def find_incorrect_tags(
    tags: Mapping[str, str],
    tags_to_check: Iterable[str],
    exceptions: Mapping[str, Iterable[str]],
) -> list[tuple[str, str]]:
    """List the offending (key, value) pairs of a feature.

    Only keys in tags_to_check are inspected. A value is offending when it
    fails is_valid_value and is not excepted for its key. Order follows the
    iteration order of tags.
    """
    return [
        (key, value)
        for key, value in tags.items()
        if key in tags_to_check
        and not is_valid_value(value)
        and not is_excepted(key, value, exceptions)
    ]
