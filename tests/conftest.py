import itertools

import pytest

from tagcheck.checks import IncorrectTagCheck
from tagcheck.schemas import Feature, FeatureKind

_identifiers = itertools.count(1)


@pytest.fixture
def check() -> IncorrectTagCheck:
    """A fresh check per test, so the seen logical ids never leak between tests."""
    return IncorrectTagCheck()


@pytest.fixture
def make_feature():
    """Factory for features; each call gets a new physical identifier."""

    def _make(tags=None, kind=FeatureKind.point, logical_id=None) -> Feature:
        identifier = next(_identifiers)
        return Feature(
            identifier=identifier,
            logical_id=identifier if logical_id is None else logical_id,
            kind=kind,
            tags=tags or {},
        )

    return _make
