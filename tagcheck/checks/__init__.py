from tagcheck.checks.base import BaseCheck, CheckPreconditionError, run_checks
from tagcheck.checks.incorrect_tag import IncorrectTagCheck

__all__ = [
    "BaseCheck",
    "CheckPreconditionError",
    "IncorrectTagCheck",
    "run_checks",
]
