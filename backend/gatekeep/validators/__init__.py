"""Matcher, error models and type guards.

Usage:
    from gatekeep.validators import check

    result = check(descriptor, value)
    if result is not True:
        # result is one of the error nodes in gatekeep.validators.models
"""

from gatekeep.validators.models import (
    ErrorNode,
    IncorrectType,
    IncorrectValue,
    UnionNoMatch,
    ArrayError,
    RecordError,
    ObjectError,
    ObjectRequiredKeyMissing,
    ObjectIllegalExtraKey,
    CheckerFailed,
    GatekeepError,
    CheckResult,
    ERROR_KINDS,
)
from gatekeep.validators.matcher import check
from gatekeep.validators.engine import TypeGuard, type_of

__all__ = [
    "check",
    "TypeGuard",
    "type_of",
    "ErrorNode",
    "IncorrectType",
    "IncorrectValue",
    "UnionNoMatch",
    "ArrayError",
    "RecordError",
    "ObjectError",
    "ObjectRequiredKeyMissing",
    "ObjectIllegalExtraKey",
    "CheckerFailed",
    "GatekeepError",
    "CheckResult",
    "ERROR_KINDS",
]
