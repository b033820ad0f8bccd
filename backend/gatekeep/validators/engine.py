"""Type guards: check() bound to one descriptor for reuse.

Usage:
    guard = type_of({"id": Num, "name": Str}, name="user")

    if guard(payload):            # plain predicate
        ...
    result = guard.check(payload) # True or an error node
    user = guard.validate(payload)  # raises GatekeepViolation on failure
"""

import time
from typing import Any, Optional

import structlog

from gatekeep.config import get_settings
from gatekeep.exceptions import GatekeepViolation
from gatekeep.renderers.text_renderer import format_error
from gatekeep.validators.matcher import check
from gatekeep.validators.models import CheckResult

logger = structlog.get_logger()


class TypeGuard:
    """A descriptor paired with the operations that use it.

    Holds no state besides the descriptor, so one guard can be shared freely.
    """

    def __init__(self, descriptor: Any, name: Optional[str] = None):
        """
        Args:
            descriptor: Any descriptor accepted by check().
            name: Optional label used in log events and violation messages.
        """
        self.descriptor = descriptor
        self.name = name or repr(descriptor)

    def check(self, value: Any) -> CheckResult:
        """Same as check(self.descriptor, value)."""
        if not get_settings().LOG_FAILURES:
            return check(self.descriptor, value)

        start_time = time.perf_counter()
        result = check(self.descriptor, value)
        if result is not True:
            logger.debug(
                "check_failed",
                guard=self.name,
                kind=result.e,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
            )
        return result

    def is_valid(self, value: Any) -> bool:
        return self.check(value) is True

    __call__ = is_valid

    def validate(self, value: Any) -> Any:
        """Return `value` unchanged if it conforms.

        Raises:
            GatekeepViolation: With the error node and its rendered text.
        """
        result = self.check(value)
        if result is True:
            return value
        raise GatekeepViolation(result, value, format_error(result))

    def __repr__(self) -> str:
        return f"TypeGuard({self.name})"


def type_of(descriptor: Any, name: Optional[str] = None) -> TypeGuard:
    """Bind `descriptor` into a reusable TypeGuard."""
    return TypeGuard(descriptor, name=name)
