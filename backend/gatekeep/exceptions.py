"""Exceptions raised by gatekeep.

Validation failures are returned as error nodes, never raised. The classes
here cover the two cases that do raise: a malformed descriptor, and an
explicit TypeGuard.validate() call on a non-conforming value.
"""

from typing import Any


class GatekeepException(Exception):
    """Base class for everything gatekeep raises."""


class DescriptorError(GatekeepException, ValueError):
    """Raised when a descriptor is built with invalid arguments."""


class GatekeepViolation(GatekeepException):
    """Raised by TypeGuard.validate() when the value does not conform.

    Attributes:
        error: The error node returned by check().
        value: The rejected value.
    """

    def __init__(self, error: Any, value: Any, message: str) -> None:
        self.error = error
        self.value = value
        super().__init__(message)
