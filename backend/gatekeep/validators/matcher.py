"""Matcher: the recursive check(descriptor, value) algorithm.

check() is pure: it never raises for a non-conforming value, performs no
I/O, and keeps no state between calls. The only code it runs besides its
own is the caller's predicates, which are invoked in a fixed depth-first,
left-to-right order:
    - array elements by index, record and object keys in the value's own
      order (not the descriptor's);
    - union alternatives strictly left to right, stopping at the first match.

There is no cycle detection and no depth limit. Checking a cyclic value
against a cyclic shape recurses until Python raises RecursionError; keeping
inputs acyclic is the caller's job.
"""

import math
import numbers
from enum import Enum
from typing import Any, Iterable, Mapping

from gatekeep.descriptors.models import (
    ArrayDescriptor,
    CheckerDescriptor,
    DefaultKey,
    Descriptor,
    Family,
    OptionalObjectDescriptor,
    PrimitiveDescriptor,
    RecordDescriptor,
    Tag,
    UnionDescriptor,
)
from gatekeep.validators.models import (
    ArrayError,
    CheckerFailed,
    CheckResult,
    IncorrectType,
    IncorrectValue,
    ObjectError,
    ObjectIllegalExtraKey,
    ObjectRequiredKeyMissing,
    RecordError,
    UnionNoMatch,
)

# Values that compare by equality rather than by shape
_PRIMITIVE_TYPES = (str, bytes, bool, numbers.Number, Enum)


# ── Value families ──

def _is_primitive(value: Any) -> bool:
    return value is None or isinstance(value, _PRIMITIVE_TYPES)


def _is_object(value: Any) -> bool:
    return not _is_primitive(value) and not callable(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


_FAMILY_CHECKS = {
    Family.STRING: lambda v: isinstance(v, str),
    Family.NUMBER: _is_number,
    Family.SYMBOL: lambda v: isinstance(v, Enum),
    Family.FUNCTION: callable,
    Family.OBJECT: _is_object,
}


# ── Key access over mappings, sequences and plain objects ──

_MISSING = object()


def _slot_names(cls: type) -> Iterable[str]:
    """Attribute names declared by `__slots__` across the class hierarchy."""
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            # private slots are stored under their mangled name
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{klass.__name__.lstrip('_')}{name}"
            yield name


def _is_dunder(name: Any) -> bool:
    return isinstance(name, str) and name.startswith("__") and name.endswith("__")


def _attribute_items(value: Any) -> Iterable[tuple[Any, Any]]:
    # Slots that are set, then the instance dict; dunders are never own keys
    for name in _slot_names(type(value)):
        item = getattr(value, name, _MISSING)
        if item is not _MISSING:
            yield name, item
    for name, item in getattr(value, "__dict__", {}).items():
        if not _is_dunder(name):
            yield name, item


def _own_items(container: Any) -> Iterable[tuple[Any, Any]]:
    """Own (key, value) pairs in the container's enumeration order."""
    if isinstance(container, Mapping):
        return container.items()
    if isinstance(container, (list, tuple)):
        return enumerate(container)
    return _attribute_items(container)


def _has_key(container: Any, key: Any) -> bool:
    if isinstance(container, Mapping):
        return key in container
    if isinstance(container, (list, tuple)):
        return isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(container)
    return isinstance(key, str) and hasattr(container, key)


def _get(container: Any, key: Any) -> Any:
    if isinstance(container, (Mapping, list, tuple)):
        return container[key]
    return getattr(container, key)


# ── Result helpers ──

def _checker_result(result: Any) -> CheckResult:
    if result is True:
        return True
    if isinstance(result, str):
        return CheckerFailed(result=result)
    return CheckerFailed(result=False)


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _strict_equals(value: Any, literal: Any) -> bool:
    # bool is an int subclass and mixin enums compare equal to their values;
    # both only ever match themselves
    if isinstance(value, (bool, Enum)) or isinstance(literal, (bool, Enum)):
        return value is literal
    return value == literal


# ── Object shapes ──

def _check_keys(shape: Any, value: Any, strict: bool = True) -> CheckResult:
    """Check every own key of `value` against `shape`.

    `strict` rejects keys the shape neither declares nor covers with DefaultKey.
    """
    for key, item in _own_items(value):
        if _has_key(shape, key):
            result = check(_get(shape, key), item)
            if result is not True:
                return ObjectError(error=result, key=key)
        elif _has_key(shape, DefaultKey):
            result = check(_get(shape, DefaultKey), item)
            if result is not True:
                return ObjectError(error=result, key=f"{key} -> [DefaultKey]")
        elif strict:
            return ObjectIllegalExtraKey(key=key)
    return True


def _check_required(shape: Any, value: Any) -> CheckResult:
    for key, _ in _own_items(shape):
        if key is DefaultKey:
            continue
        if not _has_key(value, key):
            return ObjectRequiredKeyMissing(key=key)
    return True


def _check_structure(shape: Any, value: Any) -> CheckResult:
    """Exact-shape match: missing keys first, then one strict pass in the value's key order."""
    result = _check_required(shape, value)
    if result is not True:
        return result

    return _check_keys(shape, value)


def _check_optional_object(descriptor: OptionalObjectDescriptor, value: Any) -> CheckResult:
    # 1. Declared keys hold valid values; unknown keys are ignored here
    result = _check_keys(descriptor.optional, value, strict=False)
    if result is not True:
        return result

    # 2. Every required key is present
    result = _check_required(descriptor.required, value)
    if result is not True:
        return result

    # 3. Strict pass: no undeclared keys (declared values are checked again)
    return _check_keys(descriptor.optional, value)


# ── Tag dispatch ──

def _check_tagged(descriptor: Descriptor, value: Any) -> CheckResult:
    tag = descriptor.tag

    if isinstance(descriptor, UnionDescriptor):
        errors = []
        for alternative in descriptor.alternatives:
            result = check(alternative, value)
            if result is True:
                return True
            errors.append(result)
        return UnionNoMatch(errors=errors)

    if tag is Tag.ANY:
        return True

    if tag is Tag.VOID:
        accepted = value is None
    elif tag is Tag.NULLISH:
        accepted = not value
    elif tag is Tag.BOOLEAN:
        accepted = isinstance(value, bool)
    elif isinstance(descriptor, PrimitiveDescriptor):
        accepted = _FAMILY_CHECKS[descriptor.family](value)
    elif isinstance(descriptor, CheckerDescriptor):
        if not _FAMILY_CHECKS[descriptor.family](value):
            return IncorrectType(expected=descriptor, got=value)
        return _checker_result(descriptor.predicate(value))
    elif isinstance(descriptor, ArrayDescriptor):
        if not isinstance(value, (list, tuple)):
            return IncorrectType(expected=descriptor, got=value)
        for index, element in enumerate(value):
            result = check(descriptor.element, element)
            if result is not True:
                return ArrayError(error=result, index=index)
        return True
    elif isinstance(descriptor, RecordDescriptor):
        if not _is_object(value):
            return IncorrectType(expected=descriptor, got=value)
        for key, item in _own_items(value):
            result = check(descriptor.value_type, item)
            if result is not True:
                return RecordError(error=result, key=key)
        return True
    elif isinstance(descriptor, OptionalObjectDescriptor):
        if not _is_object(value):
            return IncorrectType(expected=descriptor, got=value)
        return _check_optional_object(descriptor, value)
    else:
        raise TypeError(f"Unknown descriptor tag: {tag!r}")

    return True if accepted else IncorrectType(expected=descriptor, got=value)


def check(descriptor: Any, value: Any) -> CheckResult:
    """Check `value` against `descriptor`.

    Args:
        descriptor: A tagged descriptor, a predicate, a structural shape
            (mapping, list/tuple or plain object) or a literal.
        value: Anything.

    Returns:
        True if the value conforms, otherwise the error node describing the
        first failure (every failure, for unions).
    """
    if isinstance(descriptor, Descriptor):
        return _check_tagged(descriptor, value)

    # Inline predicate
    if callable(descriptor):
        return _checker_result(descriptor(value))

    # Objects and callables are matched against a structural shape
    if not _is_primitive(value):
        if _is_primitive(descriptor):
            return IncorrectType(expected=descriptor, got=value)

        return _check_structure(descriptor, value)

    if not _is_primitive(descriptor):
        return IncorrectType(expected=descriptor, got=value)

    # Literals
    if _is_nan(value) and _is_nan(descriptor):
        return True
    if _strict_equals(value, descriptor):
        return True
    return IncorrectValue(expected=descriptor, got=value)
