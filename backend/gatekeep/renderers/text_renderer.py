"""Text renderer: error node trees as indented English.

Each level of nesting adds two spaces; union alternatives are listed one per
line behind a "-  " marker:

    The key "tags" of this object is invalid:
      The array element #1 doesn't match the specified type:
        The value 3 isn't assignable to type String
"""

import json
from typing import Any, Mapping

from gatekeep.descriptors.models import (
    ArrayDescriptor,
    OptionalObjectDescriptor,
    RecordDescriptor,
    SIMPLE_DESCRIPTORS,
    UnionDescriptor,
)

INDENT = "  "
UNION_MARKER = "-  "


def _describe_key(key: Any) -> str:
    return json.dumps(key) if isinstance(key, str) else str(key)


def _describe_shape(shape: Mapping[Any, Any], optional_keys: frozenset = frozenset()) -> str:
    fields = []
    for key, value in shape.items():
        marker = "?" if key in optional_keys else ""
        fields.append(f"{_describe_key(key)}{marker}: {describe_type(value)}")
    return "{" + ", ".join(fields) + "}"


def describe_type(descriptor: Any) -> str:
    """One-line description of any descriptor."""
    if isinstance(descriptor, SIMPLE_DESCRIPTORS):
        return descriptor.tag.value
    if isinstance(descriptor, ArrayDescriptor):
        return f"Array<{describe_type(descriptor.element)}>"
    if isinstance(descriptor, RecordDescriptor):
        return f"Record<{describe_type(descriptor.value_type)}>"
    if isinstance(descriptor, UnionDescriptor):
        return " | ".join(describe_type(a) for a in descriptor.alternatives)
    if isinstance(descriptor, OptionalObjectDescriptor):
        optional_keys = frozenset(k for k in descriptor.optional if k not in descriptor.required)
        return _describe_shape(descriptor.optional, optional_keys)
    if isinstance(descriptor, Mapping):
        return _describe_shape(descriptor)
    if isinstance(descriptor, (list, tuple)):
        return "[" + ", ".join(describe_type(item) for item in descriptor) + "]"
    if callable(descriptor):
        return f"<predicate {getattr(descriptor, '__name__', type(descriptor).__name__)}>"
    return json.dumps(descriptor, default=str)


def format_error(error: Any, indent: str = "") -> str:
    """Render an error node and everything nested under it."""
    kind = error.e
    nested = indent + INDENT

    if kind == "ArrayError":
        return (f"{indent}The array element #{error.index} doesn't match the specified type:\n"
                + format_error(error.error, nested))
    if kind == "CheckerFailed":
        return f"{indent}Checker function failed: {error.result}"
    if kind == "IncorrectType":
        if isinstance(error.expected, SIMPLE_DESCRIPTORS):
            return f"{indent}The value {error.got} isn't assignable to type {error.expected.tag.value}"
        return f"{indent}The value {error.got} doesn't match {describe_type(error.expected)}"
    if kind == "IncorrectValue":
        return f"{indent}The value {error.got} isn't {error.expected}"
    if kind == "ObjectError":
        return (f'{indent}The key "{error.key}" of this object is invalid:\n'
                + format_error(error.error, nested))
    if kind == "ObjectIllegalExtraKey":
        return f'{indent}This object has an extra key "{error.key}"'
    if kind == "ObjectRequiredKeyMissing":
        return f'{indent}The required key "{error.key}" is missing from this object'
    if kind == "RecordError":
        return (f'{indent}The key "{error.key}" doesn\'t match the Record type:\n'
                + format_error(error.error, nested))
    if kind == "UnionNoMatch":
        alternatives = "\n".join(format_error(e, indent + UNION_MARKER) for e in error.errors)
        return f"{indent}The value isn't assignable to any of the union types:\n" + alternatives

    raise ValueError(f"Unknown error kind: {kind!r}")
