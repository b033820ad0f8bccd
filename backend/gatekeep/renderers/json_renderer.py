"""JSON renderer: descriptors and error nodes as JSON-ready dicts.

A descriptor becomes {"t": <tag>} when it is a non-composite tagged
descriptor, and {"v": <structure>} otherwise; shapes are serialized key by
key. Error nodes keep their kind in "e" and their fields as-is, except that
nested errors recurse and IncorrectType.expected goes through type_to_json().
Raw values ("got", literals) are left untouched; error_to_json_string()
falls back to str() for anything json cannot encode.
"""

import json
from typing import Any, Mapping

from gatekeep.descriptors.models import (
    ArrayDescriptor,
    DefaultKey,
    OptionalObjectDescriptor,
    RecordDescriptor,
    SIMPLE_DESCRIPTORS,
    UnionDescriptor,
)


def _json_key(key: Any) -> Any:
    if key is DefaultKey:
        return str(DefaultKey)
    if isinstance(key, (str, int, float, bool)) or key is None:
        return key
    return str(key)


def _shape_to_json(shape: Mapping[Any, Any]) -> dict:
    return {_json_key(key): type_to_json(value) for key, value in shape.items()}


def type_to_json(descriptor: Any) -> dict:
    """Serialize a descriptor to its {"t": ...} / {"v": ...} form."""
    if isinstance(descriptor, SIMPLE_DESCRIPTORS):
        return {"t": descriptor.tag.value}

    if isinstance(descriptor, ArrayDescriptor):
        return {"v": {"tag": descriptor.tag.value, "element": type_to_json(descriptor.element)}}
    if isinstance(descriptor, RecordDescriptor):
        return {"v": {"tag": descriptor.tag.value, "value_type": type_to_json(descriptor.value_type)}}
    if isinstance(descriptor, OptionalObjectDescriptor):
        return {"v": {
            "tag": descriptor.tag.value,
            "required": _shape_to_json(descriptor.required),
            "optional": _shape_to_json(descriptor.optional),
        }}
    if isinstance(descriptor, UnionDescriptor):
        return {"v": {
            "tag": descriptor.tag.value,
            "alternatives": [type_to_json(a) for a in descriptor.alternatives],
        }}

    if isinstance(descriptor, Mapping):
        return {"v": _shape_to_json(descriptor)}
    if isinstance(descriptor, (list, tuple)):
        return {"v": [type_to_json(item) for item in descriptor]}
    if callable(descriptor):
        return {"v": f"<predicate {getattr(descriptor, '__name__', type(descriptor).__name__)}>"}
    return {"v": descriptor}


def error_to_json(error: Any) -> dict:
    """Serialize an error node tree to nested dicts."""
    kind = error.e

    if kind == "IncorrectType":
        return {"e": kind, "expected": type_to_json(error.expected), "got": error.got}
    if kind == "IncorrectValue":
        return {"e": kind, "expected": error.expected, "got": error.got}
    if kind == "UnionNoMatch":
        return {"e": kind, "errors": [error_to_json(e) for e in error.errors]}
    if kind == "ArrayError":
        return {"e": kind, "error": error_to_json(error.error), "index": error.index}
    if kind in ("RecordError", "ObjectError"):
        return {"e": kind, "error": error_to_json(error.error), "key": _json_key(error.key)}
    if kind in ("ObjectRequiredKeyMissing", "ObjectIllegalExtraKey"):
        return {"e": kind, "key": _json_key(error.key)}
    if kind == "CheckerFailed":
        return {"e": kind, "result": error.result}

    raise ValueError(f"Unknown error kind: {kind!r}")


def error_to_json_string(error: Any, **kwargs: Any) -> str:
    """json.dumps() of error_to_json(); extra kwargs go to json.dumps."""
    kwargs.setdefault("default", str)
    return json.dumps(error_to_json(error), **kwargs)
