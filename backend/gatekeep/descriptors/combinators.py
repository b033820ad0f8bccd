"""Descriptor combinators: the public way to build descriptors.

    from gatekeep import ArrayOf, Num, Str, WithOptional, union

    User = WithOptional(
        {"id": Num, "name": Str},
        {"tags": ArrayOf(Str), "nickname": union([Str, None])},
    )
"""

from typing import Any, Mapping, Sequence

import structlog

from gatekeep.descriptors.models import (
    ArrayDescriptor,
    AtomicDescriptor,
    DefaultKey,
    Family,
    FAMILY_TAGS,
    OptionalObjectDescriptor,
    PrimitiveDescriptor,
    RecordDescriptor,
    Tag,
    UnionDescriptor,
)
from gatekeep.exceptions import DescriptorError

logger = structlog.get_logger()


# ── Atomic descriptors ──

Void = AtomicDescriptor(tag=Tag.VOID)
Anything = AtomicDescriptor(tag=Tag.ANY)

# Accepts every falsy value (0, "", False, None, empty containers), not only None
Nullish = AtomicDescriptor(tag=Tag.NULLISH)
Boolean = AtomicDescriptor(tag=Tag.BOOLEAN)


# ── Primitive families (call with a predicate to get a checker) ──

def _primitive(family: Family) -> PrimitiveDescriptor:
    return PrimitiveDescriptor(tag=FAMILY_TAGS[family], family=family)


StringOf = _primitive(Family.STRING)
NumberOf = _primitive(Family.NUMBER)
SymbolOf = _primitive(Family.SYMBOL)
FunctionOf = _primitive(Family.FUNCTION)
ObjectOf = _primitive(Family.OBJECT)


# ── Composites ──

def ArrayOf(element: Any) -> ArrayDescriptor:
    """A list or tuple of `element`."""
    return ArrayDescriptor(element=element)


def RecordOf(value_type: Any) -> RecordDescriptor:
    """An object of arbitrary keys, every value matching `value_type`."""
    return RecordDescriptor(value_type=value_type)


def WithOptional(required: Mapping[Any, Any], optional: Mapping[Any, Any]) -> OptionalObjectDescriptor:
    """An object that must have every key of `required` and may have those of `optional`.

    `required` must not contain DefaultKey; put the wildcard in `optional`.

    Raises:
        DescriptorError: If `required` declares DefaultKey.
    """
    if DefaultKey in required:
        logger.error("descriptor_misuse", combinator="WithOptional", key=str(DefaultKey))
        raise DescriptorError(
            "The required mapping may not contain a [DefaultKey]. Please move it to the optional one."
        )

    # optional must also declare the required keys, or the strict pass would flag them as extra
    return OptionalObjectDescriptor(required=dict(required), optional={**required, **optional})


def union(alternatives: Sequence[Any]) -> UnionDescriptor:
    """Matches if any alternative matches; alternatives are tried in order."""
    return UnionDescriptor(alternatives=tuple(alternatives))


def join(descriptors: Sequence[Mapping[Any, Any]]) -> Any:
    """Shallow merge of structural shapes; later shapes win on shared keys.

    A single shape is returned as is.
    """
    if len(descriptors) == 1:
        return descriptors[0]

    merged: dict = {}
    for shape in descriptors:
        merged.update(shape)
    return merged
