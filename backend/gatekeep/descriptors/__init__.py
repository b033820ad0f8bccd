"""Descriptor model and combinators."""

from gatekeep.descriptors.models import (
    Descriptor,
    AtomicDescriptor,
    PrimitiveDescriptor,
    CheckerDescriptor,
    ArrayDescriptor,
    RecordDescriptor,
    OptionalObjectDescriptor,
    UnionDescriptor,
    Tag,
    Family,
    WildcardKey,
    DefaultKey,
)
from gatekeep.descriptors.combinators import (
    Void,
    Anything,
    Nullish,
    Boolean,
    StringOf,
    NumberOf,
    SymbolOf,
    FunctionOf,
    ObjectOf,
    ArrayOf,
    RecordOf,
    WithOptional,
    union,
    join,
)

__all__ = [
    "Descriptor",
    "AtomicDescriptor",
    "PrimitiveDescriptor",
    "CheckerDescriptor",
    "ArrayDescriptor",
    "RecordDescriptor",
    "OptionalObjectDescriptor",
    "UnionDescriptor",
    "Tag",
    "Family",
    "WildcardKey",
    "DefaultKey",
    "Void",
    "Anything",
    "Nullish",
    "Boolean",
    "StringOf",
    "NumberOf",
    "SymbolOf",
    "FunctionOf",
    "ObjectOf",
    "ArrayOf",
    "RecordOf",
    "WithOptional",
    "union",
    "join",
]
