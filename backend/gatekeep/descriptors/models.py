"""Descriptor models: the closed set of tagged descriptor shapes.

A descriptor describes the set of values a check accepts. Tagged descriptors
are instances of Descriptor; being one is what tells the matcher to dispatch
on `tag` instead of treating the object as a structural shape or a literal.
Plain callables, mappings, lists/tuples and literals are the untagged forms.
"""

from enum import Enum
from typing import Any, Callable, Union

from pydantic import BaseModel, ConfigDict


class Tag(str, Enum):
    """Discriminant for every tagged descriptor."""

    VOID = "Void"
    ANY = "Any"
    NULLISH = "Nullish"
    BOOLEAN = "Boolean"

    STRING = "String"
    NUMBER = "Number"
    SYMBOL = "Symbol"
    FUNCTION = "Function"
    OBJECT = "Object"

    STRING_CHECKER = "StringChecker"
    NUMBER_CHECKER = "NumberChecker"
    SYMBOL_CHECKER = "SymbolChecker"
    FUNCTION_CHECKER = "FunctionChecker"
    OBJECT_CHECKER = "ObjectChecker"

    ARRAY = "Array"
    RECORD = "Record"
    OBJECT_OPTIONAL = "ObjectOptional"
    UNION = "Union"


class Family(str, Enum):
    """Primitive families a checker predicate can be attached to."""

    STRING = "String"
    NUMBER = "Number"
    SYMBOL = "Symbol"
    FUNCTION = "Function"
    OBJECT = "Object"


FAMILY_TAGS = {
    Family.STRING: Tag.STRING,
    Family.NUMBER: Tag.NUMBER,
    Family.SYMBOL: Tag.SYMBOL,
    Family.FUNCTION: Tag.FUNCTION,
    Family.OBJECT: Tag.OBJECT,
}

CHECKER_TAGS = {
    Family.STRING: Tag.STRING_CHECKER,
    Family.NUMBER: Tag.NUMBER_CHECKER,
    Family.SYMBOL: Tag.SYMBOL_CHECKER,
    Family.FUNCTION: Tag.FUNCTION_CHECKER,
    Family.OBJECT: Tag.OBJECT_CHECKER,
}


class WildcardKey(Enum):
    """Reserved key meaning "any key the shape does not declare"."""

    DEFAULT = "[DefaultKey]"

    def __repr__(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


DefaultKey = WildcardKey.DEFAULT

# (value) -> True on success, False or a message on failure
Predicate = Callable[[Any], Union[bool, str]]


class Descriptor(BaseModel):
    """Base for all tagged descriptors."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    tag: Tag

    def __repr__(self) -> str:
        return f"<{self.tag.value}>"


class AtomicDescriptor(Descriptor):
    """Void, Any, Nullish and Boolean."""


class PrimitiveDescriptor(Descriptor):
    """Any value of one primitive family.

    Calling it with a predicate narrows it into a checker:

        Positive = NumberOf(lambda n: n > 0 or "must be positive")
    """

    family: Family

    def __call__(self, predicate: Predicate) -> "CheckerDescriptor":
        return CheckerDescriptor(tag=CHECKER_TAGS[self.family], family=self.family, predicate=predicate)


class CheckerDescriptor(Descriptor):
    """A primitive family plus a user predicate run on values of that family."""

    family: Family
    predicate: Callable[..., Any]

    def __repr__(self) -> str:
        name = getattr(self.predicate, "__name__", "predicate")
        return f"<{self.tag.value} {name}>"


class ArrayDescriptor(Descriptor):
    """A list or tuple whose every element matches `element`."""

    tag: Tag = Tag.ARRAY
    element: Any


class RecordDescriptor(Descriptor):
    """An object whose every own value matches `value_type`."""

    tag: Tag = Tag.RECORD
    value_type: Any


class OptionalObjectDescriptor(Descriptor):
    """An object with required keys and optional keys.

    `optional` always holds every key of `required` as well, so the strict
    extra-key pass never flags a required key.
    """

    tag: Tag = Tag.OBJECT_OPTIONAL
    required: dict[Any, Any]
    optional: dict[Any, Any]


class UnionDescriptor(Descriptor):
    """Matches when any alternative matches, tried in order."""

    tag: Tag = Tag.UNION
    alternatives: tuple[Any, ...]

    def __repr__(self) -> str:
        return "<Union " + " | ".join(repr(a) for a in self.alternatives) + ">"


# Descriptors that carry no nested descriptor; these serialize as {"t": tag}
SIMPLE_DESCRIPTORS = (AtomicDescriptor, PrimitiveDescriptor, CheckerDescriptor)
