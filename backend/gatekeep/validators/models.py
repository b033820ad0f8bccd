"""Error models: the closed set of error nodes check() can return.

Nodes that wrap a nested failure (ArrayError, RecordError, ObjectError,
UnionNoMatch) form a tree that mirrors the path taken through the value.
Every node is frozen and carries a literal `e` naming its kind, which is
also the kind tag of the JSON form.
"""

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict


class ErrorNode(BaseModel):
    """Base for all error nodes."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    e: str

    def __str__(self) -> str:
        from gatekeep.renderers.text_renderer import format_error
        return format_error(self)


class IncorrectType(ErrorNode):
    """The value is not of the kind the descriptor describes."""

    e: Literal["IncorrectType"] = "IncorrectType"
    expected: Any  # the descriptor
    got: Any


class IncorrectValue(ErrorNode):
    """The value differs from a literal descriptor."""

    e: Literal["IncorrectValue"] = "IncorrectValue"
    expected: Any
    got: Any


class UnionNoMatch(ErrorNode):
    """No union alternative matched; one error per alternative, in order."""

    e: Literal["UnionNoMatch"] = "UnionNoMatch"
    errors: list["GatekeepError"]


class ArrayError(ErrorNode):
    e: Literal["ArrayError"] = "ArrayError"
    error: "GatekeepError"
    index: int


class RecordError(ErrorNode):
    e: Literal["RecordError"] = "RecordError"
    error: "GatekeepError"
    key: Any


class ObjectError(ErrorNode):
    """A declared key holds a bad value.

    When the key was matched through the wildcard, `key` reads
    "<key> -> [DefaultKey]".
    """

    e: Literal["ObjectError"] = "ObjectError"
    error: "GatekeepError"
    key: Any


class ObjectRequiredKeyMissing(ErrorNode):
    e: Literal["ObjectRequiredKeyMissing"] = "ObjectRequiredKeyMissing"
    key: Any


class ObjectIllegalExtraKey(ErrorNode):
    e: Literal["ObjectIllegalExtraKey"] = "ObjectIllegalExtraKey"
    key: Any


class CheckerFailed(ErrorNode):
    """A predicate rejected the value; `result` is False or its message."""

    e: Literal["CheckerFailed"] = "CheckerFailed"
    result: Union[Literal[False], str]


GatekeepError = Union[
    IncorrectType,
    IncorrectValue,
    UnionNoMatch,
    ArrayError,
    RecordError,
    ObjectError,
    ObjectRequiredKeyMissing,
    ObjectIllegalExtraKey,
    CheckerFailed,
]

# check() returns exactly True on success, an error node otherwise
CheckResult = Union[Literal[True], GatekeepError]

for _model in (UnionNoMatch, ArrayError, RecordError, ObjectError):
    _model.model_rebuild()

ERROR_KINDS = {model.model_fields["e"].default: model for model in GatekeepError.__args__}
