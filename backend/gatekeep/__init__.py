"""gatekeep: runtime structural type checking with structured errors.

Usage:
    from gatekeep import ArrayOf, Num, Str, check, format_error

    result = check({"name": Str, "scores": ArrayOf(Num)}, payload)
    if result is not True:
        print(format_error(result))

Note that `Any` and `Union` exported here are descriptors, not the typing
constructs of the same name.
"""

from gatekeep.descriptors import (
    DefaultKey,
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
from gatekeep.validators import (
    check,
    TypeGuard,
    type_of,
    GatekeepError,
    CheckResult,
)
from gatekeep.renderers import format_error, error_to_json, error_to_json_string, type_to_json
from gatekeep.exceptions import GatekeepException, DescriptorError, GatekeepViolation

# Short names
Any = Anything
Bool = Boolean
Str = StringOf
Num = NumberOf
Sym = SymbolOf
Func = FunctionOf
Obj = ObjectOf
Union = union
Join = join

__all__ = [
    "DefaultKey",
    "Void",
    "Any",
    "Anything",
    "Nullish",
    "Bool",
    "Boolean",
    "Str",
    "StringOf",
    "Num",
    "NumberOf",
    "Sym",
    "SymbolOf",
    "Func",
    "FunctionOf",
    "Obj",
    "ObjectOf",
    "ArrayOf",
    "RecordOf",
    "WithOptional",
    "Union",
    "union",
    "Join",
    "join",
    "check",
    "TypeGuard",
    "type_of",
    "GatekeepError",
    "CheckResult",
    "format_error",
    "error_to_json",
    "error_to_json_string",
    "type_to_json",
    "GatekeepException",
    "DescriptorError",
    "GatekeepViolation",
]
