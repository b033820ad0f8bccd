"""Tests for descriptor construction and the combinators."""

import pytest

from gatekeep import (
    Any,
    ArrayOf,
    Bool,
    DefaultKey,
    DescriptorError,
    Func,
    Join,
    Nullish,
    Num,
    Obj,
    RecordOf,
    Str,
    Sym,
    Union,
    Void,
    WithOptional,
    join,
    union,
)
from gatekeep.descriptors import (
    ArrayDescriptor,
    CheckerDescriptor,
    Descriptor,
    Family,
    OptionalObjectDescriptor,
    RecordDescriptor,
    Tag,
    UnionDescriptor,
)


class TestAtomicDescriptors:

    @pytest.mark.parametrize("descriptor, tag", [
        (Void, Tag.VOID),
        (Any, Tag.ANY),
        (Nullish, Tag.NULLISH),
        (Bool, Tag.BOOLEAN),
        (Str, Tag.STRING),
        (Num, Tag.NUMBER),
        (Sym, Tag.SYMBOL),
        (Func, Tag.FUNCTION),
        (Obj, Tag.OBJECT),
    ])
    def test_tags(self, descriptor, tag):
        assert isinstance(descriptor, Descriptor)
        assert descriptor.tag is tag

    def test_descriptors_are_frozen(self):
        with pytest.raises(Exception):
            Num.tag = Tag.STRING


class TestCheckers:

    @pytest.mark.parametrize("primitive, tag, family", [
        (Str, Tag.STRING_CHECKER, Family.STRING),
        (Num, Tag.NUMBER_CHECKER, Family.NUMBER),
        (Sym, Tag.SYMBOL_CHECKER, Family.SYMBOL),
        (Func, Tag.FUNCTION_CHECKER, Family.FUNCTION),
        (Obj, Tag.OBJECT_CHECKER, Family.OBJECT),
    ])
    def test_calling_a_primitive_builds_a_checker(self, primitive, tag, family):
        def predicate(value):
            return True

        checker = primitive(predicate)
        assert isinstance(checker, CheckerDescriptor)
        assert checker.tag is tag
        assert checker.family is family
        assert checker.predicate is predicate

    def test_primitive_is_unchanged_by_building_a_checker(self):
        Num(lambda n: n > 0)
        assert Num.tag is Tag.NUMBER


class TestComposites:

    def test_array_of(self):
        descriptor = ArrayOf(Num)
        assert isinstance(descriptor, ArrayDescriptor)
        assert descriptor.tag is Tag.ARRAY
        assert descriptor.element is Num

    def test_record_of(self):
        descriptor = RecordOf(Str)
        assert isinstance(descriptor, RecordDescriptor)
        assert descriptor.value_type is Str

    def test_union_keeps_order(self):
        descriptor = union([Str, Num, None])
        assert isinstance(descriptor, UnionDescriptor)
        assert descriptor.alternatives == (Str, Num, None)

    def test_union_alias(self):
        assert Union is union


class TestWithOptional:

    def test_optional_contains_required_keys(self):
        descriptor = WithOptional({"a": Num}, {"b": Str})
        assert isinstance(descriptor, OptionalObjectDescriptor)
        assert descriptor.required == {"a": Num}
        assert descriptor.optional == {"a": Num, "b": Str}

    def test_optional_overrides_required_on_shared_key(self):
        descriptor = WithOptional({"a": Num}, {"a": Str})
        assert descriptor.optional == {"a": Str}
        assert descriptor.required == {"a": Num}

    def test_arguments_are_not_mutated(self):
        required = {"a": Num}
        optional = {"b": Str}
        WithOptional(required, optional)
        assert required == {"a": Num}
        assert optional == {"b": Str}

    def test_wildcard_in_required_is_rejected(self):
        with pytest.raises(DescriptorError, match="DefaultKey"):
            WithOptional({DefaultKey: Str}, {})

    def test_descriptor_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            WithOptional({"a": Num, DefaultKey: Num}, {})

    def test_wildcard_in_optional_is_allowed(self):
        descriptor = WithOptional({"a": Num}, {DefaultKey: Str})
        assert DefaultKey in descriptor.optional


class TestJoin:

    def test_single_shape_returned_as_is(self):
        shape = {"a": Num}
        assert join([shape]) is shape

    def test_later_shapes_win(self):
        merged = join([{"a": Num, "b": Num}, {"b": Str}, {"c": Bool}])
        assert merged == {"a": Num, "b": Str, "c": Bool}

    def test_inputs_not_mutated(self):
        first = {"a": Num}
        join([first, {"b": Str}])
        assert first == {"a": Num}

    def test_empty(self):
        assert join([]) == {}

    def test_alias(self):
        assert Join is join


class TestDefaultKey:

    def test_never_equals_a_string_key(self):
        assert DefaultKey != "[DefaultKey]"
        assert "[DefaultKey]" not in {DefaultKey: Str}

    def test_str(self):
        assert str(DefaultKey) == "[DefaultKey]"
