"""
Tests for primitive parsers.
"""

import math

import pytest

from fracture import (
    UNDEFINED,
    failure,
    is_any_value,
    is_array,
    is_boolean,
    is_exactly,
    is_number,
    is_object,
    is_string,
    is_undefined,
    success,
)
from fracture.lib.failures import snapshot, stringify, type_of


class TestIsString:
    def test_succeeds(self):
        assert is_string("yes") == success("yes")
        assert is_string("") == success("")

    def test_fails(self):
        assert is_string(1) == failure(1, "typeof value is number")

    def test_null_is_named_null(self):
        assert is_string(None) == failure(None, "typeof value is null")

    def test_undefined(self):
        assert is_string(UNDEFINED) == failure(UNDEFINED, "typeof value is undefined")

    def test_containers_are_objects(self):
        assert is_string({}) == failure({}, "typeof value is object")
        assert is_string([]) == failure([], "typeof value is object")


class TestIsNumber:
    def test_succeeds(self):
        assert is_number(1) == success(1)
        assert is_number(1.5) == success(1.5)
        assert is_number(0) == success(0)

    def test_nan_is_a_number(self):
        result = is_number(math.nan)
        assert result.is_success()
        assert math.isnan(result.value)

    def test_boolean_is_not_a_number(self):
        assert is_number(True) == failure(True, "typeof value is boolean")

    def test_string_is_not_a_number(self):
        assert is_number("1") == failure("1", "typeof value is string")


class TestIsBoolean:
    def test_succeeds(self):
        assert is_boolean(True) == success(True)
        assert is_boolean(False) == success(False)

    def test_fails(self):
        assert is_boolean(0) == failure(0, "typeof value is number")
        assert is_boolean(None) == failure(None, "typeof value is null")


class TestIsUndefined:
    def test_succeeds(self):
        assert is_undefined(UNDEFINED) == success(UNDEFINED)

    def test_null_is_not_undefined(self):
        assert is_undefined(None) == failure(None, "typeof value is null")

    def test_fails(self):
        assert is_undefined("") == failure("", "typeof value is string")


class TestIsAnyValue:
    @pytest.mark.parametrize("value", [None, UNDEFINED, 1, "a", [1], {"a": 1}])
    def test_echoes(self, value):
        result = is_any_value(value)
        assert result.is_success()
        assert result.value is value


class TestIsObject:
    def test_succeeds(self):
        value = {"a": 1}
        assert is_object(value) == success(value)

    def test_rejects_null(self):
        assert is_object(None) == failure(None, "typeof value is null")

    def test_rejects_list(self):
        assert is_object([1]) == failure([1], "typeof value is object")

    def test_rejects_scalars(self):
        assert is_object("a") == failure("a", "typeof value is string")


class TestIsArray:
    def test_succeeds(self):
        assert is_array([1, 2]) == success([1, 2])
        assert is_array(()) == success(())

    @pytest.mark.parametrize("value", [None, {"0": 1}, "abc", 3])
    def test_fails(self, value):
        assert is_array(value) == failure(value, "value is not Array.isArray")


class TestIsExactly:
    def test_string(self):
        parse = is_exactly("one")
        assert parse("one") == success("one")
        assert parse("two") == failure("two", "is not one")

    def test_number(self):
        parse = is_exactly(1)
        assert parse(1) == success(1)
        assert parse(1.0) == success(1)
        assert parse("1") == failure("1", "is not 1")

    def test_kind_must_match(self):
        assert is_exactly(1)(True) == failure(True, "is not 1")
        assert is_exactly(True)(1) == failure(1, "is not true")
        assert is_exactly(False)(0) == failure(0, "is not false")

    def test_rejects_unsupported_literal(self):
        with pytest.raises(TypeError):
            is_exactly(None)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            is_exactly([1])  # type: ignore[arg-type]


class TestHelpers:
    def test_type_of(self):
        assert type_of(None) == "null"
        assert type_of(UNDEFINED) == "undefined"
        assert type_of(False) == "boolean"
        assert type_of(2) == "number"
        assert type_of(2.5) == "number"
        assert type_of("s") == "string"
        assert type_of(len) == "function"
        assert type_of({}) == "object"
        assert type_of([]) == "object"

    def test_stringify(self):
        assert stringify(None) == "null"
        assert stringify(UNDEFINED) == "undefined"
        assert stringify(True) == "true"
        assert stringify(10) == "10"
        assert stringify(10.0) == "10"
        assert stringify(1.5) == "1.5"
        assert stringify(math.inf) == "Infinity"
        assert stringify(-math.inf) == "-Infinity"
        assert stringify(math.nan) == "NaN"
        assert stringify("text") == "text"
        assert stringify({"a": [1, 2]}) == '{"a":[1,2]}'
        assert stringify([1, "b"]) == '[1,"b"]'

    def test_stringify_unserialisable_containers(self):
        circular = [1]
        circular.append(circular)
        assert stringify(circular) == "[object Array]"
        looped = {}
        looped["self"] = looped
        assert stringify(looped) == "[object Object]"

    def test_undefined_sentinel(self):
        assert not UNDEFINED
        assert repr(UNDEFINED) == "UNDEFINED"


class TestSnapshot:
    def test_primitive_failure_value_is_a_copy(self):
        data = {"name": ["a"]}
        result = is_string(data)
        data["name"].append("b")
        assert result == failure({"name": ["a"]}, "typeof value is object")

    def test_tuples_and_nesting(self):
        inner = [1, {"b": (2, [3])}]
        copied = snapshot(inner)
        assert copied == [1, {"b": (2, [3])}]
        assert copied[1]["b"][1] is not inner[1]["b"][1]
        assert isinstance(copied[1]["b"], tuple)

    def test_circular_list(self):
        value = [1]
        value.append(value)
        copied = snapshot(value)
        assert copied is not value
        assert copied[1] is copied

    def test_uncopyable_leaf_kept_by_reference(self):
        gen = (i for i in range(3))
        assert snapshot([gen])[0] is gen

    def test_scalars_returned_as_is(self):
        assert snapshot("text") == "text"
        assert snapshot(None) is None
        assert snapshot(UNDEFINED) is UNDEFINED
