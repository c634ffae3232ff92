"""Tests for input normalization into error records and messages."""

from fate.coerce import dump_json, flatten, is_stringable, to_error, to_message
from fate.errors import OutcomeError


class Named:
    def __init__(self, name: str):
        self.name = name

    def __str__(self) -> str:
        return f"Named<{self.name}>"


class Plain:
    pass


class TestFlatten:
    def test_nested_sequences_are_fully_flattened(self):
        assert list(flatten([1, [2, (3, [4])], 5])) == [1, 2, 3, 4, 5]

    def test_atomic_value_yields_itself(self):
        assert list(flatten("abc")) == ["abc"]

    def test_dicts_are_not_descended(self):
        assert list(flatten([{"a": 1}])) == [{"a": 1}]

    def test_empty_nesting_yields_nothing(self):
        assert list(flatten([[], [[]]])) == []


class TestIsStringable:
    def test_custom_str(self):
        assert is_stringable(Named("x")) is True

    def test_string(self):
        assert is_stringable("x") is True

    def test_none(self):
        assert is_stringable(None) is False

    def test_plain_object_uses_default(self):
        assert is_stringable(Plain()) is False

    def test_dict_uses_default(self):
        assert is_stringable({"key": "value"}) is False


class TestToMessage:
    def test_string_kept_verbatim(self):
        assert to_message("hello") == "hello"

    def test_number_is_stringified(self):
        assert to_message(42) == "42"

    def test_dict_is_json(self):
        assert to_message({"key": "value"}) == '{"key": "value"}'

    def test_none_is_json_null(self):
        assert to_message(None) == "null"

    def test_custom_str_is_used(self):
        assert to_message(Named("a")) == "Named<a>"

    def test_unencodable_object_falls_back_to_repr(self):
        assert to_message(Plain()).startswith('"<')

    def test_circular_reference_does_not_raise(self):
        looped: dict = {}
        looped["self"] = looped

        assert to_message(looped) == repr(looped)


class TestToError:
    def test_exception_kept_as_is(self):
        error = ValueError("bad")
        assert to_error(error) is error

    def test_string_wrapped(self):
        error = to_error("boom")
        assert isinstance(error, OutcomeError)
        assert error.message == "boom"

    def test_custom_str_wrapped(self):
        assert to_error(Named("n")).message == "Named<n>"

    def test_mapping_wrapped_as_json(self):
        assert to_error({"code": 7}).message == '{"code": 7}'

    def test_none_wrapped_as_null(self):
        assert to_error(None).message == "null"


def test_dump_json_plain_values():
    assert dump_json([1, "a", None]) == '[1, "a", null]'
