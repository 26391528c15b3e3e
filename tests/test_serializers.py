from types import SimpleNamespace

import pytest

from keyed_set.serializers.builders import by_attribute, by_item, identity
from keyed_set.serializers.canonical import JsonKey, json_key
from keyed_set.sets.keyed import KeyedSet


def test_identity_returns_value() -> None:
    value = object()
    assert identity(value) is value


def test_by_attribute_single_multiple_and_dotted() -> None:
    user = SimpleNamespace(name="alice", age=30, owner=SimpleNamespace(id=7))
    assert by_attribute("name")(user) == "alice"
    assert by_attribute("name", "age")(user) == ("alice", 30)
    assert by_attribute("owner.id")(user) == 7


def test_by_attribute_rejects_invalid_inputs() -> None:
    with pytest.raises(ValueError, match="at least one attribute is required"):
        _ = by_attribute()
    with pytest.raises(ValueError, match="attribute names must not be empty"):
        _ = by_attribute("")
    with pytest.raises(TypeError, match="attribute names must be strings, got int"):
        _ = by_attribute(1)  # type: ignore[arg-type]


def test_by_item_single_and_multiple() -> None:
    row = {"id": 1, "region": "eu"}
    assert by_item("id")(row) == 1
    assert by_item("id", "region")(row) == (1, "eu")
    assert by_item(0)(["first", "second"]) == "first"


def test_by_item_rejects_invalid_inputs() -> None:
    with pytest.raises(ValueError, match="at least one item is required"):
        _ = by_item()
    with pytest.raises(ValueError, match="item names must not be empty"):
        _ = by_item("")


def test_json_key_is_canonical() -> None:
    assert json_key({"b": 1, "a": [1, 2]}) == '{"a":[1,2],"b":1}'
    assert json_key((1, "two")) == '[1,"two"]'
    assert json_key({2, 1}) == "[1,2]"
    assert json_key({"b": 1, "a": 2}) == json_key({"a": 2, "b": 1})


def test_json_key_propagates_encoder_errors() -> None:
    with pytest.raises(TypeError, match="not JSON serializable"):
        _ = json_key(object())


def test_json_key_dedupes_structurally_equal_dicts() -> None:
    keyed = KeyedSet([{"a": 1, "b": 2}, {"c": 3}, {"b": 2, "a": 1}], serializer=JsonKey())
    assert keyed.values() == [{"a": 1, "b": 2}, {"c": 3}]
    assert keyed.has({"b": 2, "a": 1})


def test_json_key_field_and_custom_encoder() -> None:
    serializer = JsonKey(encoder=lambda value: f"<{value}>", field="meta")
    assert serializer({"meta": [1, 2], "other": 3}) == "<[1, 2]>"
    assert repr(serializer) == "JsonKey(field='meta')"


def test_json_key_rejects_empty_field() -> None:
    with pytest.raises(ValueError, match="field must not be empty"):
        _ = JsonKey(field="")
