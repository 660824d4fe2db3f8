import codecs

import pytest

from bqtools.data.errors import (
    MalformedKeyError,
    ParseError,
    TypeMismatchError,
    UnknownTypeCodeError,
)
from bqtools.data.nbt import (
    NbtValue,
    TagType,
    TypedKey,
    coerce_arrays,
    decode_document,
    normalize_document,
    split_key,
)
from bqtools.data.document_loader import parse_document
from tests.helpers.export_builders import tree


def test_decode_document_keeps_suffixed_keys() -> None:
    raw = decode_document(b'{"name:8": "Intro", "tasks:9": {"0:10": {}}}', "quest.json")

    assert raw == {"name:8": "Intro", "tasks:9": {"0:10": {}}}


def test_decode_document_accepts_utf8_bom() -> None:
    raw = decode_document(codecs.BOM_UTF8 + b'{"name:8": "x"}', "quest.json")

    assert raw == {"name:8": "x"}


def test_decode_unbalanced_braces_reports_file_and_offset() -> None:
    data = b'{"name:8": "x"'
    with pytest.raises(ParseError) as excinfo:
        decode_document(data, "Quests/broken.json")

    assert excinfo.value.source == "Quests/broken.json"
    assert excinfo.value.offset == len(data)
    assert "Quests/broken.json" in str(excinfo.value)


def test_decode_offset_counts_bytes_not_characters() -> None:
    data = '{"name:8": "\u00e9" ]'.encode("utf-8")
    with pytest.raises(ParseError) as excinfo:
        decode_document(data, "quest.json")

    assert excinfo.value.offset == data.index(b"]")


def test_decode_unterminated_string_fails() -> None:
    with pytest.raises(ParseError) as excinfo:
        decode_document(b'{"name:8": "abc', "quest.json")

    assert "Unterminated string" in excinfo.value.reason


def test_decode_rejects_invalid_utf8() -> None:
    with pytest.raises(ParseError) as excinfo:
        decode_document(b'{"name:8": "\xff"}', "quest.json")

    assert excinfo.value.offset == 12


def test_decode_rejects_non_object_root() -> None:
    with pytest.raises(ParseError) as excinfo:
        decode_document(b"  [1, 2]", "quest.json")

    assert excinfo.value.offset == 2


def test_split_key_uses_last_colon() -> None:
    assert split_key("name:8", "f") == TypedKey("name", TagType.STRING)
    assert split_key("minecraft:stone:10", "f") == TypedKey("minecraft:stone", TagType.COMPOUND)
    assert split_key("0:10", "f") == TypedKey("0", TagType.COMPOUND)


@pytest.mark.parametrize("raw_key", ["name", "name:", ":8", "name:abc", "name:-1"])
def test_split_key_rejects_malformed_keys(raw_key: str) -> None:
    with pytest.raises(MalformedKeyError) as excinfo:
        split_key(raw_key, "quest.json")

    assert excinfo.value.key == raw_key


@pytest.mark.parametrize("type_code", [0, 13, 99])
def test_split_key_rejects_unknown_type_codes(type_code: int) -> None:
    with pytest.raises(UnknownTypeCodeError) as excinfo:
        split_key(f"name:{type_code}", "quest.json")

    assert excinfo.value.type_code == type_code


def test_bare_key_is_never_treated_as_untyped() -> None:
    raw = {"properties:10": {"betterquesting:10": {"name": "Intro"}}}
    with pytest.raises(MalformedKeyError) as excinfo:
        normalize_document(raw, "quest.json")

    assert excinfo.value.path == "properties.betterquesting"
    assert excinfo.value.key == "name"


def test_normalize_attaches_declared_types() -> None:
    root = normalize_document(
        {"name:8": "Intro", "isMain:1": True, "repeatTime:3": 20, "ids:11": [1, 2]},
        "quest.json",
    )

    assert root.value["name"] == NbtValue(TagType.STRING, "Intro")
    assert root.value["isMain"] == NbtValue(TagType.BYTE, 1)
    assert root.value["repeatTime"] == NbtValue(TagType.INT, 20)
    assert root.value["ids"] == NbtValue(TagType.INT_ARRAY, (1, 2))


def test_normalize_converts_numbers_for_floating_tags() -> None:
    root = normalize_document({"scale:5": 2}, "quest.json")

    assert root.value["scale"] == NbtValue(TagType.FLOAT, 2.0)


@pytest.mark.parametrize(
    ("raw", "path", "expected", "actual"),
    [
        ({"tasks:9": "oops"}, "tasks", "List", "string"),
        ({"name:8": 5}, "name", "String", "integer"),
        ({"count:3": 1.5}, "count", "Int", "float"),
        ({"count:3": True}, "count", "Int", "boolean"),
        ({"ids:11": [1, "2"]}, "ids", "IntArray", "array"),
        ({"name:8": None}, "name", "String", "null"),
        ({"block:10": [1]}, "block", "Compound", "array"),
        ({"list:9": {"name:8": "x"}}, "list", "List", "object"),
    ],
)
def test_normalize_rejects_shape_mismatches(raw: dict, path: str, expected: str, actual: str) -> None:
    with pytest.raises(TypeMismatchError) as excinfo:
        normalize_document(raw, "quest.json")

    assert excinfo.value.path == path
    assert excinfo.value.expected == expected
    assert excinfo.value.actual == actual


def test_normalize_rejects_names_that_collide_after_stripping() -> None:
    with pytest.raises(MalformedKeyError):
        normalize_document({"name:8": "a", "name:3": 1}, "quest.json")


def test_normalize_infers_tags_for_plain_list_elements() -> None:
    root = normalize_document({"items:9": [{"id:8": "a"}, 3, "x"]}, "quest.json")

    elements = root.value["items"].value
    assert [element.tag for element in elements] == [TagType.COMPOUND, TagType.INT, TagType.STRING]
    assert elements[0].value["id"] == NbtValue(TagType.STRING, "a")


def test_pseudo_array_is_ordered_by_numeric_index() -> None:
    root = tree({"values:9": {"2:3": 22, "0:3": 0, "1:3": 11}})

    assert root.value["values"].to_python() == [0, 11, 22]


def test_pseudo_array_orders_numerically_not_textually() -> None:
    root = tree({"values:9": {"10:8": "ten", "9:8": "nine", "2:8": "two"}})

    assert root.value["values"].to_python() == ["two", "nine", "ten"]


def test_pseudo_array_allows_gaps() -> None:
    root = tree({"values:9": {"7:8": "b", "1:8": "a"}})

    assert root.value["values"].to_python() == ["a", "b"]


def test_pseudo_array_keeps_declared_tag() -> None:
    root = tree({"tasks:10": {"1:10": {"id:8": "b"}, "0:10": {"id:8": "a"}}})

    tasks = root.value["tasks"]
    assert tasks.tag is TagType.COMPOUND
    assert tasks.to_python() == [{"id": "a"}, {"id": "b"}]


def test_object_with_non_index_names_stays_object() -> None:
    root = tree({"block:10": {"01:3": 1, "2:3": 2}})

    assert root.value["block"].to_python() == {"01": 1, "2": 2}


def test_nested_pseudo_arrays_are_coerced_bottom_up() -> None:
    root = tree({"grid:9": {"1:9": {"1:3": 11, "0:3": 10}, "0:9": {"0:3": 0}}})

    assert root.value["grid"].to_python() == [[0], [10, 11]]


def test_empty_list_object_becomes_empty_list() -> None:
    root = tree({"tasks:9": {}, "block:10": {}})

    assert root.value["tasks"].value == ()
    assert dict(root.value["block"].value) == {}


def test_coercion_is_idempotent() -> None:
    root = tree({"grid:9": {"1:9": {"1:3": 11, "0:3": 10}, "0:9": {"0:3": 0}}, "name:8": "x"})

    assert coerce_arrays(root) == root


def test_coerced_containers_are_read_only() -> None:
    root = tree({"values:9": {"0:3": 1}, "items:9": [2], "block:10": {"a:3": 3}})

    with pytest.raises(AttributeError):
        root.value["values"].value.append(NbtValue(TagType.INT, 4))
    with pytest.raises(AttributeError):
        root.value["items"].value.append(NbtValue(TagType.INT, 4))
    with pytest.raises(TypeError):
        root.value["block"].value["b"] = NbtValue(TagType.INT, 4)
    with pytest.raises(TypeError):
        root.value["extra"] = NbtValue(TagType.INT, 4)


def test_deeply_nested_arrays_raise_parse_error() -> None:
    depth = 100_000
    data = b'{"a:9": ' + b"[" * depth + b"]" * depth + b"}"
    with pytest.raises(ParseError) as excinfo:
        parse_document(data, "deep.json")

    assert excinfo.value.source == "deep.json"
    assert "nested too deeply" in excinfo.value.reason


def test_deeply_nested_compounds_raise_parse_error() -> None:
    depth = 5_000
    data = b'{"a:10": ' * depth + b"{}" + b"}" * depth
    with pytest.raises(ParseError) as excinfo:
        parse_document(data, "deep.json")

    assert "nested too deeply" in excinfo.value.reason
