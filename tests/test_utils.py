"""Utility function unit tests"""

import json

import pytest

from specform.errors import SchemaException
from specform.form_schema import ArrayField, FieldGroup, LeafField, OneOfField
from specform.utils import control_key, encode_json, ensure_path, find_field, iter_fields


def leaf(field_id, *path):
    return LeafField(id=field_id, path=path, type="string", title=path[-1])


def sample_groups():
    union = OneOfField(
        id="mode",
        path=("mode",),
        title="Mode",
        subfields=[leaf("mode.a.x", "mode", "x"), leaf("mode.b.x", "mode", "x")],
    )
    array = ArrayField(
        id="items", path=("items",), title="Items", subfields=[leaf("items.0.y", "items", "0", "y")]
    )
    return (
        FieldGroup(id="first", fields=[union]),
        FieldGroup(id="second", fields=[array, leaf("z", "z")]),
    )


def test_control_key():
    assert control_key(("credentials", "client_id")) == "credentials.client_id"
    assert control_key(["buckets", "0", "name"]) == "buckets.0.name"
    assert control_key(()) == ""


def test_iter_fields_is_depth_first():
    first, second = sample_groups()

    assert [f.id for f in iter_fields(first.fields)] == ["mode", "mode.a.x", "mode.b.x"]
    assert [f.id for f in iter_fields(second.fields)] == ["items", "items.0.y", "z"]


def test_find_field():
    groups = sample_groups()

    assert find_field(groups, "mode.b.x").path == ("mode", "x")
    assert find_field(groups, "items.0.y").id == "items.0.y"
    assert find_field(groups, "missing") is None


def test_ensure_path_creates_directories(tmp_path):
    target = tmp_path / "a" / "b"

    result = ensure_path(target)

    assert result.exists()
    assert result.is_dir()


def test_encode_json_keeps_non_ascii_text():
    content = encode_json({"title": "Hôte"}, indent=2)

    assert "Hôte" in content
    assert json.loads(content) == {"title": "Hôte"}


def test_encode_json_rejects_data_nested_beyond_the_encoder():
    data: list = []
    for _ in range(100_000):
        data = [data]

    with pytest.raises(SchemaException, match="nested too deeply"):
        encode_json(data)
