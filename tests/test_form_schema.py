"""Form schema model unit tests"""

import pytest
from pydantic import ValidationError

from specform.form_schema import (
    ArrayField,
    ConstOption,
    FieldGroup,
    FormSchema,
    LeafField,
    OneOfField,
)


def test_leaf_field_with_required_fields():
    field = LeafField(id="host", path=("host",), type="string", title="Host")

    assert field.kind == "leaf"
    assert field.required is False
    assert field.order is None
    assert field.group is None
    assert field.parent_value is None
    assert field.secret is False
    assert field.enum is None


def test_leaf_field_accepts_camel_case_aliases():
    field = LeafField(
        id="host",
        path=["host"],
        type="string",
        title="Host",
        patternDescriptor="hostname",
        alwaysShow=True,
        parentValue="x",
    )

    assert field.path == ("host",)
    assert field.pattern_descriptor == "hostname"
    assert field.always_show is True
    assert field.parent_value == "x"


def test_order_keeps_integer_values():
    field = LeafField(id="a", path=("a",), type="string", title="a", order=1)

    assert field.order == 1
    assert isinstance(field.order, int)


def test_array_field_defaults():
    field = ArrayField(id="tags", path=("tags",), title="Tags")

    assert field.kind == "array"
    assert field.type == "array"
    assert field.item_type == "string"
    assert field.default == ()
    assert field.subfields == ()


def test_one_of_field_defaults():
    field = OneOfField(id="mode", path=("mode",), title="Mode")

    assert field.kind == "one_of"
    assert field.type == "object"
    assert field.display_type == "dropdown"
    assert field.const_key is None
    assert field.const_options == ()


def test_subfields_accept_any_field_kind():
    leaf = LeafField(id="a.x.b", path=("a", "b"), type="string", title="b")
    nested = OneOfField(id="a.x.c", path=("a", "c"), title="c")
    field = OneOfField(
        id="a",
        path=("a",),
        title="a",
        const_options=[ConstOption(value="x", title="x")],
        subfields=[leaf, nested],
    )

    assert field.subfields == (leaf, nested)


def test_subfields_are_validated_from_dicts_by_kind():
    field = ArrayField.model_validate(
        {
            "id": "buckets",
            "path": ["buckets"],
            "title": "Buckets",
            "subfields": [
                {
                    "kind": "leaf",
                    "id": "buckets.0.name",
                    "path": ["buckets", "0", "name"],
                    "type": "string",
                    "title": "name",
                }
            ],
        }
    )

    assert isinstance(field.subfields[0], LeafField)


def test_leaf_field_missing_required_field():
    with pytest.raises(ValidationError) as exc_info:
        LeafField(id="host", path=("host",), title="Host")

    errors = exc_info.value.errors()
    assert any(error["loc"] == ("type",) for error in errors)


def test_field_group_missing_id():
    with pytest.raises(ValidationError) as exc_info:
        FieldGroup(title="Group")

    errors = exc_info.value.errors()
    assert any(error["loc"] == ("id",) for error in errors)


def test_fields_are_frozen():
    field = LeafField(id="host", path=("host",), type="string", title="Host")

    with pytest.raises(ValidationError):
        field.title = "Other"


def test_form_schema_serialization():
    form = FormSchema(
        groups=[
            FieldGroup(
                id="default",
                fields=[
                    ArrayField(
                        id="tags",
                        path=("tags",),
                        title="Tags",
                        item_type="integer",
                    )
                ],
            )
        ]
    )

    data = form.to_json_data()
    field = data["groups"][0]["fields"][0]
    assert field["itemType"] == "integer"
    assert field["path"] == ["tags"]
    assert field["parentValue"] is None

    snake = form.to_json_data(by_alias=False)
    assert snake["groups"][0]["fields"][0]["item_type"] == "integer"


def test_field_equality_compares_nested_subfields():
    def union(password_type):
        return OneOfField(
            id="ssl",
            path=("ssl",),
            const_key="mode",
            subfields=(
                LeafField(id="ssl.a.password", path=("ssl", "password"), type=password_type),
            ),
        )

    assert union("string") == union("string")
    assert union("string") != union("integer")
    assert union("string") != union("string").model_copy(update={"subfields": ()})
    assert union("string") != "ssl"


def test_field_equality_distinguishes_field_kinds():
    leaf = LeafField(id="tags", path=("tags",), type="array")
    array = ArrayField(id="tags", path=("tags",))

    assert leaf != array
