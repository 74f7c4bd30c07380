from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .consts import DEFAULT_DISPLAY_TYPE, DEFAULT_ITEM_TYPE, TYPE_ARRAY, TYPE_OBJECT

Number = Union[int, float]


class FormModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def __eq__(self, other: object) -> bool:
        """Field-by-field equality that walks nested models with an explicit stack."""
        if not isinstance(other, FormModel):
            return NotImplemented

        stack = [(self, other)]
        while stack:
            a, b = stack.pop()
            if not (isinstance(a, FormModel) and isinstance(b, FormModel)):
                if a != b:
                    return False
                continue
            if type(a) is not type(b):
                return False
            for name in type(a).model_fields:
                x, y = getattr(a, name), getattr(b, name)
                if _holds_models(x) or _holds_models(y):
                    if not (isinstance(x, tuple) and isinstance(y, tuple)) or len(x) != len(y):
                        return False
                    stack.extend(zip(x, y))
                elif isinstance(x, FormModel) or isinstance(y, FormModel):
                    stack.append((x, y))
                elif x != y:
                    return False
        return True


def _holds_models(value: Any) -> bool:
    return isinstance(value, tuple) and any(isinstance(item, FormModel) for item in value)


class ConstOption(FormModel):
    value: Any
    title: str
    description: Optional[str] = None


class BaseField(FormModel):
    id: str
    path: tuple[str, ...]
    type: str
    title: str
    description: Optional[str] = None
    required: bool = False
    order: Optional[Number] = None
    group: Optional[str] = None
    parent_value: Any = None


class LeafField(BaseField):
    kind: Literal["leaf"] = "leaf"
    secret: bool = False
    default: Any = None
    examples: Any = None
    pattern: Optional[str] = None
    pattern_descriptor: Optional[str] = None
    multiline: Optional[bool] = None
    enum: Optional[tuple[Any, ...]] = None
    format: Optional[str] = None
    minimum: Optional[Number] = None
    maximum: Optional[Number] = None
    always_show: Optional[bool] = None


class ArrayField(BaseField):
    kind: Literal["array"] = "array"
    type: str = TYPE_ARRAY
    item_type: str = DEFAULT_ITEM_TYPE
    default: Any = ()
    subfields: tuple[FieldNode, ...] = ()


class OneOfField(BaseField):
    kind: Literal["one_of"] = "one_of"
    type: str = TYPE_OBJECT
    display_type: str = DEFAULT_DISPLAY_TYPE
    const_key: Optional[str] = None
    const_options: tuple[ConstOption, ...] = ()
    subfields: tuple[FieldNode, ...] = ()


FieldNode = Annotated[
    Union[LeafField, ArrayField, OneOfField], Field(discriminator="kind")
]

ArrayField.model_rebuild()
OneOfField.model_rebuild()


class FieldGroup(FormModel):
    id: str
    title: Optional[str] = None
    fields: tuple[FieldNode, ...] = ()


class FormSchema(FormModel):
    groups: tuple[FieldGroup, ...]

    def to_json_data(self, by_alias: bool = True) -> dict:
        groups = []
        for group in self.groups:
            data = group.model_dump(mode="json", by_alias=by_alias, exclude={"fields"})
            data["fields"] = dump_fields(group.fields, by_alias=by_alias)
            groups.append(data)
        return {"groups": groups}


def dump_fields(fields, by_alias: bool = True) -> list[dict]:
    """JSON-ready dicts for a field list, nested subfields included.

    Each node is dumped without its subfields and the subfield lists are
    filled from an explicit stack, so the tree depth is not bounded by
    pydantic's serializer or the recursion limit.
    """
    result: list[dict] = []
    stack = [(fields, result)]
    while stack:
        nodes, out = stack.pop()
        for node in nodes:
            data = node.model_dump(mode="json", by_alias=by_alias, exclude={"subfields"})
            out.append(data)
            if isinstance(node, (ArrayField, OneOfField)):
                data["subfields"] = []
                stack.append((node.subfields, data["subfields"]))
    return result
