"""Traversal of one nesting level of schema properties."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from ..consts import DEFAULT_LEAF_TYPE, KEY_SECRET, PATH_SEPARATOR
from ..enums import NodeKind
from ..form_schema import LeafField
from ..schema import (
    child_properties,
    classify,
    declared_order,
    declared_type,
    detach,
    flag_attr,
    number_attr,
    required_names,
    text_attr,
    visible_properties,
)
from .driver import Build


@dataclass(frozen=True)
class FieldScope:
    """Location of a node in the form.

    ``path`` is the control path. ``id_path`` mirrors it but also records the
    discriminant value of every union variant that was entered, which keeps
    ids unique when variants reuse property names.
    """

    path: tuple = ()
    id_path: tuple = ()

    @property
    def id(self) -> str:
        return PATH_SEPARATOR.join(self.id_path)

    def child(self, key: str) -> "FieldScope":
        return FieldScope(self.path + (key,), self.id_path + (key,))

    def variant(self, value: Any, index: Optional[int] = None) -> "FieldScope":
        """Scope of a union variant; ``index`` disambiguates repeated values."""
        segments = (id_segment(value),) if index is None else (id_segment(value), str(index))
        return FieldScope(self.path, self.id_path + segments)


def id_segment(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def walk_properties(
    properties: Mapping, scope: FieldScope, required: frozenset
) -> Build[tuple]:
    """Build the unsorted fields of one level, flattening plain objects."""
    fields = []
    for key, prop in visible_properties(properties, scope.id):
        built = yield build_property(key, prop, scope.child(key), key in required)
        fields.extend(built)
    return tuple(fields)


def build_property(
    key: str, prop: Mapping, scope: FieldScope, required: bool
) -> Build[tuple]:
    """Build the fields contributed by a single property.

    Unions and arrays contribute one node each, plain objects contribute
    their own (flattened) fields, anything else is a leaf.
    """
    kind = classify(prop)

    if kind is NodeKind.ONE_OF:
        from .one_of import resolve_one_of

        return ((yield resolve_one_of(key, prop, scope, required)),)

    if kind is NodeKind.ARRAY:
        from .arrays import expand_array

        return ((yield expand_array(key, prop, scope, required)),)

    if kind is NodeKind.OBJECT:
        return (yield walk_properties(child_properties(prop), scope, required_names(prop)))

    return (build_leaf(key, prop, scope, required),)


def build_leaf(key: str, prop: Mapping, scope: FieldScope, required: bool) -> LeafField:
    enum = prop.get("enum")
    return LeafField(
        id=scope.id,
        path=scope.path,
        type=declared_type(prop, DEFAULT_LEAF_TYPE),
        title=text_attr(prop, "title") or key,
        description=text_attr(prop, "description"),
        required=required,
        order=declared_order(prop, scope.id),
        group=text_attr(prop, "group"),
        secret=bool(prop.get(KEY_SECRET)),
        default=detach(prop.get("default")),
        examples=detach(prop.get("examples")),
        pattern=text_attr(prop, "pattern"),
        pattern_descriptor=text_attr(prop, "pattern_descriptor"),
        multiline=flag_attr(prop, "multiline"),
        enum=detach(enum) if isinstance(enum, list) else None,
        format=text_attr(prop, "format"),
        minimum=number_attr(prop, "minimum"),
        maximum=number_attr(prop, "maximum"),
        always_show=flag_attr(prop, "always_show"),
    )
