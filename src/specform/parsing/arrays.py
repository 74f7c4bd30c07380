"""Expansion of array-typed properties."""

import logging
from collections.abc import Mapping

from ..consts import ARRAY_INDEX_SEGMENT, DEFAULT_ITEM_TYPE
from ..form_schema import ArrayField
from ..schema import (
    child_properties,
    declared_order,
    declared_type,
    detach,
    is_object_shaped,
    item_schema,
    required_names,
    text_attr,
)
from .driver import Build
from .ordering import sort_fields
from .walker import FieldScope, walk_properties

logger = logging.getLogger(__name__)


def expand_array(
    key: str, prop: Mapping, scope: FieldScope, required: bool
) -> Build[ArrayField]:
    """Build an array node; object-shaped items become ordered subfields.

    Item subfields live under the ``0`` placeholder segment, e.g.
    ``buckets.0.name``.
    """
    items = item_schema(prop)
    item_type = DEFAULT_ITEM_TYPE
    subfields = ()

    if items is None:
        logger.warning(f"Array '{scope.id}' has no item schema, assuming {DEFAULT_ITEM_TYPE} items")
    else:
        item_type = declared_type(items, DEFAULT_ITEM_TYPE)
        if is_object_shaped(items):
            item_fields = yield walk_properties(
                child_properties(items),
                scope.child(ARRAY_INDEX_SEGMENT),
                required_names(items),
            )
            subfields = sort_fields(item_fields)

    return ArrayField(
        id=scope.id,
        path=scope.path,
        title=text_attr(prop, "title") or key,
        description=text_attr(prop, "description"),
        required=required,
        order=declared_order(prop, scope.id),
        group=text_attr(prop, "group"),
        item_type=item_type,
        default=detach(prop.get("default")) or (),
        subfields=subfields,
    )
