"""Resolution of discriminated-union (``oneOf``) properties."""

import logging
from collections.abc import Mapping

from ..consts import DEFAULT_DISPLAY_TYPE, KEY_ONE_OF
from ..form_schema import ConstOption, OneOfField
from ..schema import (
    child_properties,
    declared_order,
    detach,
    find_discriminant,
    required_names,
    text_attr,
    visible_properties,
)
from .driver import Build
from .ordering import sort_by_parent_value
from .walker import FieldScope, build_property, id_segment

logger = logging.getLogger(__name__)


def resolve_one_of(
    key: str, prop: Mapping, scope: FieldScope, required: bool
) -> Build[OneOfField]:
    """Build a union node with one option per variant and flat subfields.

    Each variant is identified by the first of its properties declaring
    ``const``. The remaining properties of the variant become subfields
    tagged with ``parent_value``; their ids include the discriminant value,
    e.g. ``ssl_mode.verify-ca.password``.

    A variant without a discriminant contributes neither an option nor
    subfields. A variant repeating an earlier discriminant value gets the
    variant index appended after the value in its subfield ids.
    """
    const_key = None
    const_options = []
    subfields = []
    seen_segments = set()

    for index, variant in enumerate(prop[KEY_ONE_OF]):
        discriminant = find_discriminant(variant)
        if discriminant is None:
            logger.warning(
                f"Variant {index} of '{scope.id}' has no discriminant property, "
                "it will not be selectable"
            )
            continue

        variant_key, value = discriminant
        if const_key is None:
            const_key = variant_key
        elif variant_key != const_key:
            logger.warning(
                f"Variant {index} of '{scope.id}' is discriminated by '{variant_key}' "
                f"instead of '{const_key}'"
            )

        value = detach(value)
        segment = id_segment(value)
        if segment in seen_segments:
            logger.warning(
                f"Variant {index} of '{scope.id}' repeats discriminant value {value!r}, "
                "its subfield ids carry the variant index"
            )
            variant_scope = scope.variant(value, index)
        else:
            seen_segments.add(segment)
            variant_scope = scope.variant(value)

        const_options.append(
            ConstOption(
                value=value,
                title=text_attr(variant, "title") or segment,
                description=text_attr(variant, "description"),
            )
        )

        variant_required = required_names(variant)
        for prop_key, prop_def in visible_properties(
            child_properties(variant), variant_scope.id
        ):
            if prop_key == variant_key:
                continue
            built = yield build_property(
                prop_key,
                prop_def,
                variant_scope.child(prop_key),
                prop_key in variant_required,
            )
            subfields.extend(
                field.model_copy(update={"parent_value": value}) for field in built
            )

    return OneOfField(
        id=scope.id,
        path=scope.path,
        title=text_attr(prop, "title") or key,
        description=text_attr(prop, "description"),
        required=required,
        order=declared_order(prop, scope.id),
        group=text_attr(prop, "group"),
        display_type=text_attr(prop, "display_type") or DEFAULT_DISPLAY_TYPE,
        const_key=const_key,
        const_options=tuple(const_options),
        subfields=sort_by_parent_value(subfields),
    )
