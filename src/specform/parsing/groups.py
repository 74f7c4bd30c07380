"""Partitioning of top-level fields into presentation groups."""

import logging
from collections.abc import Mapping
from typing import Any, Sequence

from ..consts import DEFAULT_GROUP_ID
from ..form_schema import FieldGroup
from ..schema import text_attr
from .ordering import sort_fields

logger = logging.getLogger(__name__)


def assemble_groups(fields: Sequence, declared_groups: Any = None) -> tuple:
    """Partition top-level fields into the declared groups.

    Without declared groups every field goes into a single ``default``
    group. With declared groups, fields whose ``group`` is absent or names
    no declared group are left out of the result.
    """
    if declared_groups is None:
        return (FieldGroup(id=DEFAULT_GROUP_ID, fields=sort_fields(fields)),)

    if not isinstance(declared_groups, list):
        logger.warning(
            f"Ignoring 'groups' of type {type(declared_groups).__name__}, expected a list"
        )
        return (FieldGroup(id=DEFAULT_GROUP_ID, fields=sort_fields(fields)),)

    groups = []
    known_ids = set()
    for index, entry in enumerate(declared_groups):
        group_id = entry.get("id") if isinstance(entry, Mapping) else None
        if not isinstance(group_id, str):
            logger.warning(f"Skipping group {index}: missing string 'id'")
            continue

        known_ids.add(group_id)
        groups.append(
            FieldGroup(
                id=group_id,
                title=text_attr(entry, "title"),
                fields=sort_fields(f for f in fields if f.group == group_id),
            )
        )

    dropped = [f.id for f in fields if f.group not in known_ids]
    if dropped:
        logger.warning(
            f"{len(dropped)} field(s) belong to no declared group and will not be shown: "
            + ", ".join(dropped)
        )

    return tuple(groups)
