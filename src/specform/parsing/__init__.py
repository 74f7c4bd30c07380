"""Conversion of connector configuration schemas into form field trees."""

import logging
from typing import Any

from ..consts import KEY_GROUPS, KEY_PROPERTIES
from ..form_schema import FormSchema
from ..schema import required_names, validate_root
from .driver import run
from .groups import assemble_groups
from .walker import FieldScope, walk_properties

logger = logging.getLogger(__name__)


def parse_connector_spec(schema: Any) -> tuple:
    """Parse a connector configuration schema into ordered field groups.

    Args:
        schema: The configuration schema document (``properties``,
            ``required`` and optional ``groups``)

    Returns:
        Tuple of FieldGroup, one per declared group or a single
        ``default`` group when the schema declares none

    Raises:
        SchemaException: If the root document is not an object with a
            ``properties`` object
    """
    root = validate_root(schema)
    fields = run(walk_properties(root[KEY_PROPERTIES], FieldScope(), required_names(root)))
    logger.debug(f"Parsed {len(fields)} top-level field(s)")
    return assemble_groups(fields, root.get(KEY_GROUPS))


def build_form_schema(schema: Any) -> FormSchema:
    return FormSchema(groups=parse_connector_spec(schema))


__all__ = ["build_form_schema", "parse_connector_spec"]
