"""Accessors over raw connector schema documents.

Connector schemas arrive as plain JSON objects and are frequently partial or
slightly malformed. Everything that reads the raw document goes through the
helpers in this module, so the parsing code works with well-typed values and
a single :class:`~specform.enums.NodeKind` decided once per node.
"""

import copy
import json
import logging
import math
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Iterator, Optional, Tuple

from .consts import (
    KEY_CONNECTION_SPECIFICATION,
    KEY_CONST,
    KEY_HIDDEN,
    KEY_ITEMS,
    KEY_ONE_OF,
    KEY_PROPERTIES,
    KEY_REQUIRED,
    TYPE_ARRAY,
    TYPE_OBJECT,
)
from .enums import NodeKind
from .errors import SchemaException

logger = logging.getLogger(__name__)


def validate_root(schema: Any) -> Mapping:
    """Check the root document before any traversal starts.

    Raises:
        SchemaException: If the root is not an object or has no
            ``properties`` object.
    """
    if not isinstance(schema, Mapping):
        raise SchemaException(
            f"Connector schema must be a JSON object, got {type(schema).__name__}"
        )
    if KEY_PROPERTIES not in schema:
        raise SchemaException("Connector schema has no 'properties' section")
    if not isinstance(schema[KEY_PROPERTIES], Mapping):
        raise SchemaException(
            "Connector schema 'properties' must be a JSON object, "
            f"got {type(schema[KEY_PROPERTIES]).__name__}"
        )
    return schema


def unwrap_connection_specification(document: Any) -> Any:
    """Return the configuration schema of a full connector specification.

    Connector specifications carry the schema under ``connectionSpecification``;
    a bare schema is returned unchanged.
    """
    if (
        isinstance(document, Mapping)
        and KEY_PROPERTIES not in document
        and isinstance(document.get(KEY_CONNECTION_SPECIFICATION), Mapping)
    ):
        return document[KEY_CONNECTION_SPECIFICATION]
    return document


def load_spec_file(path: Path | str) -> Any:
    """Read a connector schema (or full specification) from a JSON file."""
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaException(f"Cannot read schema file {path}: {e}") from e

    try:
        document = json.loads(content)
    except json.JSONDecodeError as e:
        raise SchemaException(f"Schema file {path} is not valid JSON: {e}") from e

    return unwrap_connection_specification(document)


def classify(prop: Mapping) -> NodeKind:
    if isinstance(prop.get(KEY_ONE_OF), list):
        return NodeKind.ONE_OF
    if prop.get("type") == TYPE_ARRAY:
        return NodeKind.ARRAY
    if is_object_shaped(prop):
        return NodeKind.OBJECT
    return NodeKind.LEAF


def is_object_shaped(node: Any) -> bool:
    return (
        isinstance(node, Mapping)
        and node.get("type") == TYPE_OBJECT
        and isinstance(node.get(KEY_PROPERTIES), Mapping)
    )


def child_properties(node: Mapping) -> Mapping:
    properties = node.get(KEY_PROPERTIES)
    return properties if isinstance(properties, Mapping) else {}


def required_names(node: Mapping) -> frozenset:
    required = node.get(KEY_REQUIRED)
    if not isinstance(required, list):
        return frozenset()
    return frozenset(name for name in required if isinstance(name, str))


def is_hidden(prop: Mapping) -> bool:
    return bool(prop.get(KEY_HIDDEN))


def visible_properties(properties: Mapping, where: str) -> Iterator[Tuple[str, Mapping]]:
    """Yield ``(key, node)`` pairs in declared order, skipping hidden nodes.

    Entries whose value is not an object cannot be classified and are
    skipped with a warning.
    """
    for key, prop in properties.items():
        if not isinstance(prop, Mapping):
            logger.warning(
                f"Skipping property '{key}' under '{where or '<root>'}': "
                f"expected an object, got {type(prop).__name__}"
            )
            continue
        if is_hidden(prop):
            logger.debug(f"Skipping hidden property '{key}' under '{where or '<root>'}'")
            continue
        yield key, prop


def find_discriminant(variant: Any) -> Optional[Tuple[str, Any]]:
    """Return ``(key, value)`` of the first property fixing a constant value."""
    if not isinstance(variant, Mapping):
        return None
    for key, prop in child_properties(variant).items():
        if isinstance(prop, Mapping) and KEY_CONST in prop:
            return key, prop[KEY_CONST]
    return None


def declared_type(node: Mapping, default: str) -> str:
    """Primitive type of a node; for type lists the first non-null entry."""
    value = node.get("type")
    if isinstance(value, list):
        value = next((t for t in value if isinstance(t, str) and t != "null"), None)
    return value if isinstance(value, str) and value else default


def declared_order(node: Mapping, where: str) -> Optional[int | float]:
    """Explicit ``order`` of a node; absent and invalid values yield None."""
    if "order" not in node or node["order"] is None:
        return None
    value = node["order"]
    if not is_number(value) or (isinstance(value, float) and math.isnan(value)):
        logger.warning(f"Ignoring non-numeric order {value!r} on '{where}'")
        return None
    return value


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def number_attr(node: Mapping, name: str) -> Optional[int | float]:
    value = node.get(name)
    return value if is_number(value) else None


def text_attr(node: Mapping, name: str) -> Optional[str]:
    value = node.get(name)
    return value if isinstance(value, str) else None


def flag_attr(node: Mapping, name: str) -> Optional[bool]:
    value = node.get(name)
    return value if isinstance(value, bool) else None


def item_schema(node: Mapping) -> Optional[Mapping]:
    items = node.get(KEY_ITEMS)
    return items if isinstance(items, Mapping) else None


def detach(value: Any) -> Any:
    """Deep copy a value taken from the source document, lists become tuples."""
    if isinstance(value, (list, tuple)):
        return tuple(detach(item) for item in value)
    if isinstance(value, Mapping):
        return {key: detach(item) for key, item in value.items()}
    return copy.deepcopy(value)
