"""Utility functions for specform"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional, Sequence

from .consts import PATH_SEPARATOR
from .errors import SchemaException

logger = logging.getLogger(__name__)


def canonicalify(p: Path | str) -> Path:
    return Path(p).expanduser().resolve()


def ensure_path(p: Path | str) -> Path:
    path = canonicalify(p)
    path.mkdir(parents=True, exist_ok=True)
    return path


def control_key(path: Sequence[str]) -> str:
    """Build the form control name for a field path.

    Examples:
        >>> control_key(("credentials", "client_id"))
        'credentials.client_id'
        >>> control_key(("buckets", "0", "name"))
        'buckets.0.name'
    """
    return PATH_SEPARATOR.join(path)


def iter_fields(fields: Iterable) -> Iterator:
    """Yield every field of a tree depth-first, subfields after their parent.

    Uses an explicit stack so arbitrarily deep trees do not hit the
    recursion limit.
    """
    stack = list(reversed(list(fields)))
    while stack:
        field = stack.pop()
        yield field
        stack.extend(reversed(getattr(field, "subfields", ())))


def find_field(groups: Iterable, field_id: str) -> Optional[object]:
    """Find a field by id across all groups, or None when absent."""
    for group in groups:
        for field in iter_fields(group.fields):
            if field.id == field_id:
                return field
    return None


def encode_json(data: Any, indent: Optional[int] = None) -> str:
    """Serialize dumped form data to JSON text.

    The stdlib encoder recurses once per nesting level, so trees deeper than
    the interpreter recursion limit cannot be written as text.

    Raises:
        SchemaException: If the data is nested too deeply to encode.
    """
    try:
        return json.dumps(data, indent=indent, ensure_ascii=False)
    except RecursionError as e:
        raise SchemaException("Form schema is nested too deeply to encode as JSON") from e
