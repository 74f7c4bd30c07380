"""Dynamic settings forms from connector configuration schemas."""

from .errors import ConfigException, SchemaException, SpecformException
from .form_schema import (
    ArrayField,
    ConstOption,
    FieldGroup,
    FieldNode,
    FormSchema,
    LeafField,
    OneOfField,
)
from .parsing import build_form_schema, parse_connector_spec
from .schema import load_spec_file

__all__ = [
    "ArrayField",
    "ConfigException",
    "ConstOption",
    "FieldGroup",
    "FieldNode",
    "FormSchema",
    "LeafField",
    "OneOfField",
    "SchemaException",
    "SpecformException",
    "build_form_schema",
    "load_spec_file",
    "parse_connector_spec",
]
