import json
from typing import Any

from schema_builder.descriptor import (
    ALLOW_EXPLICIT,
    ALLOW_IMPLICIT,
    DISALLOW,
    AdditionalProperties,
    AdditionalPropertiesPolicy,
    ArrayType,
    BooleanType,
    ConstrainedBy,
    Constraint,
    EnumConstraint,
    FloatType,
    FrozenObject,
    IntegerType,
    NullType,
    ObjectType,
    PatternConstraint,
    PropertyDescriptor,
    SchemaType,
    StringType,
    UnionType,
    allow_additional_props,
    array,
    boolean,
    constrain_additional_props,
    description,
    disallow_additional_props,
    enum,
    float_,
    integer,
    null,
    object_,
    optional,
    pattern,
    prop,
    string,
    union,
)
from schema_builder.errors import SchemaError
from schema_builder.model import BaseSchema
from schema_builder.renderer import DRAFT_07, _Renderer


def render(schema_type: SchemaType, schema_uri: str | None = None) -> BaseSchema:
    """
    Render a descriptor tree to a JSON Schema document.

    Parameters:
    - schema_type (SchemaType): The root descriptor, built with `object_`,
        `array`, `union`, `prop` and the primitive constructors.
    - schema_uri (str | None): If set, the document starts with a `$schema`
        field holding this value (for example `DRAFT_07`). Nested schemas
        never carry it.

    Returns:
    - BaseSchema: Plain dicts, lists and scalars. Field order is stable:
        `type`, `properties`, `required`, `additionalProperties` for objects;
        `description` and constraints ahead of the type fields for properties.

    Raises:
    - SchemaError: If a union appears directly inside another union.
    """

    renderer = _Renderer(schema_uri)
    return renderer.render(schema_type)


def dumps(
    schema_type: SchemaType,
    *,
    schema_uri: str | None = None,
    indent: int | None = None,
    **kwargs: Any,
) -> str:
    """Render a descriptor tree and serialize it as JSON text.

    Extra keyword arguments are passed to `json.dumps`.
    """

    return json.dumps(render(schema_type, schema_uri), indent=indent, **kwargs)


__all__ = [
    "ALLOW_EXPLICIT",
    "ALLOW_IMPLICIT",
    "DISALLOW",
    "DRAFT_07",
    "AdditionalProperties",
    "AdditionalPropertiesPolicy",
    "ArrayType",
    "BooleanType",
    "ConstrainedBy",
    "Constraint",
    "EnumConstraint",
    "FloatType",
    "FrozenObject",
    "IntegerType",
    "NullType",
    "ObjectType",
    "PatternConstraint",
    "PropertyDescriptor",
    "SchemaError",
    "SchemaType",
    "StringType",
    "UnionType",
    "allow_additional_props",
    "array",
    "boolean",
    "constrain_additional_props",
    "description",
    "disallow_additional_props",
    "dumps",
    "enum",
    "float_",
    "integer",
    "null",
    "object_",
    "optional",
    "pattern",
    "prop",
    "render",
    "string",
    "union",
]
