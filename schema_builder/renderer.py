import logging

from schema_builder.descriptor import (
    ALLOW_EXPLICIT,
    ALLOW_IMPLICIT,
    DISALLOW,
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
)
from schema_builder.errors import SchemaError
from schema_builder.model import (
    ArraySchema,
    BaseSchema,
    ObjectSchema,
    UnionSchema,
    ValueSchema,
    ValueTypeItem,
)

logger = logging.getLogger("schema_builder.renderer")

DRAFT_07 = "http://json-schema.org/draft-07/schema#"

# Integers and floats both map to the generic JSON number type.
_TYPE_NAMES: dict[type, ValueTypeItem] = {
    StringType: "string",
    IntegerType: "number",
    FloatType: "number",
    BooleanType: "boolean",
    NullType: "null",
    ObjectType: "object",
    ArrayType: "array",
}


def _type_name(schema_type: SchemaType) -> ValueTypeItem:
    """Map a descriptor to its JSON Schema type string."""
    name = _TYPE_NAMES.get(type(schema_type))
    if name is None:
        logger.debug("No single type string for %r", schema_type)
        raise SchemaError(
            f"{type(schema_type).__name__} has no single type string; "
            "union alternatives must not be unions"
        )
    return name


def _thaw(value: object) -> object:
    if isinstance(value, FrozenObject):
        return {k: _thaw(v) for k, v in value}
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value


def _constraint_field(constraint: Constraint) -> tuple[str, object]:
    if isinstance(constraint, EnumConstraint):
        return "enum", _thaw(constraint.values)
    if isinstance(constraint, PatternConstraint):
        return "pattern", constraint.regex
    raise SchemaError(f"Unsupported constraint: {constraint!r}")


class _Renderer:
    def __init__(self, schema_uri: str | None = None) -> None:
        self._schema_uri = schema_uri

    def render(self, schema_type: SchemaType) -> BaseSchema:
        logger.debug("Rendering %s", type(schema_type).__name__)
        schema = self._render_core(schema_type)
        if self._schema_uri is None:
            return schema
        return {"$schema": self._schema_uri, **schema}  # type: ignore

    def _render_additional(
        self, policy: AdditionalPropertiesPolicy
    ) -> bool | BaseSchema | None:
        if policy is ALLOW_IMPLICIT:
            return None
        if policy is ALLOW_EXPLICIT:
            return True
        if policy is DISALLOW:
            return False
        if isinstance(policy, ConstrainedBy):
            return self._render_core(policy.schema)
        raise SchemaError(f"Unsupported additional properties policy: {policy!r}")

    def _render_object(self, object: ObjectType) -> ObjectSchema:
        properties = {p.name: self._render_property(p) for p in object.properties}
        required = [p.name for p in object.properties if p.required]

        schema = ObjectSchema(type="object", properties=properties, required=required)

        additional = self._render_additional(object.additional_properties)
        if additional is not None:
            schema["additionalProperties"] = additional

        return schema

    def _render_property(self, prop: PropertyDescriptor) -> BaseSchema:
        """Render a property: description, constraints, then the type's own fields."""
        schema: dict = {}

        if prop.description is not None:
            schema["description"] = prop.description

        for constraint in prop.constraints:
            key, value = _constraint_field(constraint)
            schema.setdefault(key, value)

        schema.update(self._render_core(prop.type))
        return schema  # type: ignore

    def _render_core(self, schema_type: SchemaType) -> BaseSchema:
        if isinstance(schema_type, UnionType):
            return UnionSchema(
                type=[_type_name(alt) for alt in schema_type.alternatives]
            )

        if isinstance(schema_type, ArrayType):
            return ArraySchema(type="array", items=self._render_core(schema_type.items))

        if isinstance(schema_type, ObjectType):
            return self._render_object(schema_type)

        return ValueSchema(type=_type_name(schema_type))
