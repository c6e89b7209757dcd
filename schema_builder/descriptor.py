from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any, Union


@dataclass(frozen=True)
class IntegerType:
    pass


@dataclass(frozen=True)
class StringType:
    pass


@dataclass(frozen=True)
class BooleanType:
    pass


@dataclass(frozen=True)
class FloatType:
    pass


@dataclass(frozen=True)
class NullType:
    pass


@dataclass(frozen=True)
class ArrayType:
    items: SchemaType


@dataclass(frozen=True)
class UnionType:
    """Alternatives in output order. Each must resolve to one type string."""

    alternatives: tuple[SchemaType, ...]


@dataclass(frozen=True)
class AdditionalProperties:
    """Additional-properties policy without a payload."""

    name: str

    def __repr__(self) -> str:
        return self.name


ALLOW_IMPLICIT = AdditionalProperties("ALLOW_IMPLICIT")
ALLOW_EXPLICIT = AdditionalProperties("ALLOW_EXPLICIT")
DISALLOW = AdditionalProperties("DISALLOW")


@dataclass(frozen=True)
class ConstrainedBy:
    schema: SchemaType


AdditionalPropertiesPolicy = Union[AdditionalProperties, ConstrainedBy]


class FrozenObject(tuple):
    """A JSON object held as ordered `(key, value)` pairs."""


def _freeze(value: Any) -> Any:
    if isinstance(value, FrozenObject):
        return value
    if isinstance(value, dict):
        return FrozenObject((k, _freeze(v)) for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


@dataclass(frozen=True)
class EnumConstraint:
    """Allowed values, frozen: arrays as tuples, objects as `FrozenObject`."""

    values: tuple[Any, ...]


@dataclass(frozen=True)
class PatternConstraint:
    regex: str


Constraint = Union[EnumConstraint, PatternConstraint]


@dataclass(frozen=True)
class PropertyDescriptor:
    """A named field of an object schema.

    `constraints` is kept most-recently-added first, which is also the order
    the constraint fields are rendered in.
    """

    name: str
    type: SchemaType
    required: bool = True
    description: str | None = None
    constraints: tuple[Constraint, ...] = ()

    def optional(self) -> PropertyDescriptor:
        return optional(self)

    def describe(self, text: str) -> PropertyDescriptor:
        return description(self, text)

    def enum(self, values: Iterable[Any]) -> PropertyDescriptor:
        return enum(self, values)

    def pattern(self, regex: str) -> PropertyDescriptor:
        return pattern(self, regex)


@dataclass(frozen=True)
class ObjectType:
    properties: tuple[PropertyDescriptor, ...] = ()
    additional_properties: AdditionalPropertiesPolicy = field(
        default=ALLOW_IMPLICIT
    )

    def allow_additional_props(self) -> ObjectType:
        return allow_additional_props(self)

    def disallow_additional_props(self) -> ObjectType:
        return disallow_additional_props(self)

    def constrain_additional_props(self, schema: SchemaType) -> ObjectType:
        return constrain_additional_props(self, schema)


SchemaType = Union[
    IntegerType,
    StringType,
    BooleanType,
    FloatType,
    NullType,
    ObjectType,
    ArrayType,
    UnionType,
]


def _collect(items: tuple[Any, ...]) -> tuple[Any, ...]:
    """Accept both `f(a, b)` and `f([a, b])`."""
    if len(items) == 1 and isinstance(items[0], Iterable):
        return tuple(items[0])
    return tuple(items)


def integer() -> IntegerType:
    return IntegerType()


def string() -> StringType:
    return StringType()


def boolean() -> BooleanType:
    return BooleanType()


def float_() -> FloatType:
    return FloatType()


def null() -> NullType:
    return NullType()


def array(item: SchemaType) -> ArrayType:
    return ArrayType(items=item)


def union(*alternatives: SchemaType | Iterable[SchemaType]) -> UnionType:
    """Build a union; alternatives are kept as given, nested unions included.

    Alternatives must not be unions themselves, and there must be at least
    one: an empty union renders `{"type": []}`, which Draft 7 rejects.
    """
    return UnionType(alternatives=_collect(alternatives))


def object_(
    *properties: PropertyDescriptor | Iterable[PropertyDescriptor],
) -> ObjectType:
    return ObjectType(properties=_collect(properties))


def prop(name: str, type: SchemaType) -> PropertyDescriptor:
    return PropertyDescriptor(name=name, type=type)


def optional(p: PropertyDescriptor) -> PropertyDescriptor:
    return replace(p, required=False)


def description(p: PropertyDescriptor, text: str) -> PropertyDescriptor:
    return replace(p, description=text)


def enum(p: PropertyDescriptor, values: Iterable[Any]) -> PropertyDescriptor:
    constraint = EnumConstraint(values=tuple(_freeze(v) for v in values))
    return replace(p, constraints=(constraint,) + p.constraints)


def pattern(p: PropertyDescriptor, regex: str) -> PropertyDescriptor:
    constraint = PatternConstraint(regex=regex)
    return replace(p, constraints=(constraint,) + p.constraints)


def _with_policy(t: ObjectType, policy: AdditionalPropertiesPolicy) -> ObjectType:
    # Non-object types carry no policy; hand them back untouched.
    if not isinstance(t, ObjectType):
        return t
    return replace(t, additional_properties=policy)


def allow_additional_props(t: ObjectType) -> ObjectType:
    return _with_policy(t, ALLOW_EXPLICIT)


def disallow_additional_props(t: ObjectType) -> ObjectType:
    return _with_policy(t, DISALLOW)


def constrain_additional_props(t: ObjectType, schema: SchemaType) -> ObjectType:
    return _with_policy(t, ConstrainedBy(schema=schema))
