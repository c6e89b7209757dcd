import dataclasses

import pytest

from schema_builder import (
    ALLOW_EXPLICIT,
    ALLOW_IMPLICIT,
    DISALLOW,
    ConstrainedBy,
    EnumConstraint,
    FrozenObject,
    ObjectType,
    PatternConstraint,
    PropertyDescriptor,
    StringType,
    UnionType,
    array,
    constrain_additional_props,
    description,
    disallow_additional_props,
    enum,
    integer,
    null,
    object_,
    optional,
    pattern,
    prop,
    string,
    union,
)


def test_prop_defaults():
    p = prop("name", string())

    assert p == PropertyDescriptor(name="name", type=StringType())
    assert p.required is True
    assert p.description is None
    assert p.constraints == ()


def test_optional_is_idempotent():
    p = optional(prop("name", string()))

    assert p.required is False
    assert optional(p) == p


def test_builders_return_new_values():
    p = prop("name", string())
    described = description(p, "Name")

    assert p.description is None
    assert described.description == "Name"
    assert described is not p

    obj = object_(p)
    closed = disallow_additional_props(obj)
    assert obj.additional_properties is ALLOW_IMPLICIT
    assert closed.additional_properties is DISALLOW


def test_descriptors_are_frozen():
    p = prop("name", string())

    with pytest.raises(dataclasses.FrozenInstanceError):
        p.required = False  # type: ignore

    with pytest.raises(dataclasses.FrozenInstanceError):
        object_().additional_properties = ALLOW_EXPLICIT  # type: ignore


def test_constraints_are_prepended():
    p = enum(pattern(prop("x", string()), "^x"), ["x1"])

    assert p.constraints == (EnumConstraint(values=("x1",)), PatternConstraint(regex="^x"))


def test_enum_copies_values():
    values = ["a", None, 1]
    p = enum(prop("x", string()), values)
    values.append("b")

    assert p.constraints[0].values == ("a", None, 1)


def test_enum_freezes_nested_values():
    inner = ["a"]
    point = {"x": 1}
    p = enum(prop("x", string()), [inner, point])
    inner.append("late")
    point["y"] = 2

    assert p.constraints[0].values == (("a",), FrozenObject([("x", 1)]))
    assert hash(p) == hash(enum(prop("x", string()), [["a"], {"x": 1}]))


def test_union_keeps_alternatives_as_given():
    inner = union(integer(), null())
    u = union(string(), string(), inner)

    assert isinstance(u, UnionType)
    assert u.alternatives == (string(), string(), inner)
    assert union([string(), null()]).alternatives == (string(), null())


def test_object_accepts_sequence_or_varargs():
    a = prop("a", string())
    b = prop("b", integer())

    assert object_(a, b) == object_([a, b])
    assert object_(a, a).properties == (a, a)
    assert isinstance(object_(), ObjectType)


def test_constrain_additional_props_stores_schema():
    obj = constrain_additional_props(object_(), array(string()))

    assert obj.additional_properties == ConstrainedBy(schema=array(string()))


def test_fluent_methods_match_functions():
    p = prop("x", string())

    assert p.optional() == optional(p)
    assert p.describe("d") == description(p, "d")
    assert p.enum(["a"]) == enum(p, ["a"])
    assert p.pattern("^a") == pattern(p, "^a")

    obj = object_(p)
    assert obj.disallow_additional_props() == disallow_additional_props(obj)
    assert obj.constrain_additional_props(integer()) == constrain_additional_props(
        obj, integer()
    )
