from typing import Literal, TypedDict, Union

ValueTypeItem = Literal["string", "number", "boolean", "null", "object", "array"]

JSONValue = Union[str, int, float, bool, None, list, dict]


class BaseSchema(TypedDict, total=False):
    description: str
    enum: list[JSONValue]
    pattern: str


class ValueSchema(BaseSchema, total=False):
    type: ValueTypeItem


class UnionSchema(BaseSchema, total=False):
    type: list[ValueTypeItem]


class ArraySchema(BaseSchema, total=False):
    type: Literal["array"]
    items: BaseSchema


class ObjectSchema(BaseSchema, total=False):
    type: Literal["object"]
    properties: dict[str, BaseSchema]
    required: list[str]
    additionalProperties: bool | BaseSchema
