"""Schema type model.

A closed set of value-shape descriptors used to describe one property of a
named schema. Each variant knows how to project itself onto the JSON Schema
facets used in the emitted document: type name, format, reference, example
and item type.
"""

import random
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

DEFINITIONS_PREFIX = "#/definitions/"


class _BaseType(BaseModel):
    """Facet defaults shared by every variant."""

    model_config = ConfigDict(frozen=True)

    def type_name(self) -> str:
        raise NotImplementedError

    def format(self) -> str | None:
        return None

    def ref(self) -> str | None:
        return None

    def example_value(self, rng: random.Random) -> Any:
        return None

    def items_type(self) -> "SchemaType | None":
        return None


class NullType(_BaseType):
    kind: Literal["null"] = "null"

    def type_name(self) -> str:
        return "null"


class BooleanType(_BaseType):
    kind: Literal["boolean"] = "boolean"

    def type_name(self) -> str:
        return "boolean"

    def example_value(self, rng: random.Random) -> Any:
        return rng.random() < 0.5


class NumberType(_BaseType):
    kind: Literal["number"] = "number"
    example: float | None = Field(default=None, allow_inf_nan=False)

    def type_name(self) -> str:
        return "number"

    def example_value(self, rng: random.Random) -> Any:
        return self.example


class StringType(_BaseType):
    kind: Literal["string"] = "string"
    example: str | None = None

    def type_name(self) -> str:
        return "string"

    def example_value(self, rng: random.Random) -> Any:
        return self.example


class BinaryType(_BaseType):
    """Raw bytes, e.g. a file upload in a form-data body."""

    kind: Literal["binary"] = "binary"

    def type_name(self) -> str:
        return "string"

    def format(self) -> str | None:
        return "binary"


class ArrayType(_BaseType):
    kind: Literal["array"] = "array"
    item_type: "SchemaType"

    def type_name(self) -> str:
        return "array"

    def items_type(self) -> "SchemaType | None":
        return self.item_type


class ObjectRefType(_BaseType):
    """Reference to another schema definition by name.

    The referenced body is never embedded; it is looked up in the
    document's ``definitions`` map by name.
    """

    kind: Literal["object"] = "object"
    schema_name: str = Field(min_length=1)

    def type_name(self) -> str:
        return "object"

    def ref(self) -> str | None:
        return f"{DEFINITIONS_PREFIX}{self.schema_name}"


SchemaType = Annotated[
    Union[NullType, BooleanType, NumberType, StringType, BinaryType, ArrayType, ObjectRefType],
    Field(discriminator="kind"),
]

ArrayType.model_rebuild()


def array_of(item_type: "SchemaType") -> ArrayType:
    return ArrayType(item_type=item_type)
