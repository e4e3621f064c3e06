import math
import random

import pytest
from pydantic import TypeAdapter, ValidationError

from api_doc_builder.model.types import (
    ArrayType,
    BinaryType,
    BooleanType,
    NullType,
    NumberType,
    ObjectRefType,
    SchemaType,
    StringType,
    array_of,
)

RNG = random.Random(0)


class TestTypeName:
    @pytest.mark.parametrize(
        "schema_type, expected",
        [
            (NullType(), "null"),
            (BooleanType(), "boolean"),
            (ObjectRefType(schema_name="Widget"), "object"),
            (ArrayType(item_type=StringType()), "array"),
            (NumberType(), "number"),
            (StringType(), "string"),
            (BinaryType(), "string"),
        ],
    )
    def test_type_name(self, schema_type, expected):
        assert schema_type.type_name() == expected


class TestFacets:
    def test_only_binary_has_format(self):
        assert BinaryType().format() == "binary"
        assert StringType().format() is None
        assert ArrayType(item_type=BinaryType()).format() is None

    def test_only_object_ref_has_ref(self):
        assert ObjectRefType(schema_name="Widget").ref() == "#/definitions/Widget"
        assert StringType().ref() is None
        assert ArrayType(item_type=ObjectRefType(schema_name="Widget")).ref() is None

    def test_declared_examples_returned_verbatim(self):
        assert NumberType(example=4.5).example_value(RNG) == 4.5
        assert StringType(example="abc").example_value(RNG) == "abc"
        assert NumberType().example_value(RNG) is None
        assert StringType().example_value(RNG) is None

    def test_boolean_example_is_a_bool(self):
        assert isinstance(BooleanType().example_value(random.Random(1)), bool)

    def test_boolean_example_follows_injected_rng(self):
        a = [BooleanType().example_value(random.Random(7)) for _ in range(3)]
        b = [BooleanType().example_value(random.Random(7)) for _ in range(3)]
        assert a == b

    def test_no_example_for_other_variants(self):
        for schema_type in (NullType(), BinaryType(), ObjectRefType(schema_name="X"), array_of(StringType())):
            assert schema_type.example_value(RNG) is None

    def test_items_type(self):
        inner = ArrayType(item_type=StringType())
        outer = array_of(inner)
        assert outer.items_type() == inner
        assert inner.items_type() == StringType()
        assert StringType().items_type() is None


class TestValidation:
    def test_object_ref_requires_name(self):
        with pytest.raises(ValidationError):
            ObjectRefType(schema_name="")

    def test_types_are_frozen(self):
        t = StringType(example="a")
        with pytest.raises(ValidationError):
            t.example = "b"

    def test_union_parses_nested_arrays_from_dict(self):
        adapter = TypeAdapter(SchemaType)
        parsed = adapter.validate_python(
            {"kind": "array", "item_type": {"kind": "array", "item_type": {"kind": "string"}}}
        )
        assert parsed == array_of(array_of(StringType()))

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_number_example_rejected(self, value):
        with pytest.raises(ValidationError):
            NumberType(example=value)
