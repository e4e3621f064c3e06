"""Render schema types, properties and definitions into JSON Schema objects."""

import random
from typing import Any

from api_doc_builder.model.base import Property, SchemaDefinition
from api_doc_builder.model.types import DEFINITIONS_PREFIX, SchemaType


def render_type(schema_type: SchemaType, rng: random.Random) -> dict[str, Any]:
    """Render one schema type.

    Array items are rendered recursively, so ``Array(Array(String))`` gives
    ``{"type": "array", "items": {"type": "array", "items": {"type": "string"}}}``
    and formats, refs and examples of the innermost type are kept.
    """
    result: dict[str, Any] = {"type": schema_type.type_name()}

    fmt = schema_type.format()
    if fmt is not None:
        result["format"] = fmt

    ref = schema_type.ref()
    if ref is not None:
        result["$ref"] = ref

    example = schema_type.example_value(rng)
    if example is not None:
        result["example"] = example

    items = schema_type.items_type()
    if items is not None:
        result["items"] = render_type(items, rng)

    return result


def render_property(prop: Property, rng: random.Random) -> dict[str, Any]:
    return render_type(prop.type, rng)


def render_definition(definition: SchemaDefinition, rng: random.Random) -> dict[str, Any]:
    return {
        "type": "object",
        "required": [p.name for p in definition.properties if p.required],
        "properties": {p.name: render_property(p, rng) for p in definition.properties},
    }


def render_content(definition: SchemaDefinition) -> dict[str, Any]:
    """Content block used for both request bodies and responses."""
    return {
        "content": {
            definition.content_type.value: {
                "schema": {"$ref": f"{DEFINITIONS_PREFIX}{definition.name}"},
            }
        }
    }
