"""Collect and render the ``definitions`` section of the document.

Only the models attached directly to operations are collected: request
models and response models. Object references nested inside a collected
definition are not followed, so a type that only ever appears as a nested
field will be referenced but not defined. ``find_dangling_refs`` reports
those references.
"""

import random
from typing import Any, Iterator

from api_doc_builder.errors import Collision
from api_doc_builder.generator.schema import render_definition
from api_doc_builder.model.base import SchemaDefinition, TagGroup
from api_doc_builder.model.types import DEFINITIONS_PREFIX


def collect_definitions(
    tags: list[TagGroup],
    collisions: list[Collision] | None = None,
) -> dict[str, SchemaDefinition]:
    """De-duplicate operation models by name; the last one wins."""
    found: dict[str, SchemaDefinition] = {}
    for tag in tags:
        for operation in tag.operations:
            for model in operation.schema_models():
                previous = found.get(model.name)
                if previous is not None and previous != model and collisions is not None:
                    collisions.append(
                        Collision(
                            kind="definition",
                            key=model.name,
                            detail=f"redefined by {operation.method.value} {operation.path}",
                        )
                    )
                found[model.name] = model
    return found


def build_definitions(
    tags: list[TagGroup],
    rng: random.Random,
    collisions: list[Collision] | None = None,
) -> dict[str, Any]:
    return {
        name: render_definition(definition, rng)
        for name, definition in collect_definitions(tags, collisions).items()
    }


def _iter_refs(node: Any) -> Iterator[str]:
    if isinstance(node, dict):
        for key, value in node.items():
            if key == "$ref" and isinstance(value, str):
                yield value
            else:
                yield from _iter_refs(value)
    elif isinstance(node, list):
        for item in node:
            yield from _iter_refs(item)


def find_dangling_refs(document: dict[str, Any]) -> list[str]:
    """Return referenced definition names missing from ``definitions``, sorted."""
    defined = document.get("definitions", {})
    missing = set()
    for ref in _iter_refs(document):
        if ref.startswith(DEFINITIONS_PREFIX):
            name = ref[len(DEFINITIONS_PREFIX):]
            if name not in defined:
                missing.add(name)
    return sorted(missing)
