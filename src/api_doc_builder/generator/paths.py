"""Build the ``paths`` section of the document from tag groups."""

from typing import Any

from api_doc_builder.errors import Collision
from api_doc_builder.generator.schema import render_content
from api_doc_builder.model.base import HttpMethod, Operation, Response, TagGroup


def operation_id(path: str, method: HttpMethod) -> str:
    """Deterministic id, unique per (path, method) pair."""
    return f"{path}+{method.value.lower()}"


def build_responses(
    responses: list[Response],
    collisions: list[Collision] | None = None,
    owner: str = "",
) -> dict[str, Any]:
    """Map stringified status codes to response objects.

    A model's content block is merged into the same object as the
    description. Later responses with the same status overwrite earlier ones.
    """
    result: dict[str, Any] = {}
    for response in responses:
        key = str(response.status_code)
        if key in result and collisions is not None:
            collisions.append(
                Collision(kind="response", key=f"{owner} {key}".strip(), detail="status code declared twice")
            )
        entry: dict[str, Any] = {"description": response.description}
        if response.model is not None:
            entry.update(render_content(response.model))
        result[key] = entry
    return result


def build_operation(operation: Operation, tag: str, collisions: list[Collision] | None = None) -> dict[str, Any]:
    method = operation.method.value.lower()
    result: dict[str, Any] = {
        "summary": operation.summary,
        "description": operation.description or "",
        "operationId": operation_id(operation.path, operation.method),
        "tags": [tag],
    }
    if operation.request_model is not None:
        result["requestBody"] = render_content(operation.request_model)
    result["responses"] = build_responses(
        operation.responses, collisions, owner=f"{operation.method.value} {operation.path}"
    )
    return result


def build_paths(tags: list[TagGroup], collisions: list[Collision] | None = None) -> dict[str, Any]:
    """Map each path to its method entries, merging operations that share a path.

    Iterates tag groups, then their operations, in declared order. When two
    operations share (path, method) the later one replaces the earlier one.
    """
    paths: dict[str, dict[str, Any]] = {}
    owners: dict[tuple[str, str], str] = {}
    for tag in tags:
        for operation in tag.operations:
            entry = paths.setdefault(operation.path, {})
            method = operation.method.value.lower()
            previous = owners.get((operation.path, method))
            if previous is not None and collisions is not None:
                collisions.append(
                    Collision(
                        kind="operation",
                        key=f"{operation.method.value} {operation.path}",
                        detail=f"tag {tag.name!r} overrides tag {previous!r}",
                    )
                )
            entry[method] = build_operation(operation, tag.name, collisions)
            owners[(operation.path, method)] = tag.name
    return paths
