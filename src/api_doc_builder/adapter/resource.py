"""Turn CRUD-style resources into operations.

A resource is any object that may define up to six handler attributes:
``index``, ``store``, ``show``, ``update``, ``replace`` and ``destroy``.
Each handler that is present (not None) produces one operation following
the usual REST conventions::

    index    GET    {path}
    store    POST   {path}
    show     GET    {path}/{id}
    update   PATCH  {path}/{id}
    replace  PUT    {path}/{id}
    destroy  DELETE {path}/{id}
"""

from typing import Any

from api_doc_builder.model import factories
from api_doc_builder.model.base import Operation, TagGroup, as_definition

HANDLERS = ("index", "store", "show", "update", "replace", "destroy")


def _has(resource: Any, handler: str) -> bool:
    return getattr(resource, handler, None) is not None


def make_operations(
    resource: Any,
    path: str,
    model: Any,
    store_model: Any = None,
    update_model: Any = None,
) -> list[Operation]:
    """Operations for every handler the resource defines, in handler order.

    ``store_model`` is the request body for store and replace, ``update_model``
    for update; both fall back to ``model``.
    """
    model = as_definition(model)
    name = model.name
    item_path = path.rstrip("/") + "/{id}"
    operations: list[Operation] = []

    if _has(resource, "index"):
        operations.append(factories.get(
            path, summary=f"Fetch all {name}s",
            responses=[factories.ok(description=f"Array of {name}s", model=model)],
        ))
    if _has(resource, "store"):
        operations.append(factories.post(
            path, summary=f"Create a {name}",
            request_model=model if store_model is None else store_model,
            responses=[factories.created(model=model)],
        ))
    if _has(resource, "show"):
        operations.append(factories.get(
            item_path, summary=f"Fetch a {name} by id",
            responses=[factories.ok(model=model), factories.not_found()],
        ))
    if _has(resource, "update"):
        operations.append(factories.patch(
            item_path, summary=f"Update a {name}",
            request_model=model if update_model is None else update_model,
            responses=[factories.ok(model=model), factories.not_found()],
        ))
    if _has(resource, "replace"):
        operations.append(factories.put(
            item_path, summary=f"Replace a {name}",
            request_model=model if store_model is None else store_model,
            responses=[factories.ok(model=model), factories.not_found()],
        ))
    if _has(resource, "destroy"):
        operations.append(factories.delete(
            item_path, summary=f"Delete a {name}",
            responses=[factories.ok(), factories.not_found()],
        ))

    return operations


def resource_tag(
    name: str,
    resource: Any,
    path: str,
    model: Any,
    description: str = "",
    store_model: Any = None,
    update_model: Any = None,
) -> TagGroup:
    """Wrap a resource's operations in a tag group."""
    return TagGroup(
        name=name,
        description=description,
        operations=make_operations(resource, path, model, store_model, update_model),
    )
