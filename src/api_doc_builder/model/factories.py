"""Shorthand constructors for responses and operations."""

from http import HTTPStatus
from typing import Any

from api_doc_builder.model.base import HttpMethod, Operation, Response


def _response(status: HTTPStatus, description: str | None, model: Any) -> Response:
    return Response(
        status_code=int(status),
        description=status.phrase if description is None else description,
        model=model,
    )


def ok(description: str | None = None, model: Any = None) -> Response:
    return _response(HTTPStatus.OK, description, model)


def created(description: str | None = None, model: Any = None) -> Response:
    return _response(HTTPStatus.CREATED, description, model)


def bad_request(description: str | None = None, model: Any = None) -> Response:
    return _response(HTTPStatus.BAD_REQUEST, description, model)


def unauthorized(description: str | None = None, model: Any = None) -> Response:
    return _response(HTTPStatus.UNAUTHORIZED, description, model)


def not_found(description: str | None = None, model: Any = None) -> Response:
    return _response(HTTPStatus.NOT_FOUND, description, model)


def forbidden(description: str | None = None, model: Any = None) -> Response:
    return _response(HTTPStatus.FORBIDDEN, description, model)


def _operation(
    method: HttpMethod,
    path: str,
    summary: str,
    description: str | None,
    request_model: Any,
    responses: list[Response] | None,
) -> Operation:
    return Operation(
        method=method,
        path=path,
        summary=summary,
        description=description,
        request_model=request_model,
        responses=[ok()] if responses is None else responses,
    )


def get(
    path: str,
    summary: str,
    description: str | None = None,
    responses: list[Response] | None = None,
) -> Operation:
    return _operation(HttpMethod.GET, path, summary, description, None, responses)


def post(
    path: str,
    summary: str,
    description: str | None = None,
    request_model: Any = None,
    responses: list[Response] | None = None,
) -> Operation:
    return _operation(HttpMethod.POST, path, summary, description, request_model, responses)


def put(
    path: str,
    summary: str,
    description: str | None = None,
    request_model: Any = None,
    responses: list[Response] | None = None,
) -> Operation:
    return _operation(HttpMethod.PUT, path, summary, description, request_model, responses)


def patch(
    path: str,
    summary: str,
    description: str | None = None,
    request_model: Any = None,
    responses: list[Response] | None = None,
) -> Operation:
    return _operation(HttpMethod.PATCH, path, summary, description, request_model, responses)


def delete(
    path: str,
    summary: str,
    description: str | None = None,
    responses: list[Response] | None = None,
) -> Operation:
    return _operation(HttpMethod.DELETE, path, summary, description, None, responses)
