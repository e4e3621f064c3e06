"""Declarative models for an HTTP service description.

Callers describe their service with these immutable values: schema
definitions for the data that flows through it, operations that reference
those schemas, and tag groups that bundle operations for the document.
Everything is validated on construction so that document assembly never has
to deal with malformed input.
"""

from enum import Enum
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from api_doc_builder.model.types import ObjectRefType, SchemaType


class ContentType(str, Enum):
    JSON = "application/json"
    FORM_DATA = "multipart/form-data"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class Scheme(str, Enum):
    # Declaration order is the order schemes are rendered in.
    HTTP = "http"
    HTTPS = "https"


class Property(BaseModel):
    """One typed field of a schema definition."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    type: SchemaType
    required: bool = True


class SchemaDefinition(BaseModel):
    """A named, reusable data shape.

    ``name`` is the only identity used for references and de-duplication:
    two definitions with the same name collapse into one document entry.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    content_type: ContentType = ContentType.JSON
    properties: list[Property] = []

    @model_validator(mode="after")
    def _unique_property_names(self) -> "SchemaDefinition":
        seen: set[str] = set()
        for prop in self.properties:
            if prop.name in seen:
                raise ValueError(f"duplicate property {prop.name!r} in schema {self.name!r}")
            seen.add(prop.name)
        return self


@runtime_checkable
class SchemaProviding(Protocol):
    """Capability of a data type that announces its own schema.

    Implemented with classmethods on the data type itself, e.g.::

        class Widget:
            @classmethod
            def schema_name(cls): return "Widget"
            @classmethod
            def content_type(cls): return ContentType.JSON
            @classmethod
            def properties(cls): return [Property(name="id", type=StringType())]
    """

    def schema_name(self) -> str: ...

    def content_type(self) -> ContentType: ...

    def properties(self) -> list[Property]: ...


def as_definition(source: Any) -> Any:
    """Turn a schema provider into a SchemaDefinition.

    SchemaDefinitions and None pass through untouched; anything else is left
    for pydantic to validate.
    """
    if source is None or isinstance(source, SchemaDefinition):
        return source
    if isinstance(source, SchemaProviding):
        return SchemaDefinition(
            name=source.schema_name(),
            content_type=source.content_type(),
            properties=list(source.properties()),
        )
    return source


def ref_to(target: Any) -> ObjectRefType:
    """Build an ObjectRefType from a name, a SchemaDefinition or a schema provider."""
    if isinstance(target, str):
        return ObjectRefType(schema_name=target)
    if isinstance(target, SchemaDefinition):
        return ObjectRefType(schema_name=target.name)
    return ObjectRefType(schema_name=target.schema_name())


class Response(BaseModel):
    """One possible response of an operation."""

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(ge=100, le=599)
    description: str = ""
    model: SchemaDefinition | None = None

    @field_validator("model", mode="before")
    @classmethod
    def _coerce_model(cls, value: Any) -> Any:
        return as_definition(value)


class Operation(BaseModel):
    """A single (method, path) endpoint."""

    model_config = ConfigDict(frozen=True)

    method: HttpMethod
    path: str  # /widgets/{id}
    summary: str
    description: str | None = None
    request_model: SchemaDefinition | None = None
    responses: list[Response] = Field(min_length=1)

    @field_validator("method", mode="before")
    @classmethod
    def _upper_method(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, HttpMethod):
            return value.upper()
        return value

    @field_validator("path")
    @classmethod
    def _absolute_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError(f"path must start with '/': {value!r}")
        return value

    @field_validator("request_model", mode="before")
    @classmethod
    def _coerce_request_model(cls, value: Any) -> Any:
        return as_definition(value)

    def schema_models(self) -> list[SchemaDefinition]:
        """Request model first, then response models in declared order."""
        models = [self.request_model] if self.request_model is not None else []
        models.extend(r.model for r in self.responses if r.model is not None)
        return models


class TagGroup(BaseModel):
    """A named group of operations, usually one resource or controller."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    description: str = ""
    operations: list[Operation] = []


class ServiceMetadata(BaseModel):
    """Service-level information rendered into the document header."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str = ""
    version: str = "1.0"
    contact_email: str | None = None
    host: str
    base_path: str = "/"
    schemes: frozenset[Scheme] = frozenset()
