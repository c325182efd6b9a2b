"""Data models for the parsed OpenAPI document.

Only the subset needed to render request templates is modelled:
paths, operations, parameters, JSON request bodies, security
requirements and components.securitySchemes.
"""

from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

JSON_MEDIA_TYPE = "application/json"


class PrimitiveType(str, Enum):
    """JSON-Schema primitive type."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @classmethod
    def from_key(cls, key: str) -> "HttpMethod | None":
        """Map a lowercase path-item key ("get") to a method, or None."""
        if key != key.lower():
            return None
        try:
            return cls(key.upper())
        except ValueError:
            return None


class SchemaObject(BaseModel):
    """A schema with a declared type and optional object properties."""

    type: PrimitiveType
    properties: dict[str, Any] | None = None  # resolved one by one, never as a whole
    required: list[str] | None = None


class AllOfSchema(BaseModel):
    all_of: list[SchemaObject] = Field(alias="allOf")


class AnyOfSchema(BaseModel):
    any_of: list[SchemaObject] = Field(alias="anyOf")


class OneOfSchema(BaseModel):
    one_of: list[SchemaObject] = Field(alias="oneOf")


class NotSchema(BaseModel):
    not_: list[SchemaObject] = Field(alias="not")

    @field_validator("not_", mode="before")
    @classmethod
    def _wrap_single(cls, value: Any) -> Any:
        # "not" is a single schema in JSON Schema, older documents use a list
        if isinstance(value, dict):
            return [value]
        return value


SchemaNode = Union[SchemaObject, AllOfSchema, AnyOfSchema, OneOfSchema, NotSchema]


class Parameter(BaseModel):
    """A declared operation parameter. Only query and path are rendered."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    location: str = Field(alias="in")  # query / path / header / cookie
    required: bool | None = None
    default: Any = None
    schema_: dict | None = Field(default=None, alias="schema")


class MediaType(BaseModel):
    schema_: dict | None = Field(default=None, alias="schema")  # kept raw, resolved leniently


class RequestBody(BaseModel):
    """A request body. Only the application/json media type is rendered."""

    description: str | None = None
    content: dict[str, Any] = {}
    required: bool | None = None
    json_content: MediaType | None = None

    @model_validator(mode="before")
    @classmethod
    def _pick_json(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("content"), dict):
            media = data["content"].get(JSON_MEDIA_TYPE)
            if media is not None:
                data = {**data, "json_content": media}
        return data


class Operation(BaseModel):
    """A single API operation on a path."""

    model_config = ConfigDict(populate_by_name=True)

    parameters: list[Parameter] = []
    request_body: RequestBody | None = Field(default=None, alias="requestBody")
    security: list[dict[str, list[str]]] | None = None  # None: inherit document security


class PathItem(BaseModel):
    """Operations of one endpoint, in the order they were declared."""

    parameters: list[Parameter] = []
    operations: dict[HttpMethod, Operation] = {}


class Components(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    security_schemes: dict[str, dict] = Field(default={}, alias="securitySchemes")


class OpenApiDocument(BaseModel):
    paths: dict[str, PathItem]
    components: Components = Components()
    security: list[dict[str, list[str]]] = []

    @field_validator("paths", mode="before")
    @classmethod
    def _split_path_items(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        items = {}
        for path, raw_item in value.items():
            if not isinstance(raw_item, dict):
                items[path] = raw_item
                continue
            operations = {}
            for key, raw_op in raw_item.items():
                method = HttpMethod.from_key(key)
                if method is not None:
                    operations[method] = raw_op
            items[path] = {
                "parameters": raw_item.get("parameters", []),
                "operations": operations,
            }
        return items
