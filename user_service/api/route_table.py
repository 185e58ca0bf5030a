"""
Route metadata table.

Describes every served route (path, method, parameters, response schemas and
example values) as plain data. The table is built once at startup and handed
to both the router, which binds each descriptor to an endpoint, and the
documentation renderer, which turns it into an OpenAPI document.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Optional

from user_service.models.user import (
    PLACEHOLDER_EMAIL,
    PLACEHOLDER_FIRST_NAME,
    PLACEHOLDER_LAST_NAME,
)

EXAMPLE_USER_ID = "550e8400-e29b-41d4-a716-446655440000"

USER_NOT_FOUND = "User not found"
UNKNOWN_ERROR = "Unknown error"

JSON_MEDIA_TYPE = "application/json"
TEXT_MEDIA_TYPE = "text/plain"


@dataclass(frozen=True)
class FieldSchema:
    """Type, description and example value of a single JSON field."""

    type: str
    description: str
    example: Any = None
    format: Optional[str] = None

    def to_openapi(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type}
        if self.format is not None:
            schema["format"] = self.format
        schema["description"] = self.description
        if self.example is not None:
            schema["example"] = self.example
        return schema


@dataclass(frozen=True)
class ObjectSchema:
    """
    Named JSON object schema.

    Attributes:
        name: Component name used in ``$ref`` pointers.
        description: Human readable description of the object.
        fields: Read-only mapping of JSON field name to its schema, in
            output order. Excluded from the hash.
    """

    name: str
    description: str
    fields: Mapping[str, FieldSchema] = field(hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @property
    def required(self) -> list[str]:
        return list(self.fields)

    @property
    def ref(self) -> str:
        return f"#/components/schemas/{self.name}"

    def to_openapi(self) -> dict[str, Any]:
        return {
            "type": "object",
            "title": self.name,
            "description": self.description,
            "required": self.required,
            "properties": {
                name: field_schema.to_openapi()
                for name, field_schema in self.fields.items()
            },
        }


@dataclass(frozen=True)
class ParameterDescriptor:
    """A single request parameter."""

    name: str
    type: str
    description: str
    location: str = "path"
    format: Optional[str] = None
    required: bool = True

    def to_openapi(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type}
        if self.format is not None:
            schema["format"] = self.format
        return {
            "name": self.name,
            "in": self.location,
            "description": self.description,
            "required": self.required,
            "schema": schema,
        }


@dataclass(frozen=True)
class ResponseDescriptor:
    """A documented response; ``schema`` is None for plain-text bodies."""

    status_code: int
    description: str
    schema: Optional[ObjectSchema] = None
    media_type: str = JSON_MEDIA_TYPE

    def to_openapi(self) -> dict[str, Any]:
        if self.schema is not None:
            body_schema: dict[str, Any] = {"$ref": self.schema.ref}
        else:
            body_schema = {"type": "string", "example": self.description}
        return {
            "description": self.description,
            "content": {self.media_type: {"schema": body_schema}},
        }


@dataclass(frozen=True)
class RouteDescriptor:
    """
    Metadata for one served route.

    Attributes:
        operation_id: Key binding the descriptor to its endpoint callable.
        method: HTTP method (upper case).
        path: Path the router serves, in FastAPI template syntax.
        summary: One line description of the operation.
        parameters: Documented request parameters.
        responses: Documented responses.
        tags: Grouping tags for the API reference.
        documented_path: Path advertised in the API description, when it
            differs from the served path.
    """

    operation_id: str
    method: str
    path: str
    summary: str
    parameters: tuple[ParameterDescriptor, ...] = ()
    responses: tuple[ResponseDescriptor, ...] = ()
    tags: tuple[str, ...] = ()
    documented_path: Optional[str] = None

    @property
    def doc_path(self) -> str:
        return self.documented_path or self.path


@dataclass(frozen=True)
class RouteTable:
    """Ordered, immutable collection of route descriptors."""

    routes: tuple[RouteDescriptor, ...] = field(default_factory=tuple)

    def __iter__(self):
        return iter(self.routes)

    def __len__(self) -> int:
        return len(self.routes)

    def get(self, operation_id: str) -> RouteDescriptor:
        """
        Look up a descriptor by operation id.

        Raises:
            KeyError: If no route has that operation id.
        """
        for route in self.routes:
            if route.operation_id == operation_id:
                return route
        raise KeyError(operation_id)

    def schemas(self) -> dict[str, ObjectSchema]:
        """Distinct named schemas referenced by any response, by name."""
        found: dict[str, ObjectSchema] = {}
        for route in self.routes:
            for response in route.responses:
                if response.schema is not None:
                    found.setdefault(response.schema.name, response.schema)
        return found


USER_SCHEMA = ObjectSchema(
    name="User",
    description="Represents a user account within the business.",
    fields={
        "uuid": FieldSchema(
            type="string",
            format="uuid",
            description="Unique identifier for the user.",
            example=EXAMPLE_USER_ID,
        ),
        "firstName": FieldSchema(
            type="string",
            description="First name of the user.",
            example=PLACEHOLDER_FIRST_NAME,
        ),
        "lastName": FieldSchema(
            type="string",
            description="Last name of the user.",
            example=PLACEHOLDER_LAST_NAME,
        ),
        "email": FieldSchema(
            type="string",
            description="Email address of the user.",
            example=PLACEHOLDER_EMAIL,
        ),
        "enabled": FieldSchema(
            type="boolean",
            description="Whether the user's account is enabled.",
            example=True,
        ),
        "activated": FieldSchema(
            type="boolean",
            description="Whether the user's account is activated.",
            example=True,
        ),
    },
)

GET_USER_BY_ID = RouteDescriptor(
    operation_id="get_user_by_id",
    method="GET",
    path="/users/{user_id}",
    documented_path="/business/{businessId}/users/{userId}",
    summary="Get user account by user id",
    parameters=(
        ParameterDescriptor(
            name="businessId",
            type="string",
            format="uuid",
            description="Business id of the user",
        ),
        ParameterDescriptor(
            name="userId",
            type="string",
            description="User id to get user",
        ),
    ),
    responses=(
        ResponseDescriptor(status_code=200, description="User", schema=USER_SCHEMA),
        ResponseDescriptor(
            status_code=404, description=USER_NOT_FOUND, media_type=TEXT_MEDIA_TYPE
        ),
        ResponseDescriptor(
            status_code=500, description=UNKNOWN_ERROR, media_type=TEXT_MEDIA_TYPE
        ),
    ),
    tags=("Users",),
)


def build_route_table() -> RouteTable:
    """Build the route table for the service."""
    return RouteTable(routes=(GET_USER_BY_ID,))
