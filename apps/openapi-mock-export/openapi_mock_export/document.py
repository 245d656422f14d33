"""Loading and navigating the subset of an OpenAPI document used by the exporter."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import DocumentError, FilesystemError

HTTP_METHODS: tuple[str, ...] = ("get", "put", "post", "delete", "options", "head", "patch", "trace")

SCHEMA_REF_PREFIX = "#/components/schemas/"
RESPONSE_REF_PREFIX = "#/components/responses/"
EXAMPLE_REF_PREFIX = "#/components/examples/"
EXTENSION_PREFIX = "x-"


@dataclass(frozen=True)
class TextExample:
    """Example given as a literal string, written to the fixture verbatim."""

    value: str

    def render(self) -> str:
        return self.value


@dataclass(frozen=True)
class StructuredExample:
    """Example given as a JSON-like value, written as indented JSON."""

    value: Any

    def render(self) -> str:
        try:
            return json.dumps(self.value, indent=2, ensure_ascii=False)
        except (TypeError, ValueError):
            return ""


ExampleValue = Union[TextExample, StructuredExample]


def example_value(raw: Any) -> ExampleValue | None:
    """Resolve a literal example once into its tagged variant."""

    if raw is None:
        return None
    if isinstance(raw, str):
        return TextExample(raw)
    return StructuredExample(raw)


def _string_keys(value: Any, *, skip_extensions: bool = False) -> Any:
    # YAML reads `200:` as an int key.
    if not value:
        return {}
    if not isinstance(value, dict):
        return value
    return {
        str(key): item
        for key, item in value.items()
        if not (skip_extensions and str(key).startswith(EXTENSION_PREFIX))
    }


class DocumentNode(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Schema(DocumentNode):
    """Schema object; only the keywords used for example synthesis are kept."""

    ref: str | None = Field(default=None, alias="$ref")
    type: str | list[str] | None = None
    properties: dict[str, Schema] = Field(default_factory=dict)
    example: Any = None

    @field_validator("properties", mode="before")
    @classmethod
    def default_properties(cls, value: Any) -> Any:
        return value or {}

    def is_type(self, name: str) -> bool:
        """True when the schema declares exactly this one type."""

        if isinstance(self.type, list):
            return self.type == [name]
        return self.type == name


class Example(DocumentNode):
    ref: str | None = Field(default=None, alias="$ref")
    summary: str | None = None
    value: Any = None


class MediaType(DocumentNode):
    schema_: Schema | None = Field(default=None, alias="schema")
    examples: dict[str, Example | None] = Field(default_factory=dict)

    @field_validator("examples", mode="before")
    @classmethod
    def string_example_names(cls, value: Any) -> Any:
        return _string_keys(value)


class Response(DocumentNode):
    ref: str | None = Field(default=None, alias="$ref")
    description: str | None = None
    content: dict[str, MediaType | None] | None = None


class Operation(DocumentNode):
    operation_id: str | None = Field(default=None, alias="operationId")
    summary: str | None = None
    responses: dict[str, Response] = Field(default_factory=dict)

    @field_validator("responses", mode="before")
    @classmethod
    def string_status_codes(cls, value: Any) -> Any:
        return _string_keys(value, skip_extensions=True)


class PathItem(DocumentNode):
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None

    def operations(self) -> Iterator[tuple[str, Operation]]:
        """Yield (METHOD, operation) pairs for the declared methods."""

        for method in HTTP_METHODS:
            operation = getattr(self, method)
            if operation is not None:
                yield method.upper(), operation


class Info(DocumentNode):
    title: str = ""
    description: str | None = None
    version: str | None = None

    @field_validator("title", mode="before")
    @classmethod
    def default_title(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("version", mode="before")
    @classmethod
    def string_version(cls, value: Any) -> Any:
        return None if value is None else str(value)


class Components(DocumentNode):
    schemas: dict[str, Schema] = Field(default_factory=dict)
    responses: dict[str, Response] = Field(default_factory=dict)
    examples: dict[str, Example] = Field(default_factory=dict)

    @field_validator("schemas", "responses", "examples", mode="before")
    @classmethod
    def default_mapping(cls, value: Any) -> Any:
        return value or {}


class ApiDocument(DocumentNode):
    """Validated, navigable view over a parsed OpenAPI document."""

    openapi: str | None = None
    info: Info = Field(default_factory=Info)
    paths: dict[str, PathItem | None] = Field(default_factory=dict)
    components: Components = Field(default_factory=Components)

    @field_validator("info", "components", mode="before")
    @classmethod
    def default_section(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("paths", mode="before")
    @classmethod
    def path_templates(cls, value: Any) -> Any:
        return _string_keys(value, skip_extensions=True)

    @field_validator("openapi", mode="before")
    @classmethod
    def string_openapi_version(cls, value: Any) -> Any:
        return None if value is None else str(value)

    def schema_for(self, ref: str) -> Schema | None:
        if not ref.startswith(SCHEMA_REF_PREFIX):
            return None
        return self.components.schemas.get(ref[len(SCHEMA_REF_PREFIX):])

    def resolve_response(self, response: Response) -> Response:
        """Follow a single-level `$ref` to a reusable response."""

        if response.ref and response.ref.startswith(RESPONSE_REF_PREFIX):
            target = self.components.responses.get(response.ref[len(RESPONSE_REF_PREFIX):])
            if target is None:
                raise DocumentError(f"Unresolved response reference: {response.ref}")
            return target
        return response

    def resolve_example(self, example: Example) -> Example:
        """Follow a single-level `$ref` to a reusable example."""

        if example.ref and example.ref.startswith(EXAMPLE_REF_PREFIX):
            target = self.components.examples.get(example.ref[len(EXAMPLE_REF_PREFIX):])
            if target is None:
                raise DocumentError(f"Unresolved example reference: {example.ref}")
            return target
        return example


TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class DocumentLoader(yaml.SafeLoader):
    """SafeLoader that keeps date and timestamp scalars as strings, as JSON would."""


DocumentLoader.yaml_implicit_resolvers = {
    first: [(tag, pattern) for tag, pattern in resolvers if tag != TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def parse_document(payload: Any) -> ApiDocument:
    """Validate an already-parsed mapping into an ApiDocument."""

    if not isinstance(payload, dict):
        raise DocumentError("Expected OpenAPI document to be an object")
    if "openapi" not in payload and "swagger" not in payload:
        raise DocumentError("Document is not an OpenAPI/Swagger document")
    try:
        return ApiDocument.model_validate(payload)
    except ValidationError as exc:
        raise DocumentError(f"Failed to parse OpenAPI document: {exc}") from exc


def load_document(path: Path) -> ApiDocument:
    """Read and parse a YAML or JSON OpenAPI file."""

    try:
        raw_text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FilesystemError(f"Failed to read OpenAPI file {path}: {exc}") from exc
    try:
        payload = yaml.load(raw_text, Loader=DocumentLoader)
    except yaml.YAMLError as exc:
        raise DocumentError(f"Failed to parse OpenAPI file {path}: {exc}") from exc
    return parse_document(payload)
