"""Best-effort JSON examples synthesized from reusable schemas."""

from __future__ import annotations

import json
from typing import Any

import structlog

from .document import SCHEMA_REF_PREFIX, ApiDocument, Schema

LOGGER = structlog.get_logger("openapi_mock_export")

PRIMITIVE_TYPES: tuple[str, ...] = ("string", "integer")


def synthesize_schema_example(schema: Schema, document: ApiDocument | None = None) -> str:
    """Build an example JSON object from the primitive properties of ``schema``.

    Keys keep their declaration order. Each value is the property's ``example``
    or ``null``. Anything that is not an object schema yields ``{}``. An example
    that cannot be serialized yields an empty string, meaning "no example".
    """

    example: dict[str, Any] = {}
    if schema.is_type("object"):
        for prop_name, prop_schema in schema.properties.items():
            prop_schema = _resolve_property(prop_schema, document)
            if any(prop_schema.is_type(kind) for kind in PRIMITIVE_TYPES):
                example[prop_name] = prop_schema.example

    try:
        return json.dumps(example, indent=2, ensure_ascii=False)
    except (TypeError, ValueError):
        return ""


def _resolve_property(schema: Schema, document: ApiDocument | None) -> Schema:
    if schema.ref and document is not None:
        return document.schema_for(schema.ref) or schema
    return schema


def build_schema_example_table(document: ApiDocument) -> dict[str, str]:
    """Synthesize one example per reusable schema, keyed by its reference string."""

    table = {
        f"{SCHEMA_REF_PREFIX}{name}": synthesize_schema_example(schema, document)
        for name, schema in document.components.schemas.items()
    }
    LOGGER.debug("schema_examples_built", schemas=len(table))
    return table
