"""Walk the path/method tree of an OpenAPI document."""

from __future__ import annotations

from typing import Mapping

import structlog

from .document import ApiDocument
from .models import RequestSpec
from .naming import sanitize
from .responses import extract_responses

LOGGER = structlog.get_logger("openapi_mock_export")


def walk_operations(document: ApiDocument, schema_examples: Mapping[str, str]) -> list[RequestSpec]:
    """Build one RequestSpec per operation, in document order."""

    requests: list[RequestSpec] = []
    for path, path_item in document.paths.items():
        if path_item is None:
            continue
        for method, operation in path_item.operations():
            name = operation.operation_id or sanitize(f"{method} {path}")
            LOGGER.info("operation_walked", path=path, method=method, operation=name)
            requests.append(
                RequestSpec(
                    name=name,
                    method=method,
                    path=path,
                    responses=extract_responses(operation.responses, schema_examples, document),
                )
            )
    return requests
