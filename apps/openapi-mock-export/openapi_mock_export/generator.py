"""Mock server setting builder."""

from __future__ import annotations

import os
from typing import Callable

import structlog

from .document import ApiDocument
from .models import HeaderSpec, MockServiceConfig
from .schema_examples import build_schema_example_table
from .walker import walk_operations

LOGGER = structlog.get_logger("openapi_mock_export")

DEFAULT_HOST = "0.0.0.0"
PORT_RANGE_START = 10000
PORT_RANGE_SIZE = 50000


def process_port() -> int:
    """Port derived from the current process id, in [10000, 60000)."""

    return PORT_RANGE_START + os.getpid() % PORT_RANGE_SIZE


class MockConfigBuilder:
    """Derives the mock server setting from a parsed OpenAPI document."""

    def __init__(
        self,
        *,
        host: str = DEFAULT_HOST,
        port_factory: Callable[[], int] = process_port,
        swagger_enabled: bool = True,
        headers: list[HeaderSpec] | None = None,
    ) -> None:
        self._host = host
        self._port_factory = port_factory
        self._swagger_enabled = swagger_enabled
        self._headers = list(headers or [])

    def build(self, document: ApiDocument) -> MockServiceConfig:
        schema_examples = build_schema_example_table(document)
        requests = walk_operations(document, schema_examples)

        config = MockServiceConfig(
            name=document.info.title,
            description=document.info.description or "",
            host=self._host,
            port=self._port_factory(),
            swagger_enabled=self._swagger_enabled,
            headers=list(self._headers),
            requests=requests,
        )
        LOGGER.info("config_built", name=config.name, requests=len(requests), port=config.port)
        return config
