"""Test bootstrap for openapi-mock-export."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Iterator

import pytest
import structlog

APP_ROOT = Path(__file__).resolve().parents[1]
if str(APP_ROOT) not in sys.path:
    sys.path.insert(0, str(APP_ROOT))


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    yield
    structlog.reset_defaults()
    for handler in list(logging.root.handlers):
        logging.root.removeHandler(handler)


@pytest.fixture
def pet_store() -> dict[str, Any]:
    return {
        "openapi": "3.0.1",
        "info": {"title": "Pet Store", "description": "Sample pets API", "version": "1.0.0"},
        "paths": {
            "/pets": {
                "get": {
                    "operationId": "listPets",
                    "responses": {
                        "200": {
                            "description": "OK\n",
                            "content": {
                                "application/json": {
                                    "examples": {"sample": {"value": "hello"}},
                                }
                            },
                        }
                    },
                }
            }
        },
    }
