"""Pydantic models describing the generated mock server setting."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class HeaderSpec(BaseModel):
    """Single HTTP header name/value pair."""

    name: str
    value: str


class ResponseSpec(BaseModel):
    """One concrete example response for an operation."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    code: int
    query: str
    headers: list[HeaderSpec] | None = None
    file_path: str | None = Field(default=None, alias="filePath")
    body: str | None = Field(default=None, exclude=True)


class RequestSpec(BaseModel):
    """One API operation (method + path pair) and its example responses."""

    name: str
    method: str
    path: str
    responses: list[ResponseSpec] = Field(default_factory=list)


class MockServiceConfig(BaseModel):
    """Top-level setting consumed by the mock server runtime."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str = ""
    host: str
    port: int
    swagger_enabled: bool = Field(default=True, alias="swaggerEnabled")
    headers: list[HeaderSpec] = Field(default_factory=list)
    requests: list[RequestSpec] = Field(default_factory=list)

    def as_serializable(self) -> dict[str, Any]:
        """Return a JSON/YAML friendly payload using the setting file's field names."""

        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        if not payload["headers"]:
            del payload["headers"]
        return payload
