"""Errors raised while exporting an OpenAPI document to mock fixtures."""

from __future__ import annotations


class MockExportError(RuntimeError):
    """Base class for every condition that aborts an export run."""


class DocumentError(MockExportError):
    """Raised when the source document cannot be parsed or navigated."""


class ResponseCodeError(DocumentError):
    """Raised when a response key is not an integer status code."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Failed to convert response code to integer: {code!r}")
        self.code = code


class FilesystemError(MockExportError):
    """Raised when a folder or file cannot be created, read or written."""
