"""On-disk layout of the generated mock server folder."""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from .errors import FilesystemError
from .models import MockServiceConfig
from .naming import sanitize

LOGGER = structlog.get_logger("openapi_mock_export")

DATA_DIR = "data"
SOURCE_COPY_STEM = "openapi"


@dataclass(frozen=True)
class FixtureFile:
    """Response body scheduled to be written."""

    path: Path
    relative_path: str
    content: str


@dataclass
class FixturePlan:
    service_root: Path
    config: MockServiceConfig
    fixtures: list[FixtureFile] = field(default_factory=list)


def path_segment(name: str) -> str:
    """Folder token for free text; separators and dot-only names cannot leave the parent folder."""

    token = sanitize(name)
    if token and not token.strip("."):
        return token.replace(".", "_")
    return token


def service_root_for(config: MockServiceConfig, target_root: Path | str) -> Path:
    """Return ``<target_root>/data/<service name>`` with trailing separators trimmed."""

    raw = str(target_root)
    trimmed = raw.rstrip("/\\") or raw
    return Path(trimmed) / DATA_DIR / path_segment(config.name)


def _ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(f"Failed to create folder {path}: {exc}") from exc


class FixtureLayoutPlanner:
    """Assigns a fixture file to every response that carries a body.

    Paths recorded in the setting are relative to the target root
    (``./data/<service>/<METHOD>/<request>/<code>/<response>.json``) so the
    setting keeps working when the whole tree is moved.
    """

    def plan(self, config: MockServiceConfig, target_root: Path | str) -> FixturePlan:
        service_root = service_root_for(config, target_root)
        _ensure_dir(service_root)
        service_folder = path_segment(config.name)

        fixtures: list[FixtureFile] = []
        for request in config.requests:
            for response in request.responses:
                if response.body is None:
                    continue
                folder = f"{request.method}/{path_segment(request.name)}/{response.code}"
                file_name = f"{sanitize(response.name)}.json"
                relative_path = f"./{DATA_DIR}/{service_folder}/{folder}/{file_name}"
                full_folder = service_root / folder
                _ensure_dir(full_folder)

                response.file_path = relative_path
                fixtures.append(
                    FixtureFile(
                        path=full_folder / file_name,
                        relative_path=relative_path,
                        content=response.body,
                    )
                )

        return FixturePlan(service_root=service_root, config=config, fixtures=fixtures)


def copy_source_document(source: Path, service_root: Path) -> Path:
    """Copy the original document next to the setting as ``openapi<ext>``."""

    destination = service_root / f"{SOURCE_COPY_STEM}{source.suffix}"
    try:
        shutil.copyfile(source, destination)
    except OSError as exc:
        raise FilesystemError(f"Failed to copy OpenAPI file to data folder: {exc}") from exc
    LOGGER.info("openapi_copied", path=str(destination))
    return destination
