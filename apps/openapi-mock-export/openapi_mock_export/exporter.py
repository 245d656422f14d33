"""Persist a planned mock server folder and run the full export."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

import structlog
import yaml

from .document import load_document
from .errors import FilesystemError
from .generator import DEFAULT_HOST, MockConfigBuilder, process_port
from .layout import FixtureLayoutPlanner, FixturePlan, copy_source_document
from .models import MockServiceConfig

LOGGER = structlog.get_logger("openapi_mock_export")

SETTING_FILE_NAMES: dict[str, str] = {
    "yaml": "setting.yaml",
    "json": "setting.json",
}


def write_fixtures(plan: FixturePlan) -> None:
    """Write every planned response body."""

    for fixture in plan.fixtures:
        try:
            fixture.path.write_bytes(fixture.content.encode("utf-8"))
        except OSError as exc:
            raise FilesystemError(f"Failed to write response body to {fixture.path}: {exc}") from exc
        LOGGER.info("response_body_saved", path=fixture.relative_path)


def save_setting(config: MockServiceConfig, service_root: Path, fmt: str = "yaml") -> Path:
    """Serialize the setting into the service folder and return its path."""

    fmt = fmt.lower()
    if fmt not in SETTING_FILE_NAMES:
        raise ValueError(f"Unsupported setting format: {fmt}")
    destination = service_root / SETTING_FILE_NAMES[fmt]

    payload = config.as_serializable()
    if fmt == "json":
        text = json.dumps(payload, indent=2, ensure_ascii=False)
    else:
        text = yaml.safe_dump(payload, sort_keys=False, indent=2, allow_unicode=True)
    try:
        destination.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise FilesystemError(f"Failed to write mock server setting to {destination}: {exc}") from exc
    LOGGER.info("setting_saved", path=str(destination))
    return destination


def export_openapi_to_mock_server(
    openapi_file: Path,
    target_folder: Path,
    *,
    fmt: str = "yaml",
    host: str = DEFAULT_HOST,
    port_factory: Callable[[], int] = process_port,
    swagger_enabled: bool = True,
) -> Path:
    """Convert ``openapi_file`` into a mock server folder under ``target_folder``.

    Returns the path of the written setting file. Any failure aborts the run;
    files written before the failure are left in place.
    """

    document = load_document(openapi_file)
    builder = MockConfigBuilder(host=host, port_factory=port_factory, swagger_enabled=swagger_enabled)
    config = builder.build(document)

    plan = FixtureLayoutPlanner().plan(config, target_folder)
    write_fixtures(plan)
    setting_path = save_setting(plan.config, plan.service_root, fmt)
    copy_source_document(openapi_file, plan.service_root)
    return setting_path
