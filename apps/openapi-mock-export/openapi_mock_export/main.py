"""CLI entrypoint exporting an OpenAPI document to a mock server folder."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

if __package__ in {None, ""}:
    sys.path.append(str(Path(__file__).resolve().parents[1]))
    __package__ = "openapi_mock_export"

from .errors import MockExportError
from .exporter import SETTING_FILE_NAMES, export_openapi_to_mock_server
from .generator import DEFAULT_HOST, process_port
from .logging_utils import configure_logging

app = typer.Typer(help="Export an OpenAPI document to mock server settings and response fixtures.")


@app.command()
def export(
    openapi_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="OpenAPI document (YAML or JSON).",
    ),
    target_folder: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=False,
        help="Folder receiving data/<service>/ with the setting and fixtures.",
    ),
    host: str = typer.Option(DEFAULT_HOST, help="Bind host recorded in the setting file."),
    port: Optional[int] = typer.Option(
        None,
        min=1,
        max=65535,
        help="Fixed port instead of the one derived from the process id.",
    ),
    swagger: bool = typer.Option(True, "--swagger/--no-swagger", help="Enable the swagger UI of the mock server."),
    format: str = typer.Option("yaml", "--format", "-f", help="Setting format: yaml (default) or json."),
    log_level: str = typer.Option("INFO", help="Log level."),
    log_format: Optional[str] = typer.Option(None, help="Log format: console, plain or json."),
) -> None:
    """Generate the mock server setting, response fixtures and a copy of the document."""

    fmt = format.lower()
    if fmt not in SETTING_FILE_NAMES:
        raise typer.BadParameter("Format must be 'yaml' or 'json'")

    logger = configure_logging(log_level, log_format)
    logger.info("export_started", openapi_file=str(openapi_file), target_folder=str(target_folder))

    port_factory = (lambda: port) if port is not None else process_port
    try:
        setting_path = export_openapi_to_mock_server(
            openapi_file,
            target_folder,
            fmt=fmt,
            host=host,
            port_factory=port_factory,
            swagger_enabled=swagger,
        )
    except MockExportError as exc:
        logger.error("export_failed", error=str(exc))
        raise typer.Exit(code=1) from exc

    typer.secho(f"Mock server setting created -> {setting_path}", fg=typer.colors.GREEN)


def run() -> None:
    """Console_scripts hook."""

    app()


if __name__ == "__main__":  # pragma: no cover
    run()
