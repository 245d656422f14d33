"""Structured logging for the exporter CLI."""

from __future__ import annotations

import logging
import os
import sys
from io import StringIO
from typing import Any, Literal

import structlog
from rich.console import Console
from rich.text import Text

LogFormat = Literal["json", "console", "plain"]

LOGGER_NAME = "openapi_mock_export"
ENV_VAR_NAME = "CONSOLE_OUTPUT_FORMAT"

# environment values accepted besides the LogFormat names
ENV_ALIASES: dict[str, LogFormat] = {"auto": "console", "rich": "console"}

# event fields holding filesystem paths, shown after the other fields
PATH_FIELDS = ("path", "openapi_file", "target_folder")


def resolve_log_format(cli_value: str | None = None) -> LogFormat:
    """CLI option first, then ``CONSOLE_OUTPUT_FORMAT``, then ``console``."""

    for candidate in (cli_value, os.environ.get(ENV_VAR_NAME)):
        if not candidate:
            continue
        value = candidate.lower()
        if value in ("json", "console", "plain"):
            return value  # type: ignore[return-value]
        if value in ENV_ALIASES:
            return ENV_ALIASES[value]
    return "console"


class ExportConsoleRenderer:
    """One line per export step: level badge, event, fields, then paths."""

    level_styles = {
        "debug": "dim",
        "info": "green",
        "warning": "yellow",
        "error": "bold red",
        "critical": "bold white on red",
    }

    def __call__(self, logger: Any, name: str, event_dict: dict[str, Any]) -> str:
        level = event_dict.pop("level", "info")
        event = str(event_dict.pop("event", ""))
        event_dict.pop("timestamp", None)
        paths = [(key, event_dict.pop(key)) for key in PATH_FIELDS if key in event_dict]

        line = Text()
        line.append(f"{level.upper():<5}", style=self.level_styles.get(level, "white"))
        line.append(f" {event:<22}", style="bold")
        for key, value in sorted(event_dict.items()):
            line.append(f" {key}=", style="dim")
            line.append(str(value), style="cyan")
        for key, value in paths:
            line.append(f" {key}=", style="dim")
            line.append(str(value), style="underline")

        buffer = StringIO()
        Console(file=buffer, force_terminal=True, width=240).print(line, end="")
        return buffer.getvalue()


def configure_logging(log_level: str, log_format: str | None = None) -> structlog.stdlib.BoundLogger:
    """Route structlog through stdlib logging on stdout and return the exporter logger."""

    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, stream=sys.stdout, format="%(message)s", force=True)

    renderers = {
        "console": ExportConsoleRenderer(),
        "plain": structlog.dev.ConsoleRenderer(colors=False),
        "json": structlog.processors.JSONRenderer(),
    }
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
            structlog.processors.format_exc_info,
            renderers[resolve_log_format(log_format)],
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    return structlog.get_logger(LOGGER_NAME)
