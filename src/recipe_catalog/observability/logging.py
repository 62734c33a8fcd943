"""Logging configuration using Loguru.

Records carry their structured data in ``record["extra"]``: the logger name
from ``get_logger``, keyword arguments of the call (``reason=...``) and the
values bound with ``bind_context``. The console sink renders them either as
one orjson line per record or as ``key=value`` pairs for development.
"""

from __future__ import annotations

import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import orjson
from loguru import logger


if TYPE_CHECKING:
    from typing import Any


# Values bound for the current command run (recipe, group_id, ...)
_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})


def _escape(text: str) -> str:
    # Loguru treats the string returned by a format function as a template
    return text.replace("{", "{{").replace("}", "}}")


def _apply_context(record: dict[str, Any]) -> None:
    """Copy bound context into the record; call arguments take precedence."""
    for key, value in _log_context.get().items():
        record["extra"].setdefault(key, value)


def _format_json(record: dict[str, Any]) -> str:
    fields = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "logger": record["name"],
        "line": record["line"],
        **record["extra"],
    }

    if record["exception"]:
        exc = record["exception"]
        fields["exception"] = {
            "type": exc.type.__name__ if exc.type else None,
            "value": str(exc.value) if exc.value else None,
        }

    return _escape(orjson.dumps(fields, default=str).decode()) + "\n"


def _format_text(record: dict[str, Any]) -> str:
    pairs = " ".join(
        f"{key}={value}" for key, value in record["extra"].items() if key != "name"
    )
    # Markup tags in values would be parsed as colors
    suffix = " | " + _escape(pairs).replace("<", r"\<") if pairs else ""

    fmt = (
        "<green>{time:HH:mm:ss.SSS}</green> "
        "<level>{level: <8}</level> "
        "<cyan>{name}:{line}</cyan> - "
        f"<level>{{message}}</level>{suffix}\n"
    )
    if record["exception"]:
        fmt += "{exception}\n"
    return fmt


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "json",
    *,
    is_development: bool = False,
    log_file: Path | str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Replace all Loguru sinks with the configured ones.

    Args:
        log_level: Minimum level, e.g. "DEBUG".
        log_format: "json" or "text". Development always uses text.
        is_development: True when APP_ENV is development.
        log_file: Optional path that also receives JSON records, rotated
            by size.
        stream: Console stream, stdout by default. The CLI passes stderr
            so that its JSON output stays clean.
    """
    logger.remove()
    level = log_level.upper()

    if log_format == "json" and not is_development:
        logger.add(
            stream or sys.stdout,
            format=_format_json,
            level=level,
            colorize=False,
            diagnose=False,
        )
    else:
        logger.add(
            stream or sys.stdout,
            format=_format_text,
            level=level,
            colorize=True,
        )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=_format_json,
            level=level,
            rotation="10 MB",
            retention=5,
            diagnose=False,
        )


def get_logger(name: str) -> Any:
    """Loguru logger that tags records with ``name`` and the bound context."""
    return logger.bind(name=name).patch(_apply_context)


def bind_context(**kwargs: Any) -> None:
    """Attach values to every record logged afterwards in this context.

    Example:
        bind_context(recipe="chocolate-cake", group_id="group-a")
    """
    _log_context.set({**_log_context.get(), **kwargs})


def clear_context() -> None:
    """Drop all bound values."""
    _log_context.set({})


def get_context() -> dict[str, Any]:
    """Copy of the currently bound values."""
    return dict(_log_context.get())


__all__ = [
    "bind_context",
    "clear_context",
    "get_context",
    "get_logger",
    "logger",
    "setup_logging",
]
