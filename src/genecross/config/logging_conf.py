"""*Logging* do genecross: texto simples ou uma linha JSON por registro."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import IO, Any, Mapping

from .constants import LOG_FILE_NAME
from .settings import Settings, get_settings

__all__ = ["JSONFormatter", "configure_logging"]

_PLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRS = set(vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))) | {
    "message",
    "asctime",
    "taskName",
}


class JSONFormatter(logging.Formatter):
    """Serialise records as JSON, merging ``extra`` fields and a fixed context."""

    def __init__(self, *, default_context: Mapping[str, Any] | None = None) -> None:
        super().__init__()
        self._default_context = dict(default_context or {})

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **self._default_context,
        }
        payload.update(
            (key, value) for key, value in vars(record).items() if key not in _RECORD_ATTRS
        )
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def _formatter(structured: bool, context: Mapping[str, Any] | None) -> logging.Formatter:
    if structured:
        return JSONFormatter(default_context=context)
    return logging.Formatter(fmt=_PLAIN_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def _clear_handlers(root: logging.Logger) -> None:
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)


def _attach(root: logging.Logger, handler: logging.Handler, level: int | str, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    root.addHandler(handler)


def configure_logging(
    *,
    settings: Settings | None = None,
    level: int | str = logging.INFO,
    structured: bool | None = None,
    module_levels: Mapping[str, int | str] | None = None,
    stream: IO[str] | None = None,
    context: Mapping[str, Any] | None = None,
    log_file: Path | None = None,
) -> None:
    """Replace the root handlers with a stream handler and a log file.

    Parameters
    ----------
    settings:
        Fonte de ``logs_dir`` e ``structured_logging``; por padrão
        :func:`get_settings`.
    level:
        Nível aplicado aos dois *handlers*.
    structured:
        Força JSON (``True``) ou texto (``False``) ignorando ``settings``.
    module_levels:
        Níveis por *logger*, ex. ``{"genecross.ga.recombination": "WARNING"}``.
    stream:
        Destino do ``StreamHandler`` (``sys.stderr`` quando ``None``).
    context:
        Campos fixos incluídos em cada registro JSON, ex. ``{"run": "gen-12"}``.
    log_file:
        Arquivo de *append*; por padrão ``settings.logs_dir / 'genecross.log'``.
    """

    settings = settings or get_settings()
    if structured is None:
        structured = settings.structured_logging
    formatter = _formatter(structured, context)

    root = logging.getLogger()
    _clear_handlers(root)
    root.setLevel(logging.DEBUG)
    _attach(root, logging.StreamHandler(stream), level, formatter)

    target = log_file or settings.logs_dir / LOG_FILE_NAME
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(target, encoding="utf-8")
    except OSError:  # pragma: no cover - depends on filesystem permissions
        root.warning("could not open log file %s", target)
    else:
        _attach(root, file_handler, level, formatter)

    for logger_name, logger_level in (module_levels or {}).items():
        logging.getLogger(logger_name).setLevel(logger_level)
