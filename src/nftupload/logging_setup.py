from __future__ import annotations

import json
import logging
import logging.config
import os

_CURRENT_IMAGE_NAME = "-"
_STANDARD_LOGRECORD_ATTRS = {
    "name",
    "msg",
    "message",
    "asctime",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
}


class _ImageNameFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "image_name") or getattr(record, "image_name") in (None, ""):
            record.image_name = _CURRENT_IMAGE_NAME
        return True


class _JsonExtraFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = _extract_extras(record)
        if not extras:
            return base
        extras_json = json.dumps(extras, indent=2, default=str, sort_keys=True)
        return f"{base}\n{extras_json}"


def _extract_extras(record: logging.LogRecord) -> dict[str, object]:
    extras: dict[str, object] = {}
    for key, value in record.__dict__.items():
        if key in _STANDARD_LOGRECORD_ATTRS:
            continue
        if key == "image_name":
            continue
        extras[key] = value
    return extras


def set_image_name(name: str | None) -> None:
    """Set the `image_name` value injected into log records."""
    global _CURRENT_IMAGE_NAME
    _CURRENT_IMAGE_NAME = name or "-"


def _install_image_filter() -> None:
    root = logging.getLogger()
    for handler in root.handlers:
        if any(isinstance(f, _ImageNameFilter) for f in handler.filters):
            continue
        handler.addFilter(_ImageNameFilter())


def configure_logging(*, log_level: str = "INFO", image_name: str | None = None) -> None:
    """Configure root logging with a consistent format.

    Logs go to stderr; stdout is reserved for the store result.
    """
    console_level_name = str(log_level).upper()
    default_console_fmt = (
        "%(asctime)s %(levelname)s [%(image_name)s] %(module)s:%(lineno)d %(message)s"
    )
    console_fmt = os.getenv("CONSOLE_LOG_FORMAT", default_console_fmt)

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "()": "nftupload.logging_setup._JsonExtraFormatter",
                    "format": console_fmt,
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": console_level_name,
                    "formatter": "default",
                    "stream": "ext://sys.stderr",
                }
            },
            "root": {"level": "DEBUG", "handlers": ["console"]},
        }
    )

    _install_image_filter()
    set_image_name(image_name)
    logging.captureWarnings(True)

    # Reduce noisy third-party request logs by default.
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
