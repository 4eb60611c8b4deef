# Argline Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Logging helpers for applications that embed argline.

argline only emits records on the "argline" logger. `setup_logging()` attaches
console (and optionally file) handlers to that logger alone, so the host
application's root logging configuration is left untouched. Handlers added by
a previous call are closed and replaced, which makes repeated calls safe.
"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

LOGGER_NAME = "argline"
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
TEXT_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"
CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")

_ARGLINE_HANDLER = "_argline_handler"


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def _build_console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def _build_file_handler(log_filename: str, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(log_filename, "a", "UTF-8")
    if as_json:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def reset_logging() -> None:
    """Close and detach every handler a previous `setup_logging()` call attached."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        if getattr(handler, _ARGLINE_HANDLER, False):
            logger.removeHandler(handler)
            handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> logging.Logger:
    """
    Attach Rich or JSON handlers to the "argline" logger.

    Args:
        mode (str | None):
            Console output mode. Can be:
                - "cli": human-readable Rich console logs (default outside containers)
                - "json": machine-readable JSON logs (default inside containers)
            If not provided, the `ARGLINE_LOG_MODE` environment variable is used,
            falling back on container detection.
        log_filename (str | None):
            Optional log file. No file is written when None.
        json_log_to_file (bool):
            Whether to format file logs as JSON instead of plain text.
        file_log_level (int):
            Logging level for file output. Defaults to `logging.DEBUG`.
        console_log_level (int):
            Logging level for console output. Defaults to `logging.WARNING`.

    Returns:
        logging.Logger: The configured "argline" logger.

    Raises:
        ValueError: If an invalid logging `mode` is passed.

    Environment Variables:
        ARGLINE_LOG_MODE: Overrides the default "cli" / "json" choice.
    """
    if not mode:
        mode = os.getenv("ARGLINE_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )
    console_handler = _build_console_handler(mode)
    console_handler.setLevel(console_log_level)

    reset_logging()
    logger = logging.getLogger(LOGGER_NAME)
    handlers = [console_handler]
    if log_filename:
        file_handler = _build_file_handler(log_filename, json_log_to_file)
        file_handler.setLevel(file_log_level)
        handlers.append(file_handler)

    for handler in handlers:
        setattr(handler, _ARGLINE_HANDLER, True)
        logger.addHandler(handler)
    logger.setLevel(min(handler.level for handler in handlers))
    logger.propagate = False
    logger.debug("Logging initialized in '%s' mode.", mode)
    return logger
