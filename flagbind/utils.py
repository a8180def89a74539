# Flagbind Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import shutil
import sys

import pythonjsonlogger.json
from rich.logging import RichHandler

LOG_MODES = ("cli", "json")
CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
TEXT_LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"

# set on the handler installed by setup_logging so it can be found again
_CONSOLE_HANDLER_FLAG = "_flagbind_console"


def get_program_invocation() -> str:
    """Returns the recommended program invocation prefix."""
    script = sys.argv[0] if sys.argv and sys.argv[0] else "flagbind"
    program = shutil.which(script)
    if program:
        return os.path.basename(program)

    executable = sys.executable
    if "python" in executable:
        return f"python {script}"
    return script


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as cgroup:
            content = cgroup.read()
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def resolve_log_level(level: int | str | None, fallback: int = logging.WARNING) -> int:
    """
    Turn a level number or name (``"info"``, ``"DEBUG"``) into a level number.

    `None` resolves to the `FLAGBIND_LOG_LEVEL` environment variable, then to
    `fallback`.

    Raises:
        ValueError: If the name is not a known logging level.
    """
    if level is None:
        level = os.getenv("FLAGBIND_LOG_LEVEL") or fallback
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Invalid log level: {level}")
    return resolved


def set_console_log_level(level: int | str) -> None:
    """Change the level of the console handler installed by `setup_logging`."""
    resolved = resolve_log_level(level)
    for handler in logging.getLogger().handlers:
        if getattr(handler, _CONSOLE_HANDLER_FLAG, False):
            handler.setLevel(resolved)


def _json_formatter() -> logging.Formatter:
    return pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT)


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int | str = logging.DEBUG,
    console_log_level: int | str | None = None,
) -> None:
    """
    Configure logging for programs built on Flagbind.

    The library only emits records on the "flagbind" logger (registrations and
    parse summaries at DEBUG) and never installs handlers itself. Call this
    from a program entry point.

    Args:
        mode (str | None):
            "cli" for Rich console logs or "json" for one JSON object per
            record. Defaults to `FLAGBIND_LOG_MODE`, then to "json" inside a
            container and "cli" elsewhere.
        log_filename (str | None):
            Also log to this file. No file handler is added when omitted.
        json_log_to_file (bool):
            Format the file log as JSON instead of plain text.
        file_log_level (int | str):
            Level for the file handler. Defaults to DEBUG.
        console_log_level (int | str | None):
            Level for the console handler. Defaults to `FLAGBIND_LOG_LEVEL`,
            then WARNING, so parse diagnostics stay out of a program's normal
            output unless asked for.

    Raises:
        ValueError: If `mode` or a level name is invalid.
    """
    if not mode:
        mode = os.getenv("FLAGBIND_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode}")
    console_level = resolve_log_level(console_log_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    if mode == "cli":
        console_handler: logging.Handler = RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    else:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(_json_formatter())
    console_handler.setLevel(console_level)
    setattr(console_handler, _CONSOLE_HANDLER_FLAG, True)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(resolve_log_level(file_log_level))
        file_handler.setFormatter(
            _json_formatter()
            if json_log_to_file
            else logging.Formatter(TEXT_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        root.addHandler(file_handler)

    logging.getLogger("flagbind").debug(
        "Logging initialized in '%s' mode at %s.",
        mode,
        logging.getLevelName(console_level),
    )
