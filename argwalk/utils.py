# Argwalk CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Logging setup for the `argwalk` command.

The library itself only logs through `logging.getLogger("argwalk")` and never
touches handlers; `setup_logging()` is called by the command-line tool.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

import pythonjsonlogger.json
from rich.logging import RichHandler

from argwalk.console import error_console

LOG_MODE_ENV = "ARGWALK_LOG_MODE"
LOG_MODES = ("cli", "json")

_CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def running_in_container(cgroup_path: str | Path = "/proc/1/cgroup") -> bool:
    try:
        content = Path(cgroup_path).read_text(encoding="UTF-8")
    except OSError:
        return False
    return any(marker in content for marker in _CONTAINER_MARKERS)


def resolve_log_mode(mode: str | None = None) -> str:
    """Pick the log mode: explicit `mode`, then `ARGWALK_LOG_MODE`, then auto-detect."""
    mode = mode or os.getenv(LOG_MODE_ENV)
    if not mode:
        return "json" if running_in_container() else "cli"
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode}. Must be one of: {', '.join(LOG_MODES)}")
    return mode


def _build_handler(mode: str) -> logging.Handler:
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        )
        return handler
    # Parser log lines quote raw tokens, which may contain brackets.
    return RichHandler(
        console=error_console,
        rich_tracebacks=True,
        show_path=False,
        markup=False,
        log_time_format="[%Y-%m-%d %H:%M:%S]",
    )


def setup_logging(mode: str | None = None, level: int = logging.WARNING) -> str:
    """
    Replace the root handlers with a single stderr handler.

    Args:
        mode (str | None): "cli" for Rich console output or "json" for one JSON
            object per record. Falls back to `ARGWALK_LOG_MODE`, then to "json"
            inside a container and "cli" elsewhere.
        level (int): Level for the handler and the `argwalk` logger.

    Returns:
        str: The mode that was applied.

    Raises:
        ValueError: If `mode` is not a known log mode.
    """
    mode = resolve_log_mode(mode)
    handler = _build_handler(mode)
    handler.setLevel(level)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)

    logger = logging.getLogger("argwalk")
    logger.setLevel(level)
    logger.debug("Logging initialized in '%s' mode.", mode)
    return mode
