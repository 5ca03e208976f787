# ------------------------------------------------------------------------------
#  Swarmfield
#  Copyright (c) 2025 Fabio Oddi
#
#  This file is part of Swarmfield, released under the BSD 3-Clause License.
# ------------------------------------------------------------------------------

"""
Utilities to configure and retrieve simulation loggers.

Every module asks for ``get_logger("<component>")`` and receives the
``sim.<component>`` logger. ``configure_logging`` wires the handlers once per
process:

    console  -> StreamHandler (default)
    to_file  -> <base_path>/<process-name>/<timestamp>.log.zip
"""

from __future__ import annotations

import atexit, logging, os, threading, zipfile
import multiprocessing as mp
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional


LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
LOG_NAMESPACE = "sim"
DEFAULT_LOG_BASE = Path("data") / "logs"
DEFAULT_LOGGING_SETTINGS = {
    "level": "WARNING",
    "to_console": True,
    "to_file": False,
}

_SHUTDOWN_REGISTERED = False


def _normalize_logging_settings(settings: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Return a settings dict with defaults applied.

    Missing or empty config -> console logging at WARNING, no file logging.
    """
    if not isinstance(settings, dict) or not settings:
        return dict(DEFAULT_LOGGING_SETTINGS)
    normalized = dict(settings)
    for key, value in DEFAULT_LOGGING_SETTINGS.items():
        normalized.setdefault(key, value)
    return normalized


def is_file_logging_enabled(settings: Optional[Dict[str, Any]]) -> bool:
    """Return True when the compressed file handler should run."""
    normalized = _normalize_logging_settings(settings)
    return bool(normalized.get("to_file"))


# ------------------------------------------------------------------------------
#  MAIN ENTRY POINT
# ------------------------------------------------------------------------------

def configure_logging(
    settings: Optional[Dict[str, Any]] = None,
    base_path: Optional[str | Path] = None,
    log_filename_prefix: Optional[str] = None,
) -> Optional[Path]:
    """
    Configure logging for this process.

    settings keys:
        - level: global log level (defaults to WARNING)
        - to_console: mirror logs to stderr (defaults to True)
        - to_file: write a ZIP archive per process (defaults to False)
        - base_path: root folder for the archives (overridden by ``base_path``)

    Returns the archive path when file logging is active, None otherwise.
    """
    normalized = _normalize_logging_settings(settings)

    level_raw = normalized.get("level", "WARNING")
    level = getattr(logging, str(level_raw).upper(), logging.WARNING)

    handlers: list[logging.Handler] = []

    if normalized.get("to_console"):
        console = logging.StreamHandler()
        console.setLevel(level)
        handlers.append(console)

    archive_path = None
    if normalized.get("to_file"):
        if base_path is None:
            base_path = normalized.get("base_path") or DEFAULT_LOG_BASE
        proc_dir = Path(base_path) / mp.current_process().name
        log_context = _prepare_log_artifacts(proc_dir, filename_prefix=log_filename_prefix)
        file_handler = _CompressedLogHandler(log_context)
        # File handler accepts ALL levels (root decides)
        file_handler.setLevel(logging.NOTSET)
        handlers.append(file_handler)
        archive_path = log_context["log_path"]

    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(level=level, handlers=handlers, force=True)

    sim_logger = logging.getLogger(LOG_NAMESPACE)
    sim_logger.setLevel(level)
    sim_logger.propagate = True

    formatter = logging.Formatter(LOG_FORMAT)
    for h in handlers:
        h.setFormatter(formatter)

    _ensure_shutdown_registered()
    return archive_path


# ------------------------------------------------------------------------------
#  PATH PREPARATION
# ------------------------------------------------------------------------------

def _prepare_log_artifacts(
    base_path: str | Path,
    filename_prefix: Optional[str] = None,
) -> Dict[str, Path | str]:
    log_dir = Path(base_path).expanduser().resolve()
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    filename_parts = [filename_prefix] if filename_prefix else []
    filename_parts.append(timestamp)

    inner_log_name = f"{'_'.join(filename_parts)}.log"
    return {
        "log_path": log_dir / f"{inner_log_name}.zip",
        "inner_log_name": inner_log_name,
        "timestamp": timestamp,
        "log_dir": log_dir,
    }


# ------------------------------------------------------------------------------
#  LOGGER ACCESS
# ------------------------------------------------------------------------------

def get_logger(component: str) -> logging.Logger:
    """Return logger sim.<component>."""
    component = component.strip(".")
    name = f"{LOG_NAMESPACE}.{component}" if component else LOG_NAMESPACE
    return logging.getLogger(name)


# ------------------------------------------------------------------------------
#  COMPRESSED ZIP HANDLER (per process)
# ------------------------------------------------------------------------------

class _CompressedLogHandler(logging.Handler):
    """Write log records into a ZIP archive, renamed into place on close."""

    terminator = b"\n"

    def __init__(self, context):
        super().__init__()
        self._lock = threading.RLock()
        self._closed = False
        self._archive_path: Path = context["log_path"]
        self._temp_archive_path: Path | None = self._archive_path.parent / f"{self._archive_path.name}.tmp"
        self._zip = zipfile.ZipFile(
            self._temp_archive_path,
            mode="w",
            compression=zipfile.ZIP_DEFLATED,
            compresslevel=9,
        )
        self._inner_stream = self._zip.open(context["inner_log_name"], mode="w")

    def emit(self, record):
        try:
            if not self._inner_stream:
                return
            msg = self.format(record).encode("utf-8") + self.terminator
            with self._lock:
                self._inner_stream.write(msg)
                self._inner_stream.flush()
        except Exception:
            self.handleError(record)

    def close(self):
        with self._lock:
            if self._closed:
                return
            self._closed = True
            if self._inner_stream:
                self._inner_stream.close()
                self._inner_stream = None
            if self._zip:
                self._zip.close()
                self._zip = None
            if self._temp_archive_path:
                os.replace(self._temp_archive_path, self._archive_path)
                self._temp_archive_path = None
        super().close()


# ------------------------------------------------------------------------------
#  CLEAN SHUTDOWN
# ------------------------------------------------------------------------------

def shutdown_logging():
    """Flush and close all root logging handlers."""
    root = logging.getLogger()
    for h in root.handlers[:]:
        h.flush()
        h.close()
        root.removeHandler(h)


def _ensure_shutdown_registered() -> None:
    """Register logging shutdown at interpreter exit."""
    global _SHUTDOWN_REGISTERED
    if _SHUTDOWN_REGISTERED:
        return
    atexit.register(shutdown_logging)
    _SHUTDOWN_REGISTERED = True
