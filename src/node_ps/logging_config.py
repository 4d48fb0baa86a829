"""
Centralized logging configuration for applications embedding node_ps.

setup_logging configures the root logger once with:
- Console output on stdout (silenced when managed by a monitor)
- Optional file output to {log_dir}/{service_name}.log, truncated on each start

Only handlers installed here are replaced on reconfiguration; handlers the
host application attached to the root logger are left alone.
"""

import logging
import logging.handlers
import os
import sys
import threading
from pathlib import Path
from typing import List, Optional

from node_ps.config import env_bool

_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_installed_handlers: List[logging.Handler] = []


def installed_handlers() -> List[logging.Handler]:
    """Return the handlers currently installed by setup_logging."""
    return list(_installed_handlers)


def _should_skip_logging_configuration(service_name: Optional[str]) -> bool:
    if not _installed_handlers:
        return False

    has_console = any(
        isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler) for handler in _installed_handlers
    )
    if not service_name:
        has_file = True
    else:
        has_file = any(isinstance(handler, logging.FileHandler) for handler in _installed_handlers)
    return has_console and has_file


def reset_logging() -> None:
    """Detach and close every handler installed by setup_logging."""
    root_logger = logging.getLogger()
    for handler in list(_installed_handlers):
        root_logger.removeHandler(handler)
        try:
            handler.close()
        except OSError as e:
            _MODULE_LOGGER.debug("Handler close failed for root logger: %s", e)
    _installed_handlers.clear()


def _build_console_handler(user_friendly: bool, managed_by_monitor: bool) -> logging.Handler:
    if user_friendly:
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = logging.Formatter(_LOG_FORMAT, _DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    if user_friendly:
        console_handler.setLevel(logging.WARNING)
    elif managed_by_monitor:
        console_handler.setLevel(logging.CRITICAL + 1)
    else:
        console_handler.setLevel(logging.DEBUG)

    return console_handler


def _configure_file_handler(service_name: Optional[str], log_dir: Path) -> Optional[logging.Handler]:
    if not service_name:
        return None

    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / f"{service_name}.log"
    file_mode = "a" if os.getenv("LOG_APPEND") == "1" else "w"

    handler_cls = getattr(logging.handlers, "WatchedFileHandler", logging.FileHandler)
    file_handler = handler_cls(log_path, mode=file_mode)
    file_handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    file_handler.setLevel(logging.INFO)
    return file_handler


def setup_logging(service_name: Optional[str] = None, *, log_dir: Optional[Path] = None, user_friendly: bool = False):
    """Configure logging for the application"""

    with _config_lock:
        if _should_skip_logging_configuration(service_name):
            return

        root_logger = logging.getLogger()
        managed_by_monitor = bool(env_bool("MANAGED_BY_MONITOR", or_value=False))

        reset_logging()
        handlers = [_build_console_handler(user_friendly, managed_by_monitor)]

        file_handler = _configure_file_handler(service_name, Path(log_dir) if log_dir else Path.cwd() / "logs")
        if file_handler:
            handlers.append(file_handler)

        for handler in handlers:
            root_logger.addHandler(handler)
            _installed_handlers.append(handler)

        root_logger.setLevel(logging.INFO)
        logging.getLogger("asyncio").setLevel(logging.WARNING)
