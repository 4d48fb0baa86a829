"""Protocol definitions for NodeProcessWrapper dependency injection.

The wrapper never touches psutil or ``os`` directly. It talks to three small
capabilities, each of which has a production implementation in this package
and can be replaced by a test double:

    ProcessLister        -> PsutilProcessLister
    TreeKiller           -> PsutilTreeKiller
    PathSeparatorSource  -> OsPathSeparator
"""

from __future__ import annotations

import os
from typing import List, Protocol

from ..errors import Pid
from .process_models import ProcessRecord


class ProcessLister(Protocol):
    """Capability that returns the current host process list."""

    async def list_processes(self) -> List[ProcessRecord]:
        """Return every visible process in enumeration order, unfiltered."""
        ...


class TreeKiller(Protocol):
    """Capability that terminates a process and all of its descendants."""

    async def kill_tree(self, pid: Pid) -> None:
        """Terminate the tree rooted at *pid*.

        Raises:
            ProcessNotFoundError: If *pid* does not exist
            ProcessTerminationError: If the tree cannot be terminated
        """
        ...


class PathSeparatorSource(Protocol):
    """Capability exposing the host path separator."""

    def get_separator(self) -> str:
        ...


class OsPathSeparator:
    """Reads ``os.sep`` on every call."""

    def get_separator(self) -> str:
        return os.sep


class FixedPathSeparator:
    """Always reports the separator it was built with."""

    def __init__(self, separator: str) -> None:
        self._separator = separator

    def get_separator(self) -> str:
        return self._separator

    def __repr__(self) -> str:
        return f"FixedPathSeparator({self._separator!r})"


__all__ = [
    "FixedPathSeparator",
    "OsPathSeparator",
    "PathSeparatorSource",
    "ProcessLister",
    "TreeKiller",
]
