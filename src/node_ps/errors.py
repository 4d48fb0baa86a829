"""Error types raised while locating or terminating node processes."""

from __future__ import annotations

from typing import List, Optional, Union

Pid = Union[int, str]


class NodeProcessError(RuntimeError):
    """Base class for process lookup and termination failures."""


class ProcessEnumerationError(NodeProcessError):
    """Raised when the host process list cannot be read."""


class ProcessTerminationError(NodeProcessError):
    """Raised when a process tree cannot be terminated."""

    def __init__(self, pid: Pid, message: str) -> None:
        super().__init__(message)
        self.pid = pid

    @classmethod
    def access_denied(cls, pid: Pid, denied: Optional[List[int]] = None) -> "ProcessTerminationError":
        message = f"Access denied while terminating process {pid}"
        if denied:
            message += f" (denied: {denied})"
        return cls(pid, message)

    @classmethod
    def survived_kill(cls, pid: Pid, survivors: List[int], timeout: float) -> "ProcessTerminationError":
        return cls(
            pid,
            f"Process tree {pid} persisted after SIGKILL for {timeout}s " f"(alive: {survivors}); manual intervention required.",
        )


class ProcessNotFoundError(ProcessTerminationError):
    """Raised when the process to terminate no longer exists."""

    def __init__(self, pid: Pid) -> None:
        super().__init__(pid, f"Process {pid} does not exist")


__all__ = [
    "NodeProcessError",
    "Pid",
    "ProcessEnumerationError",
    "ProcessNotFoundError",
    "ProcessTerminationError",
]
