from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..errors import Pid

NODE_EXECUTABLE_NAME = "SubstratumNode"
NODE_BINARY_DIRECTORIES: Tuple[str, ...] = ("static", "binaries")


@dataclass(frozen=True)
class ProcessRecord:
    """One entry of the host process list."""

    name: str
    cmd: str
    pid: Optional[Pid] = None


@dataclass(frozen=True)
class MatchCriterion:
    """Executable name and the directories it must be launched from."""

    executable_name: str = NODE_EXECUTABLE_NAME
    directories: Tuple[str, ...] = NODE_BINARY_DIRECTORIES

    def fragment(self, separator: str) -> str:
        """Return ``static<sep>binaries<sep><executable>`` for *separator*."""
        return separator.join((*self.directories, self.executable_name))


NODE_MATCH_CRITERION = MatchCriterion()
