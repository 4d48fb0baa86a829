from __future__ import annotations

from typing import Iterable, List, Optional
from unittest.mock import AsyncMock

from node_ps.process_wrapper_helpers.process_models import ProcessRecord


def create_lister_mock(records: Iterable[ProcessRecord]):
    lister = AsyncMock()
    lister.list_processes = AsyncMock(return_value=list(records))
    return lister


def create_tree_killer_mock(side_effect: Optional[BaseException] = None):
    killer = AsyncMock()
    killer.kill_tree = AsyncMock(return_value=None, side_effect=side_effect)
    return killer


def node_record(cmd: str, pid: Optional[str] = "1234", name: str = "SubstratumNode") -> ProcessRecord:
    return ProcessRecord(name=name, cmd=cmd, pid=pid)


UNPACKAGED_CMD = "users/SubstratumNode --dns_servers 8.8.8.8"
POSIX_CMD = "users/static/binaries/SubstratumNode --dns_servers 8.8.8.8"
WINDOWS_CMD = "users\\static\\binaries\\SubstratumNode --dns_servers 8.8.8.8"


def records_of(*cmds: str) -> List[ProcessRecord]:
    return [node_record(cmd, pid=str(1000 + index)) for index, cmd in enumerate(cmds)]
