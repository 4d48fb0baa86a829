"""Enumerate host processes with psutil."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, List

import psutil

from ..errors import ProcessEnumerationError
from .process_models import ProcessRecord

logger = logging.getLogger(__name__)

_PROCESS_ATTRS = ["pid", "name", "cmdline"]


def _record_from_info(info: dict[str, Any]) -> ProcessRecord:
    name_value = info.get("name")
    name = "" if name_value is None else str(name_value)

    cmdline_value = info.get("cmdline")
    cmd = ""
    if isinstance(cmdline_value, list):
        cmd = " ".join(str(arg) for arg in cmdline_value)

    return ProcessRecord(name=name, cmd=cmd, pid=info.get("pid"))


class PsutilProcessLister:
    """Lists processes via ``psutil.process_iter`` off the event loop."""

    def scan(self) -> List[ProcessRecord]:
        """Synchronously snapshot the process table.

        Raises:
            ProcessEnumerationError: If psutil cannot iterate the process table
        """
        start_time = time.time()
        records: List[ProcessRecord] = []
        try:
            for proc in psutil.process_iter(_PROCESS_ATTRS):
                try:
                    records.append(_record_from_info(proc.info))
                except (psutil.NoSuchProcess, psutil.AccessDenied):
                    continue
        except (psutil.Error, OSError) as exc:
            raise ProcessEnumerationError(f"Failed to enumerate host processes: {exc}") from exc

        logger.debug("Process scan completed in %.3fs, found %d processes", time.time() - start_time, len(records))
        return records

    async def list_processes(self) -> List[ProcessRecord]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.scan)
