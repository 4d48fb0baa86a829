"""Terminate a process tree with graceful shutdown then force kill."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, List, Optional, Set

import psutil

from ..config.settings import FORCE_KILL_TIMEOUT_SECONDS, GRACEFUL_SHUTDOWN_TIMEOUT_SECONDS
from ..errors import Pid, ProcessNotFoundError, ProcessTerminationError

logger = logging.getLogger(__name__)


def _coerce_pid(pid: Pid) -> int:
    try:
        return int(pid)
    except (TypeError, ValueError) as exc:
        raise ProcessTerminationError(pid, f"Invalid pid {pid!r}") from exc


class PsutilTreeKiller:
    """
    Kill a process and every descendant using psutil.

    Descendants are collected before anything is signalled so that children
    re-parented to init after the root exits are still reached. Every process
    in the tree is signalled even when some of them refuse; refusals are
    reported against the root pid once the tree has had its chance to exit.

    When ``root_filter`` is given it receives the root's current command line
    and must accept it, otherwise the pid is treated as reused by an unrelated
    process and the target is reported as gone.
    """

    def __init__(
        self,
        *,
        graceful_timeout: float = GRACEFUL_SHUTDOWN_TIMEOUT_SECONDS,
        force_timeout: float = FORCE_KILL_TIMEOUT_SECONDS,
        console_output_func: Optional[Callable[[str], Any]] = None,
        root_filter: Optional[Callable[[str], bool]] = None,
    ) -> None:
        self.graceful_timeout = graceful_timeout
        self.force_timeout = force_timeout
        self._console = console_output_func or (lambda message: None)
        self._root_filter = root_filter

    async def kill_tree(self, pid: Pid) -> None:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self.terminate_tree, pid)

    def terminate_tree(self, pid: Pid) -> None:
        """
        Synchronously terminate the tree rooted at *pid*.

        Raises:
            ProcessNotFoundError: If *pid* does not exist or now belongs to another program
            ProcessTerminationError: If access is denied or processes persist after SIGKILL
        """
        root = self._open_root(pid)
        tree = self._collect_tree(root, pid)

        self._console(f"🔪 Killing node process tree (PID {pid}, {len(tree) - 1} descendants)")
        denied = self._signal_all(tree, pid, force=False)

        _, alive = psutil.wait_procs(tree, timeout=self.graceful_timeout)
        if not alive:
            self._console(f"✅ Process {pid} terminated gracefully")
            return

        self._console(f"⏱️ Process tree {pid} did not terminate within {self.graceful_timeout}s; sending SIGKILL")
        denied |= self._signal_all(alive, pid, force=True)

        _, survivors = psutil.wait_procs(alive, timeout=self.force_timeout)
        if not survivors:
            self._console(f"✅ Process {pid} force killed")
            return

        surviving_pids = [proc.pid for proc in survivors]
        if denied.intersection(surviving_pids):
            raise ProcessTerminationError.access_denied(pid, sorted(denied.intersection(surviving_pids)))
        raise ProcessTerminationError.survived_kill(pid, surviving_pids, self.force_timeout)

    def _open_root(self, pid: Pid) -> psutil.Process:
        try:
            root = psutil.Process(_coerce_pid(pid))
            if self._root_filter is not None:
                cmd = " ".join(root.cmdline())
                if not self._root_filter(cmd):
                    logger.warning("PID %s now runs %r; refusing to kill an unrelated process", pid, cmd)
                    raise ProcessNotFoundError(pid)
        except psutil.NoSuchProcess as exc:
            raise ProcessNotFoundError(pid) from exc
        except psutil.AccessDenied as exc:
            raise ProcessTerminationError.access_denied(pid) from exc
        return root

    def _collect_tree(self, root: psutil.Process, pid: Pid) -> List[psutil.Process]:
        try:
            children = root.children(recursive=True)
        except psutil.NoSuchProcess as exc:
            raise ProcessNotFoundError(pid) from exc
        except psutil.AccessDenied as exc:
            raise ProcessTerminationError.access_denied(pid) from exc
        return [*children, root]

    def _signal_all(self, processes: List[psutil.Process], root_pid: Pid, *, force: bool) -> Set[int]:
        """Signal every process; return the pids that refused."""
        denied: Set[int] = set()
        for proc in processes:
            try:
                if force:
                    proc.kill()
                else:
                    proc.terminate()
            except psutil.NoSuchProcess:
                logger.debug("Process %s in tree %s exited before it was signalled", proc.pid, root_pid)
            except psutil.AccessDenied:
                logger.warning("Access denied signalling process %s in tree %s", proc.pid, root_pid)
                denied.add(proc.pid)
        return denied
