"""
Node Process Wrapper

Locates the SubstratumNode process that was launched from its packaged
``static/binaries`` location and terminates its process tree on request.
Developer builds run from other paths are never matched.

Usage:
    from node_ps.process_wrapper import find_node_process, kill_node_process

    running = await find_node_process()
    if running:
        await kill_node_process()
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, List, Optional, Union

from .config import WrapperSettings
from .errors import Pid, ProcessNotFoundError
from .process_wrapper_helpers.collaborators import OsPathSeparator, PathSeparatorSource, ProcessLister, TreeKiller
from .process_wrapper_helpers.process_matcher import filter_matching, matches
from .process_wrapper_helpers.process_models import NODE_MATCH_CRITERION, MatchCriterion, ProcessRecord

logger = logging.getLogger(__name__)

MatchCallback = Callable[[List[ProcessRecord]], Union[Awaitable[Any], Any]]


def _console(message: str, *, suppress_output: bool) -> None:
    """Emit console output unless suppressed."""
    if not suppress_output:
        print(message)


class NodeProcessWrapper:
    """Find or kill the packaged node process through injected collaborators."""

    def __init__(
        self,
        lister: Optional[ProcessLister] = None,
        tree_killer: Optional[TreeKiller] = None,
        separator_source: Optional[PathSeparatorSource] = None,
        *,
        settings: Optional[WrapperSettings] = None,
        criterion: MatchCriterion = NODE_MATCH_CRITERION,
    ) -> None:
        self.settings = settings or WrapperSettings()
        self.criterion = criterion
        self._separator_source = separator_source or OsPathSeparator()
        if lister is None:
            from .process_wrapper_helpers.process_lister import PsutilProcessLister

            lister = PsutilProcessLister()
        if tree_killer is None:
            from .process_wrapper_helpers.tree_killer import PsutilTreeKiller

            tree_killer = PsutilTreeKiller(
                graceful_timeout=self.settings.graceful_timeout_seconds,
                force_timeout=self.settings.force_timeout_seconds,
                console_output_func=self._console,
                root_filter=self.is_node_command,
            )
        self._lister = lister
        self._tree_killer = tree_killer

    def _console(self, message: str) -> None:
        _console(message, suppress_output=self.settings.suppress_console_output)

    def is_node_command(self, cmd: str) -> bool:
        """Return True when *cmd* launches the packaged node under the current separator."""
        record = ProcessRecord(name=self.criterion.executable_name, cmd=cmd)
        return matches(record, self._separator_source.get_separator(), self.criterion)

    async def _matching_processes(self) -> List[ProcessRecord]:
        records = await self._lister.list_processes()
        separator = self._separator_source.get_separator()
        return filter_matching(records, separator, self.criterion)

    async def find_node_process(self, callback: Optional[MatchCallback] = None) -> List[ProcessRecord]:
        """
        Return the node processes running from the packaged binary location.

        Args:
            callback: Optional callable invoked exactly once with the matches.
                      Awaitable results are awaited.

        Returns:
            Matching records in enumeration order; empty when none are running

        Raises:
            ProcessEnumerationError: If the process list cannot be read
        """
        matching = await self._matching_processes()
        logger.debug("Found %d %s process(es)", len(matching), self.criterion.executable_name)
        if callback is not None:
            result = callback(matching)
            if inspect.isawaitable(result):
                await result
        return matching

    async def kill_node_process(self) -> Optional[Pid]:
        """
        Kill the process tree of the first matching node process.

        Only the first match in enumeration order is targeted; any further
        matches are left running.

        Returns:
            The pid that was terminated, or None when nothing was running or the
            target exited before it could be killed

        Raises:
            ProcessEnumerationError: If the process list cannot be read
            ProcessTerminationError: If the tree cannot be terminated
        """
        matching = await self._matching_processes()
        if not matching:
            self._console(f"No {self.criterion.executable_name} processes found")
            return None

        target = matching[0]
        if len(matching) > 1:
            logger.warning(
                "Found %d %s processes; killing only PID %s",
                len(matching),
                self.criterion.executable_name,
                target.pid,
            )

        try:
            await self._tree_killer.kill_tree(target.pid)
        except ProcessNotFoundError:
            logger.warning("%s process %s exited before it could be killed", self.criterion.executable_name, target.pid)
            return None

        logger.info("Killed %s process tree rooted at PID %s", self.criterion.executable_name, target.pid)
        return target.pid


_default_wrapper: NodeProcessWrapper | None = None


def _get_default_wrapper() -> NodeProcessWrapper:
    """Get or initialize the process-wide wrapper backed by psutil."""
    global _default_wrapper
    if _default_wrapper is None:
        _default_wrapper = NodeProcessWrapper()
    return _default_wrapper


async def find_node_process(callback: Optional[MatchCallback] = None) -> List[ProcessRecord]:
    """Find node processes using the default psutil-backed wrapper."""
    return await _get_default_wrapper().find_node_process(callback)


async def kill_node_process() -> Optional[Pid]:
    """Kill the first node process using the default psutil-backed wrapper."""
    return await _get_default_wrapper().kill_node_process()


def _ensure_no_running_loop(func_name: str) -> None:
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        # No loop in this thread; safe to start one
        loop = None

    if loop is not None and loop.is_running():
        raise RuntimeError(f"{func_name} cannot run inside an active event loop. " "Use the async API instead.")


def find_node_process_sync(callback: Optional[MatchCallback] = None) -> List[ProcessRecord]:
    """Synchronously find node processes.

    Intended for callers that do not run an event loop of their own.

    Raises:
        RuntimeError: If called while an event loop is already running.
    """
    _ensure_no_running_loop("find_node_process_sync")
    return asyncio.run(find_node_process(callback))


def kill_node_process_sync() -> Optional[Pid]:
    """Synchronously kill the first node process.

    Raises:
        RuntimeError: If called while an event loop is already running.
    """
    _ensure_no_running_loop("kill_node_process_sync")
    return asyncio.run(kill_node_process())


__all__ = [
    "NodeProcessWrapper",
    "find_node_process",
    "find_node_process_sync",
    "kill_node_process",
    "kill_node_process_sync",
]
