"""Locate and terminate the packaged SubstratumNode process."""

from .errors import NodeProcessError, ProcessEnumerationError, ProcessNotFoundError, ProcessTerminationError
from .process_wrapper import (
    NodeProcessWrapper,
    find_node_process,
    find_node_process_sync,
    kill_node_process,
    kill_node_process_sync,
)
from .process_wrapper_helpers.process_models import NODE_MATCH_CRITERION, MatchCriterion, ProcessRecord

__all__ = [
    "MatchCriterion",
    "NODE_MATCH_CRITERION",
    "NodeProcessError",
    "NodeProcessWrapper",
    "ProcessEnumerationError",
    "ProcessNotFoundError",
    "ProcessRecord",
    "ProcessTerminationError",
    "find_node_process",
    "find_node_process_sync",
    "kill_node_process",
    "kill_node_process_sync",
]
