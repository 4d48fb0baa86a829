"""Helpers backing :mod:`node_ps.process_wrapper`."""

from .collaborators import FixedPathSeparator, OsPathSeparator, PathSeparatorSource, ProcessLister, TreeKiller
from .process_matcher import filter_matching, matches
from .process_models import NODE_MATCH_CRITERION, MatchCriterion, ProcessRecord

__all__ = [
    "FixedPathSeparator",
    "MatchCriterion",
    "NODE_MATCH_CRITERION",
    "OsPathSeparator",
    "PathSeparatorSource",
    "ProcessLister",
    "ProcessRecord",
    "TreeKiller",
    "filter_matching",
    "matches",
]
