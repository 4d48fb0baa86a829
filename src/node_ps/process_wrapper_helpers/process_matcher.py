"""Match process records against the packaged node binary path."""

from __future__ import annotations

import logging
from typing import Iterable, List

from .process_models import NODE_MATCH_CRITERION, MatchCriterion, ProcessRecord

logger = logging.getLogger(__name__)


def _validate_separator(separator: str) -> None:
    if not isinstance(separator, str) or len(separator) != 1:
        raise ValueError(f"Path separator must be a single character (got {separator!r})")


def matches(record: ProcessRecord, separator: str, criterion: MatchCriterion = NODE_MATCH_CRITERION) -> bool:
    """
    Return True when *record* was launched from ``static/binaries/<executable>``.

    The fragment is built with *separator* verbatim; separators inside the
    command line are not normalized, so a Windows-style command never matches
    under ``/`` and vice versa.

    Raises:
        ValueError: If *separator* is not exactly one character
    """
    _validate_separator(separator)
    if not record.cmd:
        return False
    return criterion.fragment(separator) in record.cmd


def filter_matching(
    records: Iterable[ProcessRecord],
    separator: str,
    criterion: MatchCriterion = NODE_MATCH_CRITERION,
) -> List[ProcessRecord]:
    """Return the records that match, preserving enumeration order."""
    _validate_separator(separator)
    matched = [record for record in records if matches(record, separator, criterion)]
    logger.debug(
        "Matched %d %s process(es) using fragment %r",
        len(matched),
        criterion.executable_name,
        criterion.fragment(separator),
    )
    return matched
