"""
End-to-end suggestion pipeline:

    raw pattern(s) + rejects -> Constraint -> CandidateQuery
        -> one corpus lookup -> scored, ordered, truncated list

This is the only entry point front-ends need. It does no I/O of its own;
the corpus and the frequency table are handed in by the caller.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Union

from .constraints import parse_patterns
from .query import build_query, fetch_candidates
from .scoring import FrequencyTable, ScoredCandidate, rank_candidates

log = logging.getLogger(__name__)

# A fixed table, or a function building one from the matching candidates
# (e.g. FrequencyTable.from_words).
TableSource = Union[FrequencyTable, Callable[[List[str]], FrequencyTable]]


def rank(
        pattern: Union[str, Sequence[str]],
        rejects: str,
        limit: int,
        *,
        corpus,
        table: Optional[TableSource] = None,
) -> List[ScoredCandidate]:
    """
    Suggest up to `limit` words consistent with `pattern` and `rejects`.

    Args:
      pattern : e.g. "*о*т*" or "_о*т*", or several patterns for the same
                word, all of which must hold
      rejects : comma-separated letters known to be absent, e.g. "е,и"
      limit   : maximum number of suggestions (<= 0 -> [])
      corpus  : object with lookup(length, fixed, excluded) -> words
      table   : letter weights, or a callable candidates -> weights;
                defaults to FrequencyTable.russian()

    Returns [] without a lookup when the patterns contradict each other.

    Raises:
      CorpusError if the corpus cannot be read. Nothing else is fatal.
    """
    patterns = [pattern] if isinstance(pattern, str) else list(pattern)
    constraint = parse_patterns(patterns, rejects)
    log.debug("patterns=%r rejects=%r -> %s", patterns, rejects, constraint)
    if constraint is None:
        return []

    candidates = fetch_candidates(build_query(constraint), corpus)

    if table is None:
        table = FrequencyTable.russian()
    elif not isinstance(table, FrequencyTable):
        table = table(candidates)
    return rank_candidates(candidates, table, limit)
