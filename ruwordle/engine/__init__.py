from .constraints import Constraint, merge_constraints, parse_constraint, parse_patterns, split_rejects
from .query import CandidateQuery, build_query, fetch_candidates
from .scoring import FrequencyTable, ScoredCandidate, score_word, rank_candidates
from .ranking import rank

__all__ = [
    "Constraint", "merge_constraints", "parse_constraint", "parse_patterns", "split_rejects",
    "CandidateQuery", "build_query", "fetch_candidates",
    "FrequencyTable", "ScoredCandidate", "score_word", "rank_candidates",
    "rank",
]
