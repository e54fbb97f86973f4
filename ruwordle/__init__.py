"""Ranked word suggestions for Russian Wordle ("5 букв")."""

from .engine import rank, parse_constraint, FrequencyTable, ScoredCandidate
from .corpus import CorpusError

__version__ = "0.1.0"

__all__ = ["rank", "parse_constraint", "FrequencyTable", "ScoredCandidate", "CorpusError"]
