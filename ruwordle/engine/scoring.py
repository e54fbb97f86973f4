"""
Letter-frequency scoring and ranking of candidate words.

Policy:
  - score(word) = sum of table[letter] over every letter occurrence
    (repeated letters count once per occurrence; unknown letters weigh 0)
  - order: score descending, then word ascending (code point order)
  - truncate to `limit`; limit <= 0 means "no results"

Scores are computed in bulk with numpy from a (words x alphabet) letter
count matrix. Each row is reduced in the same alphabet order, so anagrams
get bit-identical scores and fall through to the alphabetical tie-break.
"""

from __future__ import annotations

from collections import Counter
from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, NamedTuple

import numpy as np

# Letter frequencies of Russian prose, in percent.
RUSSIAN_LETTER_PERCENT = {
    "о": 10.97, "е": 8.45, "а": 8.01, "и": 7.35, "н": 6.70, "т": 6.26,
    "с": 5.47, "л": 4.97, "в": 4.53, "р": 4.40, "к": 3.49, "м": 3.21,
    "д": 2.98, "п": 2.81, "ы": 2.10, "у": 2.08, "б": 1.92, "я": 1.79,
    "ь": 1.74, "г": 1.70, "з": 1.65, "ч": 1.44, "й": 1.21, "ж": 1.01,
    "х": 0.95, "ш": 0.72, "ю": 0.49, "ц": 0.48, "э": 0.32, "щ": 0.31,
    "ф": 0.26, "ъ": 0.04,
}


class ScoredCandidate(NamedTuple):
    word: str
    score: float


class FrequencyTable(Mapping[str, float]):
    """
    Read-only letter -> weight mapping, weights in (0, 1].

    Build it once (e.g. at process start) and pass it to the scorer;
    nothing in the engine keeps a global copy.
    """

    def __init__(self, weights: Mapping[str, float]):
        for letter, w in weights.items():
            if not 0.0 < float(w) <= 1.0:
                raise ValueError(f"Weight for {letter!r} must be in (0, 1]; got {w}")
        self._weights = MappingProxyType({k: float(v) for k, v in weights.items()})
        self._letters = tuple(sorted(self._weights))
        self._index = {ch: j for j, ch in enumerate(self._letters)}
        self._vector = np.array([self._weights[ch] for ch in self._letters], dtype=float)
        self._vector.setflags(write=False)

    @classmethod
    def russian(cls) -> "FrequencyTable":
        """Standard Russian letter frequencies (percent / 100)."""
        return cls({ch: pct / 100.0 for ch, pct in RUSSIAN_LETTER_PERCENT.items()})

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "FrequencyTable":
        """
        Weights from a word set: in how many words each letter occurs
        (once per word), scaled so the most common letter weighs 1.0.
        """
        counts: Counter[str] = Counter()
        for w in words:
            counts.update(set(w))
        if not counts:
            return cls({})
        top = max(counts.values())
        return cls({ch: n / top for ch, n in counts.items()})

    def __getitem__(self, letter: str) -> float:
        return self._weights[letter]

    def __iter__(self) -> Iterator[str]:
        return iter(self._weights)

    def __len__(self) -> int:
        return len(self._weights)

    def __repr__(self) -> str:
        return f"FrequencyTable({len(self)} letters)"

    def letter_counts(self, words: List[str]) -> np.ndarray:
        """(len(words), len(table)) matrix of letter occurrences; unknown letters skipped."""
        counts = np.zeros((len(words), len(self._letters)), dtype=float)
        for r, w in enumerate(words):
            for ch in w:
                j = self._index.get(ch)
                if j is not None:
                    counts[r, j] += 1
        return counts

    def scores(self, words: List[str]) -> np.ndarray:
        return (self.letter_counts(words) * self._vector).sum(axis=1)


def score_word(word: str, table: FrequencyTable) -> float:
    return float(table.scores([word])[0])


def rank_candidates(candidates: Iterable[str], table: FrequencyTable,
                    limit: int) -> List[ScoredCandidate]:
    """
    Score every distinct candidate and return the top `limit`.

    Returns [] for limit <= 0 or an empty candidate set.
    """
    if limit <= 0:
        return []
    words = list(dict.fromkeys(candidates))
    if not words:
        return []

    scores = table.scores(words)
    # np.lexsort: last key is primary
    order = np.lexsort((np.array(words), -scores))
    return [ScoredCandidate(words[k], float(scores[k])) for k in order[:limit]]
