"""
Pattern/reject parsing.

Given:
  - a pattern such as "*о*т*" or "_о*т*" (letters fixed at their index,
    '*' for an unknown position, '_X' for "unknown here, and X is not in
    the word at all")
  - a comma-separated reject list such as "е, и"

Return:
  - a Constraint: word length, fixed letters by 0-based position and the
    set of letters excluded from the whole word.

Parsing is deliberately permissive. The tool only suggests words, so
anything it cannot make sense of becomes a wildcard or is dropped; nothing
here raises on user input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Set

from .alphabet import fold_letter, fold_reject, is_cyrillic_letter

WILDCARD = "*"
INLINE_EXCLUDE = "_"
REJECT_DELIMITER = ","


@dataclass(frozen=True)
class Constraint:
    """
    Everything known about the hidden word.

    A letter fixed somewhere is never also excluded: the exclusion is dropped
    on construction so the two fields cannot contradict each other.
    """
    word_length: int
    fixed: Mapping[int, str] = field(default_factory=dict)
    excluded: FrozenSet[str] = frozenset()

    def __post_init__(self):
        fixed = MappingProxyType(dict(self.fixed))
        excluded = frozenset(self.excluded) - set(fixed.values())
        object.__setattr__(self, "fixed", fixed)
        object.__setattr__(self, "excluded", excluded)

    @property
    def wildcards(self) -> List[int]:
        return [i for i in range(self.word_length) if i not in self.fixed]

    @property
    def pattern(self) -> str:
        """Canonical pattern text, e.g. '*о*т*' (inline exclusions collapsed)."""
        return "".join(self.fixed.get(i, WILDCARD) for i in range(self.word_length))


def split_rejects(rejects: Optional[str]) -> List[str]:
    """
    Split a reject list on ',' and keep entries that are exactly one
    Cyrillic letter after normalisation (Latin e/o count as Cyrillic).
    Order is preserved, duplicates kept.

      split_rejects("е, И ,ё,xy,,7") -> ['е', 'и', 'е']
    """
    out: List[str] = []
    for entry in (rejects or "").split(REJECT_DELIMITER):
        entry = entry.strip()
        if len(entry) != 1:
            continue
        letter = fold_reject(entry)
        if is_cyrillic_letter(letter):
            out.append(letter)
    return out


def parse_constraint(pattern: Optional[str], rejects: Optional[str] = "") -> Constraint:
    """
    Build a Constraint from raw pattern and reject text.

    Each position unit of the pattern is one of:
      - a letter           -> fixed at that index
      - '*'                -> wildcard
      - '_' + letter       -> wildcard, letter excluded (ONE unit, not two)
      - anything else      -> wildcard
    Whitespace is ignored.

    Examples:
      parse_constraint("*о*т*", "е,и") -> length 5, fixed {1: 'о', 3: 'т'}, excluded {'е', 'и'}
      parse_constraint("_о*т*")        -> length 4, fixed {2: 'т'},         excluded {'о'}
    """
    chars = [ch for ch in (pattern or "") if not ch.isspace()]

    fixed: Dict[int, str] = {}
    excluded: Set[str] = set()
    pos = 0
    i = 0
    while i < len(chars):
        ch = chars[i]

        if ch == INLINE_EXCLUDE and i + 1 < len(chars):
            nxt = fold_letter(chars[i + 1])
            if is_cyrillic_letter(nxt):
                excluded.add(nxt)
                pos += 1
                i += 2
                continue

        letter = fold_letter(ch)
        if is_cyrillic_letter(letter):
            fixed[pos] = letter
        pos += 1
        i += 1

    excluded.update(split_rejects(rejects))
    return Constraint(word_length=pos, fixed=fixed, excluded=frozenset(excluded))


def merge_constraints(constraints: Iterable[Constraint]) -> Optional[Constraint]:
    """
    Combine what several patterns say about the same word: fixed letters are
    pooled, exclusions unioned.

    Returns None when the patterns cannot all hold at once (different
    lengths, or two different letters fixed at one position). That is an
    empty answer, not an error.
    """
    constraints = list(constraints)
    if not constraints:
        return None

    length = constraints[0].word_length
    fixed: Dict[int, str] = {}
    excluded: Set[str] = set()
    for c in constraints:
        if c.word_length != length:
            return None
        for i, ch in c.fixed.items():
            if fixed.setdefault(i, ch) != ch:
                return None
        excluded |= c.excluded

    return Constraint(word_length=length, fixed=fixed, excluded=frozenset(excluded))


def parse_patterns(patterns: Sequence[str], rejects: Optional[str] = "") -> Optional[Constraint]:
    """
    parse_constraint for one or more patterns describing the same word
    (e.g. one per guess row), merged with merge_constraints.

      parse_patterns(["*о***", "***т*"], "е") -> fixed {1: 'о', 3: 'т'}, excluded {'е'}
      parse_patterns(["*о***", "*а***"])      -> None
    """
    return merge_constraints(parse_constraint(p, rejects) for p in (patterns or [""]))
