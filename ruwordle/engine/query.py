"""
Constraint -> corpus selection.

A CandidateQuery carries the three things a word corpus needs to know:
length, fixed letters by position, letters that must not occur anywhere.
It can be evaluated two ways, and both must agree:

  - `matches(word)`: in-process predicate (used by MemoryCorpus and tests)
  - `to_sql()`     : a parameterised SQLite SELECT (used by SqliteCorpus)

Both compare on the 'ё'-folded word and reject anything that is not a
plain lower-case Cyrillic word.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, List, Mapping, Tuple

from .alphabet import fold_word, is_well_formed
from .constraints import Constraint

log = logging.getLogger(__name__)

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def sql_identifier(name: str) -> str:
    """Return `name` if it is a plain SQL identifier, else raise ValueError."""
    if not _IDENTIFIER_RE.fullmatch(name):
        raise ValueError(f"Invalid SQL identifier: {name!r}")
    return name


@dataclass(frozen=True)
class CandidateQuery:
    length: int
    fixed: Mapping[int, str] = field(default_factory=dict)
    excluded: FrozenSet[str] = frozenset()

    def __post_init__(self):
        object.__setattr__(self, "fixed", MappingProxyType(dict(self.fixed)))
        object.__setattr__(self, "excluded", frozenset(self.excluded))

    def matches(self, word: str) -> bool:
        """True if `word` satisfies length, positions and global exclusions."""
        if not is_well_formed(word):
            return False
        w = fold_word(word)
        if len(w) != self.length:
            return False
        for i, ch in self.fixed.items():
            if w[i] != ch:
                return False
        return not any(ch in w for ch in self.excluded)

    def to_sql(self, table: str = "words", column: str = "word") -> Tuple[str, List]:
        """
        Render as (sql, params) for sqlite3. Letters and positions are bound
        parameters; only the table/column identifiers are spliced in, and
        those are checked against a strict identifier pattern.

        SUBSTR is 1-based in SQLite; positions are shifted accordingly.
        """
        table, column = sql_identifier(table), sql_identifier(column)
        word = f"w.{column}"
        folded = f"REPLACE({word}, 'ё', 'е')"

        clauses = [
            f"LENGTH({word}) = ?",
            # lower-case Cyrillic only: no proper nouns, hyphens or dots
            f"{word} GLOB '[а-яё]*'",
            f"{word} NOT GLOB '*[^а-яё]*'",
        ]
        params: List = [self.length]

        for i, ch in sorted(self.fixed.items()):
            clauses.append(f"SUBSTR({folded}, ?, 1) = ?")
            params += [i + 1, ch]

        for ch in sorted(self.excluded):
            clauses.append(f"INSTR({folded}, ?) = 0")
            params.append(ch)

        sql = f"SELECT {word} FROM {table} w WHERE " + " AND ".join(clauses)
        return sql, params


def build_query(constraint: Constraint) -> CandidateQuery:
    return CandidateQuery(
        length=constraint.word_length,
        fixed=constraint.fixed,
        excluded=constraint.excluded,
    )


def fetch_candidates(query: CandidateQuery, corpus) -> List[str]:
    """
    Issue the single corpus lookup for `query`.

    Returns distinct, 'ё'-folded words in the order the corpus produced
    them. An empty list is a normal outcome. Corpus failures (CorpusError)
    are not caught here.
    """
    words = corpus.lookup(query.length, dict(query.fixed), set(query.excluded))
    out = list(dict.fromkeys(fold_word(w) for w in words))
    log.debug("lookup(length=%d, fixed=%s, excluded=%s) -> %d candidate(s)",
              query.length, dict(query.fixed), sorted(query.excluded), len(out))
    return out
