"""
SQLite word database.

Layout (one table, one column):
    CREATE TABLE words (word TEXT NOT NULL)

The database may hold anything a dictionary dump contains (capitalised
names, hyphenated compounds, abbreviations); the query generated by
CandidateQuery.to_sql() keeps only plain lower-case Cyrillic words.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Iterable, List

from tqdm import tqdm

from ruwordle.engine.query import CandidateQuery, sql_identifier
from .base import BaseCorpus, CorpusError, register

log = logging.getLogger(__name__)

INSERT_BATCH = 5000


@register
class SqliteCorpus(BaseCorpus):
    id = "sqlite"
    name = "SQLite word database"

    def __init__(self, conn: sqlite3.Connection, *, table: str = "words", column: str = "word"):
        self.conn = conn
        self.table = table
        self.column = column

    @classmethod
    def open(cls, path: str, **kwargs) -> "SqliteCorpus":
        """Open an existing database read-only. A missing file is a CorpusError."""
        p = Path(path)
        if not p.is_file():
            raise CorpusError(f"Word database not found: {path}")
        try:
            conn = sqlite3.connect(p.resolve().as_uri() + "?mode=ro", uri=True)
        except sqlite3.Error as e:
            raise CorpusError(f"Cannot open word database {path}: {e}") from e
        return cls(conn, **kwargs)

    def lookup(self, length, fixed, excluded) -> List[str]:
        sql, params = CandidateQuery(length, fixed, excluded).to_sql(self.table, self.column)
        log.debug("%s %s", sql, params)
        try:
            rows = self.conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            raise CorpusError(f"Word database query failed: {e}") from e
        return [r[0] for r in rows]

    def close(self) -> None:
        self.conn.close()


def create_database(path: str, words: Iterable[str], *, table: str = "words",
                    progress: bool = False) -> int:
    """
    Create (or extend) a word database at `path` and insert each distinct
    non-blank word once. Returns the number of rows inserted.
    """
    table = sql_identifier(table)
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    distinct = list(dict.fromkeys(w.strip() for w in words if w.strip()))

    conn = sqlite3.connect(str(p))
    try:
        with conn:
            conn.execute(f"CREATE TABLE IF NOT EXISTS {table} (word TEXT NOT NULL)")
            batches = range(0, len(distinct), INSERT_BATCH)
            if progress:
                batches = tqdm(batches, ncols=80, desc="Loading", unit="batch")
            for start in batches:
                chunk = distinct[start:start + INSERT_BATCH]
                conn.executemany(f"INSERT INTO {table} (word) VALUES (?)",
                                 [(w,) for w in chunk])
    finally:
        conn.close()

    log.info("Wrote %d word(s) to %s", len(distinct), p)
    return len(distinct)
