from __future__ import annotations
from typing import List
from .base import BaseCorpus, CorpusError, MemoryCorpus, REGISTRY, register
from .sqlite import SqliteCorpus, create_database


def open_corpus(corpus_id: str, path: str) -> BaseCorpus:
    """
    Factory: open a registered corpus kind ("sqlite", "wordlist") at `path`.
    """
    try:
        cls = REGISTRY[corpus_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown corpus id: {corpus_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls.open(path)


def get_corpus_ids() -> List[str]:
    """
    Return all registered corpus ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseCorpus", "CorpusError", "MemoryCorpus", "SqliteCorpus",
    "create_database", "open_corpus", "get_corpus_ids", "register",
]
