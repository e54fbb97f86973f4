from __future__ import annotations
from typing import Dict, Iterable, List, Mapping, Set, Type

from ruwordle.datasets.io import read_words
from ruwordle.engine.query import CandidateQuery

# ---- Global corpus registry ----
REGISTRY: Dict[str, Type["BaseCorpus"]] = {}


class CorpusError(RuntimeError):
    """
    The word corpus could not be read (missing file, corrupt database, ...).

    This is the one fatal condition in the pipeline. "No word fits" is an
    empty result, never a CorpusError.
    """


def register(cls: Type["BaseCorpus"]) -> Type["BaseCorpus"]:
    """
    Decorator: make a word source selectable by name.

    The class `id` is the value users pass to `ruwordle --corpus` and to
    open_corpus() ("sqlite" for a word database, "wordlist" for a text file),
    so it must be set and unique.
    """
    cid = getattr(cls, "id", None)
    if not cid:
        raise ValueError(f"Word source {cls.__name__} needs an `id` to be selectable by --corpus")
    if cid in REGISTRY:
        raise ValueError(
            f"--corpus {cid!r} is already served by {REGISTRY[cid].__name__}; "
            f"pick another id for {cls.__name__}")
    REGISTRY[cid] = cls
    return cls


# ---- Base class that corpora inherit ----
class BaseCorpus:
    id = "base"
    name = "Base"

    @classmethod
    def open(cls, path: str) -> "BaseCorpus":
        raise NotImplementedError("Override in subclass")

    def lookup(self, length: int, fixed: Mapping[int, str],
               excluded: Set[str]) -> List[str]:
        """
        All words of `length` letters with fixed[i] at position i and none of
        `excluded` anywhere. Order is unspecified.
        """
        raise NotImplementedError("Override in subclass")

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


@register
class MemoryCorpus(BaseCorpus):
    """A word list held in memory; one word per line when read from a file."""
    id = "wordlist"
    name = "Plain word list"

    def __init__(self, words: Iterable[str]):
        self.words: List[str] = [w.strip() for w in words if w.strip()]

    @classmethod
    def open(cls, path: str) -> "MemoryCorpus":
        try:
            return cls(read_words(path))
        except (OSError, UnicodeDecodeError) as e:
            raise CorpusError(f"Cannot read word list {path}: {e}") from e

    def lookup(self, length, fixed, excluded):
        q = CandidateQuery(length, fixed, excluded)
        return [w for w in self.words if q.matches(w)]
