import pytest
from ruwordle import CorpusError, FrequencyTable, rank
from ruwordle.corpus import MemoryCorpus, SqliteCorpus, create_database
from ruwordle.engine import parse_constraint

WORDS = [
    "мирно", "слово", "тесто", "кубик", "зонта", "нотка", "хобот",
    "котда", "гром", "привет", "Слово", "ёлочка",
]


@pytest.fixture
def corpus():
    return MemoryCorpus(WORDS)


def test_scenario_fixed_positions_and_rejects(corpus):
    ranked = rank("*о*т*", "е,и", 3, corpus=corpus)
    assert [r.word for r in ranked] == ["зонта"]
    assert ranked[0].score == pytest.approx(0.3359)


def test_scenario_all_wildcards(corpus):
    ranked = rank("*****", "", 5, corpus=corpus)
    assert [r.word for r in ranked] == ["тесто", "слово", "нотка", "зонта", "мирно"]


def test_monotonic_truncation(corpus):
    full = rank("*****", "", 100, corpus=corpus)
    assert len(full) == 8
    for k in range(0, len(full) + 2):
        assert rank("*****", "", k, corpus=corpus) == rank("*****", "", k + 1, corpus=corpus)[:k]


@pytest.mark.parametrize("pattern,rejects", [
    ("*****", "о"),
    ("*о***", "т"),
    ("_к****", ""),
    ("**с**", "а,и"),
])
def test_results_respect_constraint(corpus, pattern, rejects):
    c = parse_constraint(pattern, rejects)
    for word, _ in rank(pattern, rejects, 50, corpus=corpus):
        assert len(word) == c.word_length
        assert all(word[i] == ch for i, ch in c.fixed.items())
        assert not any(ch in word for ch in c.excluded)


def test_self_contradiction_does_not_fail(corpus):
    ranked = rank("*о*т*", "о", 10, corpus=corpus)
    assert [r.word for r in ranked] == ["зонта"]


def test_no_candidates_is_empty(corpus):
    assert rank("щщщщщ", "", 5, corpus=corpus) == []


@pytest.mark.parametrize("limit", [0, -1])
def test_invalid_limit_returns_nothing(corpus, limit):
    assert rank("*****", "", limit, corpus=corpus) == []


def test_custom_table_changes_order(corpus):
    table = FrequencyTable({"к": 1.0})
    ranked = rank("*****", "", 2, corpus=corpus, table=table)
    assert [r.word for r in ranked] == ["кубик", "котда"]
    assert [r.score for r in ranked] == [2.0, 1.0]


def test_corpus_failure_propagates(tmp_path):
    db = tmp_path / "broken.db"
    db.write_bytes(b"\x00garbage" * 512)
    with pytest.raises(CorpusError):
        with SqliteCorpus.open(str(db)) as broken:
            rank("*****", "", 5, corpus=broken)


def test_rank_against_sqlite(tmp_path):
    db = tmp_path / "words.db"
    create_database(str(db), WORDS)
    with SqliteCorpus.open(str(db)) as corpus:
        ranked = rank("*****", "", 5, corpus=corpus)
    assert [r.word for r in ranked] == ["тесто", "слово", "нотка", "зонта", "мирно"]


def test_several_patterns_must_all_hold(corpus):
    ranked = rank(["*о***", "***т*"], "", 10, corpus=corpus)
    assert [r.word for r in ranked] == ["зонта"]
    assert ranked == rank("*о*т*", "", 10, corpus=corpus)


class _NoLookup:
    def lookup(self, length, fixed, excluded):
        raise AssertionError("corpus should not be consulted")


@pytest.mark.parametrize("patterns", [
    ["*о***", "*а***"],
    ["*****", "****"],
])
def test_contradicting_patterns_skip_the_lookup(patterns):
    assert rank(patterns, "", 10, corpus=_NoLookup()) == []


def test_table_factory_sees_the_candidates(corpus):
    seen = []

    def factory(words):
        seen.append(sorted(words))
        return FrequencyTable({"н": 1.0})

    ranked = rank("*о***", "", 10, corpus=corpus, table=factory)
    assert seen == [["зонта", "котда", "нотка", "хобот"]]
    assert [r.word for r in ranked][:2] == ["зонта", "нотка"]
