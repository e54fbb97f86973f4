import dataclasses

import pytest
from ruwordle.engine import Constraint, merge_constraints, parse_constraint, parse_patterns, split_rejects


def test_parse_pattern_and_rejects():
    c = parse_constraint("*о*т*", "е,и")
    assert c.word_length == 5
    assert dict(c.fixed) == {1: "о", 3: "т"}
    assert c.excluded == {"е", "и"}
    assert c.wildcards == [0, 2, 4]


def test_inline_exclusion_equivalent_to_reject():
    assert parse_constraint("_о*т*", "") == parse_constraint("**т*", "о")


@pytest.mark.parametrize("pattern,length,fixed,excluded", [
    ("_о*_т**А", 6, {5: "а"}, {"о", "т"}),
    ("_о****", 5, {}, {"о"}),
    ("****_т", 5, {}, {"т"}),
    ("*****", 5, {}, set()),
    ("АБВГД", 5, {0: "а", 1: "б", 2: "в", 3: "г", 4: "д"}, set()),
    ("А*Б*В", 5, {0: "а", 2: "б", 4: "в"}, set()),
    ("_о_т***", 5, {}, {"о", "т"}),
])
def test_parse_pattern_units(pattern, length, fixed, excluded):
    c = parse_constraint(pattern)
    assert c.word_length == length
    assert dict(c.fixed) == fixed
    assert c.excluded == excluded


def test_fixed_letter_is_never_excluded():
    c = parse_constraint("*о*т*", "о, т, к")
    assert c.word_length == 5
    assert dict(c.fixed) == {1: "о", 3: "т"}
    assert c.excluded == {"к"}


def test_inline_exclusion_of_fixed_letter_is_suppressed():
    c = parse_constraint("_о*о**")
    assert dict(c.fixed) == {2: "о"}
    assert c.excluded == frozenset()


def test_constraint_constructor_enforces_suppression():
    c = Constraint(word_length=3, fixed={0: "к"}, excluded={"к", "а"})
    assert c.excluded == {"а"}


@pytest.mark.parametrize("pattern,rejects", [("", ""), (None, None), ("", "?,!")])
def test_empty_input_is_permissive(pattern, rejects):
    c = parse_constraint(pattern, rejects)
    assert c.word_length == 0
    assert dict(c.fixed) == {}
    assert c.excluded == frozenset()


@pytest.mark.parametrize("pattern,length,fixed", [
    ("1?о-*", 5, {2: "о"}),
    ("****_", 5, {}),
    ("_1**", 4, {}),
    ("* о * т *", 5, {1: "о", 3: "т"}),
    ("abc", 3, {}),
    ("*h*t*", 5, {}),
])
def test_malformed_pattern_degrades_to_wildcards(pattern, length, fixed):
    c = parse_constraint(pattern)
    assert c.word_length == length
    assert dict(c.fixed) == fixed


def test_pattern_case_is_normalised_but_latin_is_not_converted():
    assert dict(parse_constraint("*o*t*").fixed) == {}
    assert parse_constraint("*О*Т*") == parse_constraint("*о*т*")


def test_yo_is_folded_to_ye():
    c = parse_constraint("ёлка*", "Ё")
    assert c.fixed[0] == "е"
    assert "ё" not in c.excluded and "е" not in c.excluded


def test_split_rejects_normalises_mixed_input():
    assert split_rejects("ё,E,д,Я,O") == ["е", "е", "д", "я", "о"]


def test_split_rejects_drops_invalid_entries():
    assert split_rejects("е, и ,  ,ab,7,-,xy") == ["е", "и"]
    assert split_rejects("") == []
    assert split_rejects(None) == []


def test_constraint_is_immutable():
    c = parse_constraint("*о*т*", "е")
    with pytest.raises(TypeError):
        c.fixed[0] = "к"
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.word_length = 6


def test_canonical_pattern():
    assert parse_constraint("_о*т*").pattern == "**т*"
    assert parse_constraint("*\u041e*\u0422*").pattern == "*о*т*"
    # Latin capital O is not a letter of the pattern alphabet
    assert parse_constraint("*O*\u0422*").pattern == "***т*"


def test_split_rejects_maps_only_latin_e_and_o():
    assert split_rejects("h,t,m,b") == []
    assert split_rejects("a,c,p,x,y,k") == []
    assert split_rejects("e,o,E,O") == ["е", "о", "е", "о"]


def test_latin_rejects_do_not_exclude_cyrillic_letters():
    assert parse_constraint("*****", "h,t").excluded == frozenset()


def test_parse_patterns_pools_fixed_letters_and_exclusions():
    c = parse_patterns(["*о***", "***т*", "_а****"], "е")
    assert c.word_length == 5
    assert dict(c.fixed) == {1: "о", 3: "т"}
    assert c.excluded == {"а", "е"}


def test_parse_patterns_single_pattern_matches_parse_constraint():
    assert parse_patterns(["_о*т*"], "и") == parse_constraint("_о*т*", "и")


@pytest.mark.parametrize("patterns", [
    ["*о***", "*а***"],     # two letters at one position
    ["*****", "****"],      # different lengths
])
def test_parse_patterns_contradiction_is_none(patterns):
    assert parse_patterns(patterns, "") is None


def test_merge_fixed_letter_wins_over_exclusion_from_other_pattern():
    c = merge_constraints([parse_constraint("_о****"), parse_constraint("*о***")])
    assert dict(c.fixed) == {1: "о"}
    assert c.excluded == frozenset()


def test_merge_of_nothing_is_none():
    assert merge_constraints([]) is None
    assert parse_patterns([], "е").excluded == {"е"}
