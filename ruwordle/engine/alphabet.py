"""
Letter normalisation for the Russian alphabet.

The game treats 'ё' as 'е', and players on a mixed keyboard layout type
Latin 'e'/'o' in the reject list. Pattern letters go through `fold_letter`,
reject entries through `fold_reject`, corpus words through `fold_word`,
so comparisons happen on one canonical spelling.
"""

from __future__ import annotations

# Lower-case Cyrillic block а..я (U+0430..U+044F) plus ё.
CYRILLIC = frozenset(chr(c) for c in range(ord("а"), ord("я") + 1)) | {"ё"}

# Latin letters players type for 'е'/'о' on a mixed keyboard layout.
# Applied to reject entries only; pattern letters are taken as typed.
LATIN_LOOKALIKES = {"e": "е", "o": "о"}


def fold_letter(ch: str) -> str:
    """
    Canonical form of a single typed character: lower-case, 'ё' -> 'е'.
    Characters that are not letters are returned unchanged.
    """
    ch = ch.lower()
    return "е" if ch == "ё" else ch


def fold_reject(ch: str) -> str:
    """fold_letter, plus Latin 'e'/'o' read as their Cyrillic twins."""
    ch = ch.lower()
    return fold_letter(LATIN_LOOKALIKES.get(ch, ch))


def fold_word(word: str) -> str:
    """Replace 'ё' with 'е'. Corpus words are otherwise left as stored."""
    return word.replace("ё", "е")


def is_cyrillic_letter(ch: str) -> bool:
    return len(ch) == 1 and ch.lower() in CYRILLIC


def is_well_formed(word: str) -> bool:
    """
    A corpus word is usable when every character is a lower-case Cyrillic
    letter. Capitalised proper nouns, hyphenated and abbreviated entries fail.
    """
    return bool(word) and all(ch in CYRILLIC for ch in word)
