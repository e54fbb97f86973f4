"""
Build the SQLite word database from a plain word list.

What it does:
- Validates the list (counts, invalid lines, duplicates, SHA-256) and prints
  a one-line summary.
- Loads every distinct non-blank line into `words(word TEXT NOT NULL)`.
  Lines that are not plain lower-case Cyrillic are loaded too; the lookup
  query filters them, so the same database can serve other tools.
- With --only-valid, keeps just the lines that passed validation.

Usage:
    python -m script.build_corpus --in data/words.txt --out data/words.db
    python -m script.build_corpus --in data/words.txt --out data/words_5.db --N 5 --only-valid
"""

import argparse
from pathlib import Path

from ruwordle.corpus import create_database
from ruwordle.datasets import pretty_summary, read_words, validate_wordlist
from ruwordle.engine.alphabet import is_well_formed


def main():
    ap = argparse.ArgumentParser(description="Load a word list into a SQLite word database")
    ap.add_argument("--in", dest="inp", required=True, help="input word list (.txt, one per line)")
    ap.add_argument("--out", default="data/words.db", help="output SQLite database")
    ap.add_argument("--N", type=int, help="expected word length (validation and --only-valid)")
    ap.add_argument("--only-valid", action="store_true",
                    help="load only lower-case Cyrillic words (of length N, if given)")
    args = ap.parse_args()

    rep = validate_wordlist(args.inp, N=args.N)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")
    if not rep["exists"]:
        raise FileNotFoundError(args.inp)

    words = read_words(args.inp)
    if args.only_valid:
        words = [w for w in words if is_well_formed(w) and (args.N is None or len(w) == args.N)]

    n = create_database(args.out, words, progress=True)
    print(f"Wrote {n} word(s) -> {Path(args.out)}")


if __name__ == "__main__":
    main()
