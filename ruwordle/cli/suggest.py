# ruwordle/cli/suggest.py
"""
CLI entry point: suggest words for Russian Wordle ("5 букв").

This script:
  1) Parses the pattern(s) and rejects into a constraint and echoes it.
  2) Opens the word corpus (SQLite database or plain word list).
  3) Looks up matching words once, ranks them by letter frequency and
     prints a `lemma | score` table plus the elapsed time.

-p may be given several times (e.g. one pattern per guess row); a word
must fit all of them.

Examples:
  ruwordle -p "*о*т*" -r "е,и" -l 10
  ruwordle -p "*о***" -p "***т*" --corpus wordlist --db data/words_5.txt
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from typing import List, Optional

from ruwordle.corpus import CorpusError, get_corpus_ids, open_corpus
from ruwordle.engine import FrequencyTable, ScoredCandidate, parse_patterns, rank

DEFAULT_DB = os.environ.get("RUWORDLE_DB", "data/words.db")
DEFAULT_LIMIT = 20


def format_table(rows: List[ScoredCandidate]) -> str:
    """Two aligned columns: lemma, score."""
    width = max([len("lemma")] + [len(r.word) for r in rows])
    lines = [f"{'lemma':<{width}}  score", f"{'-' * width}  ------"]
    lines += [f"{r.word:<{width}}  {r.score:.4f}" for r in rows]
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="ruwordle",
        description="ruwordle — suggested words for the Russian version of Wordle")
    ap.add_argument("-p", "--pattern", required=True, action="append", dest="patterns",
                    help="known letters by position, '*' unknown, '_X' unknown and X absent "
                         "(e.g. '*о*т*', '_о*т**'); repeat to combine patterns")
    ap.add_argument("-r", "--rejects", default="",
                    help="comma-delimited letters known to be absent (e.g. 'е,и')")
    ap.add_argument("-l", "--limit", type=int, default=DEFAULT_LIMIT,
                    help=f"maximum number of suggestions (default {DEFAULT_LIMIT})")
    ap.add_argument("--corpus", choices=get_corpus_ids(), default="sqlite",
                    help="corpus kind: SQLite database or plain word list")
    ap.add_argument("--db", default=DEFAULT_DB,
                    help="path to the corpus (default: $RUWORDLE_DB or data/words.db)")
    ap.add_argument("--weights", choices=["russian", "candidates"], default="russian",
                    help="letter weights: standard Russian frequencies, or frequencies "
                         "within the matching candidates")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, run one lookup, print the ranked table.
    Returns the process exit status (1 if the corpus cannot be read).
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    start = time.perf_counter()

    constraint = parse_patterns(args.patterns, args.rejects)
    if constraint is None:
        print(f"Patterns {' '.join(args.patterns)} contradict each other")
    else:
        excluded = ",".join(sorted(constraint.excluded)) or "-"
        print(f"Pattern = {constraint.pattern} "
              f"(length {constraint.word_length}, rejects {excluded})")

    if args.weights == "candidates":
        table = FrequencyTable.from_words
    else:
        table = FrequencyTable.russian()

    try:
        with open_corpus(args.corpus, args.db) as corpus:
            ranked = rank(args.patterns, args.rejects, args.limit, corpus=corpus, table=table)
    except CorpusError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if ranked:
        print(format_table(ranked))
        print(f"Showing {len(ranked)} suggestion(s)")
    else:
        print("No suggestions.")

    print(f"Elapsed time: {time.perf_counter() - start:.3f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
