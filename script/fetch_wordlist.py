"""
Download a Russian word list and write a clean one-word-per-line file.

What it does:
- Downloads the URL. Plain-text responses are used as-is; HTML pages are
  reduced to their visible text with BeautifulSoup.
- Extracts lower-case Cyrillic tokens (optionally of one length only).
- Folds 'ё' to 'е', de-duplicates while preserving order, writes to file.

Usage:
    python -m script.fetch_wordlist --url https://example.org/nouns.txt --out data/words.txt
    python -m script.fetch_wordlist --url https://example.org/list.html --N 5 --sort
"""

import argparse
import re
from typing import Iterable, List, Optional

import requests
from bs4 import BeautifulSoup

from ruwordle.datasets import write_lines
from ruwordle.engine.alphabet import fold_word

# Whole tokens made of lower-case Cyrillic letters only; capitalised words
# (names, sentence starts) are not matched.
WORD_RE = re.compile(r"(?<![\w-])[а-яё]+(?![\w-])")


def unique_preserve_order(words: Iterable[str]) -> List[str]:
    """First occurrence wins, so the list keeps the source's frequency order."""
    return list(dict.fromkeys(words))


def extract_words(text: str, N: Optional[int] = None) -> List[str]:
    words = [fold_word(m.group(0)) for m in WORD_RE.finditer(text)]
    if N is not None:
        words = [w for w in words if len(w) == N]
    return unique_preserve_order(words)


def fetch_words(url: str, N: Optional[int] = None) -> List[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    content_type = r.headers.get("Content-Type", "")
    if "charset" not in content_type:
        # requests falls back to ISO-8859-1 for text/*, which mangles Cyrillic
        r.encoding = "utf-8"
    text = r.text
    if "html" in content_type:
        text = BeautifulSoup(text, "html.parser").get_text("\n", strip=True)
    return extract_words(text, N)


def main():
    ap = argparse.ArgumentParser(description="Fetch a Russian word list")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default="data/words.txt")
    ap.add_argument("--N", type=int, help="keep only words of this length")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = fetch_words(args.url, args.N)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()
