"""
Word list validator.

What this module does:
- Check a Russian word list (one word per line, UTF-8) before it is loaded
  into the word database.
- A line is valid when it is a plain lower-case Cyrillic word ('ё' allowed)
  and, if a length N is requested, has exactly N letters.
- Count valid, invalid and duplicate lines; compute the SHA-256 of the raw
  file so a database can be traced back to its source list.
- Return a machine-readable dict and provide a one-line summary.

Typical use:
    from ruwordle.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("data/words.txt", N=5)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional
import hashlib

from ruwordle.engine.alphabet import fold_word, is_well_formed


@dataclass
class WordlistReport:
    path: str
    exists: bool
    N: Optional[int]      # required length, None = any
    count: int            # valid lines
    unique_count: int     # distinct valid words after 'ё' folding
    invalid_lines: int
    sha256: str           # of raw bytes ("" if missing)
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_wordlist(path: str, N: Optional[int] = None) -> Dict:
    """
    Validate one word list.

    `passed` is strict: the file exists, has at least one valid word and no
    invalid lines. Duplicates are reported as an issue but do not fail the
    list, since the database loader de-duplicates anyway.
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(str(path), False, N, 0, 0, 0, "", False,
                             [f"word list not found: {path}"])
        return asdict(rep)

    valid: List[str] = []
    invalid = 0
    with p.open("r", encoding="utf-8-sig") as f:
        for raw in f:
            w = raw.strip()
            if is_well_formed(w) and (N is None or len(w) == N):
                valid.append(fold_word(w))
            else:
                invalid += 1

    unique = len(set(valid))
    issues: List[str] = []
    if not valid:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"{invalid} invalid line(s)")
    if unique != len(valid):
        issues.append(f"{len(valid) - unique} duplicate word(s)")

    rep = WordlistReport(
        path=str(p),
        exists=True,
        N=N,
        count=len(valid),
        unique_count=unique,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=bool(valid) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Example:
        words.txt | N=5 | words=3912 (uniq=3907, invalid=12, sha=abc123def456) | FAIL
    """
    n = report["N"] if report["N"] is not None else "any"
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{Path(report['path']).name} | N={n} | words={report['count']} "
        f"(uniq={report['unique_count']}, invalid={report['invalid_lines']}, sha={sha}) "
        f"| {status}"
    )
