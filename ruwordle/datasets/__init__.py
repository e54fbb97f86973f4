from .validator import validate_wordlist, pretty_summary
from .io import read_lines, read_words, write_lines

__all__ = ["validate_wordlist", "pretty_summary", "read_lines", "read_words", "write_lines"]
