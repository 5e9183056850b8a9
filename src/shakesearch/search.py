from __future__ import annotations
import re
from typing import List
from .models import Corpus
from .normalize import fold_case

# Matching runs on corpus.lowered; offsets are valid in corpus.text too.

def _substring_offsets(haystack: str, needle: str) -> List[int]:
    """Every start of needle in haystack, overlapping ones included."""
    out: List[int] = []
    i = haystack.find(needle)
    while i >= 0:
        out.append(i)
        i = haystack.find(needle, i + 1)
    return out

def _compile_whole_word(needle: str) -> re.Pattern:
    # zero-width lookahead so overlapping tokens are all reported
    return re.compile(rf"(?=(?<!\w){re.escape(needle)}(?!\w))")

def _whole_word_offsets(haystack: str, needle: str) -> List[int]:
    pattern = _compile_whole_word(needle)
    return [m.start() for m in pattern.finditer(haystack)]

def find_matches(corpus: Corpus, query: str, *, whole_word: bool = False) -> List[int]:
    """
    Return the ascending start offsets of query in the corpus.
      * substring mode: every occurrence, including overlapping ones
      * whole-word mode: only occurrences with no word character on either side
    Matching is case-insensitive (both sides are case folded).
    """
    if not query:
        raise ValueError("find_matches(): empty query")
    needle = fold_case(query)
    if whole_word:
        return _whole_word_offsets(corpus.lowered, needle)
    return _substring_offsets(corpus.lowered, needle)
