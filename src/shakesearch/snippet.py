from __future__ import annotations
from typing import Tuple
from .config import (
    CUT_AT_WHITESPACE_BELOW,
    SENTENCE_SEPARATORS,
    WHITESPACE_SEPARATOR,
)
from .models import Corpus
from .normalize import to_display_breaks

def cuts_at_whitespace(window_size: int) -> bool:
    """Short windows are trimmed to word boundaries as well as sentence marks."""
    return window_size < CUT_AT_WHITESPACE_BELOW

def window_bounds(offset: int, window_size: int, length: int) -> Tuple[int, int]:
    """[offset - half, offset + half) clamped to [0, length]."""
    half = max(0, window_size) // 2
    start = max(0, offset - half)
    end = min(length, offset + half)
    if end < start:
        end = start
    return start, end

def trim_sentences(text: str, cut_at_whitespace: bool = False) -> str:
    """
    Drop the partial sentences at both ends of text.
    Keeps everything after the first separator up to and including the last
    one. Returns "" when fewer than two separators are present.
    """
    separators = SENTENCE_SEPARATORS
    if cut_at_whitespace:
        separators += WHITESPACE_SEPARATOR

    first = -1
    for i, ch in enumerate(text):
        if ch in separators:
            first = i
            break
    last = -1
    for i in range(len(text) - 1, -1, -1):
        if text[i] in separators:
            last = i
            break

    if first < 0 or last < 0 or first == last:
        return ""
    return text[first + 1:last + 1].strip()

def extract_snippet(corpus: Corpus, offset: int, window_size: int) -> str:
    """Display-ready excerpt around offset; "" when nothing readable remains."""
    start, end = window_bounds(offset, window_size, len(corpus.text))
    window = to_display_breaks(corpus.text[start:end])
    return trim_sentences(window, cuts_at_whitespace(window_size))
