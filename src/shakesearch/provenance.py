"""
Title/act recovery for completeworks.txt.

These are heuristics tied to the layout of that file, not a general document
structure parser:

    THE TRAGEDY OF HAMLET, PRINCE OF DENMARK
    <blank>
    Contents
    ...
    ACT I
    SCENE I. Elsinore. A platform before the Castle.

Both scans walk the lines of text[:offset] from the match backwards and stop
at the first hit, so the cost is bounded by the distance to the marker.
"""
from __future__ import annotations
from typing import Iterator, Optional
from .config import (
    ACT_PREFIX,
    ACT_SUFFIX_SEPARATOR,
    ATTRIBUTION_SEPARATOR,
    CONTENTS_MARKER,
    UNKNOWN_TITLE,
)
from .models import Corpus

def iter_lines_reversed(text: str, end: int, sep: str) -> Iterator[str]:
    """
    Yield the lines of text[:end] last to first.
    Same lines, in reverse, as text[:end].split(sep).
    """
    stop = max(0, min(end, len(text)))
    while True:
        i = text.rfind(sep, 0, stop)
        if i < 0:
            yield text[:stop]
            return
        yield text[i + len(sep):stop]
        stop = i

def recover_work_title(corpus: Corpus, offset: int) -> str:
    """Title of the work containing offset, or "?" when no Contents line precedes it."""
    contents_found = False
    for line in iter_lines_reversed(corpus.text, offset, corpus.line_break):
        # the title is the first non-empty line above "Contents"
        if contents_found and line != "":
            return line
        if line == CONTENTS_MARKER:
            contents_found = True
    return UNKNOWN_TITLE

def recover_act(corpus: Corpus, offset: int) -> str:
    """Closest "ACT ..." heading above offset, without any scene suffix; "" if none."""
    for line in iter_lines_reversed(corpus.text, offset, corpus.line_break):
        if line.startswith(ACT_PREFIX):
            return line.split(ACT_SUFFIX_SEPARATOR, 1)[0]
    return ""

def _join(title: str, act: str) -> str:
    if act:
        return title + ATTRIBUTION_SEPARATOR + act
    return title

def attribution(corpus: Corpus, offset: int) -> str:
    return _join(recover_work_title(corpus, offset), recover_act(corpus, offset))


class AttributionScanner:
    """
    Attribution for many offsets of one request.
    Walks the corpus forward once while offsets ascend, remembering the
    last "Contents" title and "ACT " heading seen on complete lines; the
    line the offset falls in is checked separately, as the backward scans
    do. Results equal attribution(corpus, offset) for every offset.
    """

    def __init__(self, corpus: Corpus) -> None:
        self._text = corpus.text
        self._sep = corpus.line_break
        self._reset()

    def _reset(self) -> None:
        self._pos = 0                                # start of the first unread line
        self._last_nonempty: Optional[str] = None
        self._title: Optional[str] = None            # line above the latest "Contents"
        self._act = ""

    def _advance(self, offset: int) -> None:
        text, sep = self._text, self._sep
        while True:
            i = text.find(sep, self._pos, offset)
            if i < 0:
                return
            line = text[self._pos:i]
            if line == CONTENTS_MARKER:
                self._title = self._last_nonempty
            if line.startswith(ACT_PREFIX):
                self._act = line.split(ACT_SUFFIX_SEPARATOR, 1)[0]
            if line != "":
                self._last_nonempty = line
            self._pos = i + len(sep)

    def __call__(self, offset: int) -> str:
        offset = max(0, min(offset, len(self._text)))
        if offset < self._pos:
            self._reset()
        self._advance(offset)

        partial = self._text[self._pos:offset]
        if partial == CONTENTS_MARKER:
            title = self._last_nonempty
        else:
            title = self._title
        if partial.startswith(ACT_PREFIX):
            act = partial.split(ACT_SUFFIX_SEPARATOR, 1)[0]
        else:
            act = self._act
        return _join(title if title is not None else UNKNOWN_TITLE, act)
