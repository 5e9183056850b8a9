# shakesearch/engine.py
from __future__ import annotations

import logging
from typing import Any, List, Optional

from . import config as CFG
from .corrector import Corrector, correct_query
from .loader import load_corpus
from .models import Corpus, SearchResponse, SearchResult
from .provenance import AttributionScanner
from .search import find_matches
from .snippet import extract_snippet

log = logging.getLogger(__name__)


def parse_window_size(raw: Any, default: int = CFG.DEFAULT_WINDOW_SIZE) -> int:
    """Integer window size from user input; missing or non-numeric -> default."""
    if raw is None or isinstance(raw, bool):
        return default
    try:
        return int(raw)
    except (TypeError, ValueError):
        return default


def summarize(count: int) -> str:
    if count > 1:
        return f"a total of {count} results"
    if count == 1:
        return "a total of 1 result"
    return "no results. Please try with another sentence or word"


def build_message(query: str, count: int, corrected: Optional[str] = None) -> str:
    if corrected:
        return f'Your search was corrected to "{corrected}". The search returned {summarize(count)}.'
    return f'You searched for "{query}". The search returned {summarize(count)}.'


class Engine:
    """
    Query orchestration over one immutable corpus:
      - Match Locator (search.find_matches),
      - Snippet Extractor (snippet.extract_snippet),
      - Provenance Resolver (provenance.AttributionScanner, one per request),
      - optional correction fallback (corrector.correct_query by default).

    The engine never changes after construction, so a single instance is
    shared by every request handler without locking.
    """

    def __init__(self, corpus: Corpus, *, corrector: Optional[Corrector] = None) -> None:
        self._corpus = corpus
        self._corrector = corrector

    @classmethod
    def from_file(cls, path: str, *, corrector: Optional[Corrector] = correct_query) -> "Engine":
        """Load the corpus from disk; OSError propagates (the caller must not serve)."""
        corpus = load_corpus(path)
        log.info("Engine ready: corpus=%s", path)
        return cls(corpus, corrector=corrector)

    @property
    def corpus(self) -> Corpus:
        return self._corpus

    # ------------- query -------------

    # /* ~~~ locate -> extract -> resolve, in corpus order ~~~ */
    def search(
        self,
        query: str,
        window_size: int = CFG.DEFAULT_WINDOW_SIZE,
        *,
        whole_word: bool = False,
    ) -> List[SearchResult]:
        offsets = find_matches(self._corpus, query, whole_word=whole_word)
        results: List[SearchResult] = []
        resolve = AttributionScanner(self._corpus)
        for idx in offsets:
            text = extract_snippet(self._corpus, idx, window_size)
            if not text:
                continue
            results.append(SearchResult(text=text, attribution=resolve(idx)))
        log.debug("search(%r, %d, whole_word=%s): %d offsets, %d results",
                  query, window_size, whole_word, len(offsets), len(results))
        return results

    # /* ~~~ full request: validate, search, correct on empty, summarize ~~~ */
    def query(
        self,
        query: str,
        *,
        window_size: Optional[int] = None,
        whole_word: bool = False,
        api_key: Optional[str] = None,
    ) -> SearchResponse:
        if not query:
            raise ValueError("missing search query")

        size = self._effective_window(window_size)
        results = self.search(query, size, whole_word=whole_word)

        corrected: Optional[str] = None
        if not results and api_key:
            corrected = self._correct(query, api_key)
            if corrected:
                log.info("Query %r corrected to %r", query, corrected)
                results = self.search(corrected, size, whole_word=whole_word)

        return SearchResponse(
            query=corrected or query,
            message=build_message(query, len(results), corrected),
            match_whole_word=whole_word,
            results=results,
        )

    # ------------- internals -------------

    @staticmethod
    def _effective_window(window_size: Optional[int]) -> int:
        if window_size is None or window_size < 0:
            return CFG.DEFAULT_WINDOW_SIZE
        return window_size

    def _correct(self, query: str, api_key: str) -> Optional[str]:
        """Corrected query, or None; a failing corrector never fails the request."""
        if self._corrector is None:
            return None
        try:
            corrected = self._corrector(query, api_key)
        except Exception:
            log.exception("Query corrector failed for %r", query)
            return None
        if not corrected or corrected == query:
            return None
        return corrected
