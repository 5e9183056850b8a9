"""Public API for the complete-works search engine."""
from __future__ import annotations
from .config import DEFAULT_WINDOW_SIZE
from .corrector import Corrector, correct_query
from .engine import Engine, parse_window_size
from .loader import build_corpus, load_corpus
from .models import Corpus, SearchResponse, SearchResult

__all__ = [
    "DEFAULT_WINDOW_SIZE",
    "Corpus",
    "Corrector",
    "Engine",
    "SearchResponse",
    "SearchResult",
    "build_corpus",
    "correct_query",
    "load_corpus",
    "parse_window_size",
]
