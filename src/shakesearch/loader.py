from __future__ import annotations
import logging
import os
from .models import Corpus
from .normalize import fold_case, detect_line_break

log = logging.getLogger(__name__)

def build_corpus(text: str, source: str = "") -> Corpus:
    """Wrap raw text into a Corpus with its lowercase shadow."""
    return Corpus(
        text=text,
        lowered=fold_case(text),
        line_break=detect_line_break(text),
        source=source,
    )

def load_corpus(path: str) -> Corpus:
    """
    Read the whole corpus file into memory.
    newline="" keeps "\\r\\n" intact: offsets and the title/act scans rely on it.
    Raises OSError when the file is missing, unreadable or not UTF-8.
    """
    path = os.fspath(path)
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            text = f.read()
    except UnicodeDecodeError as exc:
        raise OSError(f"load_corpus: {path} is not valid UTF-8 ({exc.reason})") from exc

    corpus = build_corpus(text, source=path)
    log.info("Loaded corpus %s: %d characters", path, len(corpus))
    return corpus
