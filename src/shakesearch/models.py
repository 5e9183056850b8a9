from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

@dataclass(frozen=True)
class Corpus:
    text: str          # original text, line breaks untouched
    lowered: str       # case-folded shadow, same length as text
    line_break: str    # "\r\n" for completeworks.txt
    source: str = ""   # path the text was read from

    def __post_init__(self) -> None:
        if len(self.text) != len(self.lowered):
            raise ValueError("lowered shadow must be aligned with the original text")

    def __len__(self) -> int:
        return len(self.text)

@dataclass(frozen=True)
class SearchResult:
    text: str          # trimmed snippet, line breaks shown as <br>
    attribution: str   # "TITLE" or "TITLE - ACT N"

    def to_dict(self) -> dict:
        return {"text": self.text, "attribution": self.attribution}

@dataclass
class SearchResponse:
    query: str
    message: str
    match_whole_word: bool
    results: List[SearchResult] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "query": self.query,
            "message": self.message,
            "matchWholeWord": self.match_whole_word,
            "results": [r.to_dict() for r in self.results],
        }
