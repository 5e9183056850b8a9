from __future__ import annotations
import re
from .config import DISPLAY_BREAK

_LINE_BREAK = re.compile(r"\r\n|\r|\n")

def fold_case(text: str) -> str:
    """
    Lowercase text without moving any offset.
    str.lower() is locale independent but a few characters expand
    (U+0130 lowers to two code points); those are kept as-is so the
    result stays aligned.
    """
    lowered = text.lower()
    if len(lowered) == len(text):
        return lowered
    out: list[str] = []
    for ch in text:
        low = ch.lower()
        out.append(low if len(low) == 1 else ch)
    return "".join(out)

def detect_line_break(text: str) -> str:
    """Return the line-break convention used by text ("\\r\\n" when unknown)."""
    if "\r\n" in text:
        return "\r\n"
    if "\n" in text:
        return "\n"
    if "\r" in text:
        return "\r"
    return "\r\n"

def to_display_breaks(text: str) -> str:
    """Replace every line-break sequence with the display marker."""
    return _LINE_BREAK.sub(DISPLAY_BREAK, text)
