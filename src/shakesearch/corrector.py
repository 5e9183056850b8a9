from __future__ import annotations
import logging
import re
from typing import Any, Callable, Optional

import httpx

from . import config as CFG

log = logging.getLogger(__name__)

# (query, api_key) -> corrected query, or None when no correction is available
Corrector = Callable[[str, str], Optional[str]]

_TRAILING_NON_WORD = re.compile(r"[^\w]+$")

def build_payload(query: str) -> dict[str, Any]:
    return {
        "model": CFG.CORRECTION_MODEL,
        "prompt": CFG.CORRECTION_PROMPT.format(query=query),
        "temperature": 0.7,
        "max_tokens": 256,
        "top_p": 1,
        "frequency_penalty": 0,
        "presence_penalty": 0,
    }

def clean_completion(text: str) -> str:
    """Strip trailing punctuation, quotes and newlines from a model completion."""
    text = _TRAILING_NON_WORD.sub("", text)
    text = text.replace('"', "").replace("\n", "")
    return text.strip()

def correct_query(query: str, api_key: str, *, client: Optional[httpx.Client] = None) -> Optional[str]:
    """
    Ask the completions API to fix a misspelled query.
    Never raises: every failure is logged and reported as None.
    """
    if not api_key:
        return None
    headers = {"Authorization": f"Bearer {api_key}"}
    try:
        if client is None:
            with httpx.Client(timeout=CFG.CORRECTION_TIMEOUT) as own:
                resp = own.post(CFG.CORRECTION_URL, json=build_payload(query), headers=headers)
        else:
            resp = client.post(CFG.CORRECTION_URL, json=build_payload(query), headers=headers)
        resp.raise_for_status()
        data = resp.json()
        raw = data["choices"][0]["text"]
    except httpx.HTTPError as exc:
        log.warning("Correction request failed: %s", exc)
        return None
    except (ValueError, KeyError, IndexError, TypeError) as exc:
        log.warning("Correction response unusable: %r", exc)
        return None

    if not isinstance(raw, str):
        log.warning("Correction response unusable: text is %s", type(raw).__name__)
        return None
    corrected = clean_completion(raw)
    return corrected or None
