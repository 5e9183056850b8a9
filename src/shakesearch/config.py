import os

def env_int(name: str, default: int) -> int:
    """Integer from the environment; unset or non-numeric -> default."""
    try:
        return int(os.environ.get(name) or default)
    except ValueError:
        return default

def env_float(name: str, default: float) -> float:
    try:
        return float(os.environ.get(name) or default)
    except ValueError:
        return default

# /* ~~~ search window ~~~ */
DEFAULT_WINDOW_SIZE: int = 500

# Windows smaller than this also cut snippets at whitespace: short windows
# rarely contain two sentence marks, so word boundaries are used instead.
CUT_AT_WHITESPACE_BELOW: int = 500

SENTENCE_SEPARATORS: str = ".,?!"
WHITESPACE_SEPARATOR: str = " "

# Line breaks inside a snippet are rendered with this marker.
DISPLAY_BREAK: str = "<br>"

# /* ~~~ corpus layout (completeworks.txt) ~~~ */
# Every work starts with its title, a blank line and a "Contents" line.
CONTENTS_MARKER: str = "Contents"
# Act headings look like "ACT III" or "ACT I. SCENE II." on one line.
ACT_PREFIX: str = "ACT "
ACT_SUFFIX_SEPARATOR: str = "."
UNKNOWN_TITLE: str = "?"
ATTRIBUTION_SEPARATOR: str = " - "

# /* ~~~ deploy-time settings ~~~ */
CORPUS_PATH: str = os.environ.get("SHAKESEARCH_CORPUS", "completeworks.txt")
PORT: int = env_int("PORT", 3001)

# /* ~~~ query correction (OpenAI-compatible completions API) ~~~ */
CORRECTION_URL: str = os.environ.get(
    "SHAKESEARCH_CORRECTION_URL", "https://api.openai.com/v1/completions"
)
CORRECTION_MODEL: str = os.environ.get("SHAKESEARCH_CORRECTION_MODEL", "gpt-3.5-turbo-instruct")
CORRECTION_TIMEOUT: float = env_float("SHAKESEARCH_CORRECTION_TIMEOUT", 10.0)
CORRECTION_PROMPT: str = (
    "The following sentece from Shakespeare's work is misspelled. "
    "Give me the correct sentence, including punctuation.\n\"{query}\""
)
