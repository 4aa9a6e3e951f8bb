"""Content Filters: regex heuristics that flag spammy contact-form text.

Invariants:
    - All functions are PURE
    - Case-insensitive patterns run on lowercased text; the all-caps pattern runs
      on the original text (lowercasing first would make it unmatchable)
"""

import re

SPAM_KEYWORDS = (
    "viagra", "casino", "lottery", "winner", "congratulations",
    "claim", "prize", "free money", "earn money", "work from home",
)

URL_PATTERN = re.compile(r"https?://", re.IGNORECASE)
SPAM_KEYWORD_PATTERN = re.compile(
    r"\b(" + "|".join(re.escape(k) for k in SPAM_KEYWORDS) + r")\b",
    re.IGNORECASE,
)
# one character followed by 10+ copies of itself
REPEATED_CHAR_PATTERN = re.compile(r"(.)\1{10,}", re.DOTALL)
MARKUP_PATTERN = re.compile(r"<[^>]*>")
SHOUTING_PATTERN = re.compile(r"\b[A-Z]{5,}\b")

_LOWERCASE_PATTERNS = {
    "url": URL_PATTERN,
    "spam_keyword": SPAM_KEYWORD_PATTERN,
    "repeated_character": REPEATED_CHAR_PATTERN,
    "markup": MARKUP_PATTERN,
}


def find_suspicious_pattern(text: str) -> str | None:
    """Return the name of the first heuristic the text trips, or None."""
    lowered = text.lower()
    for name, pattern in _LOWERCASE_PATTERNS.items():
        if pattern.search(lowered):
            return name
    if SHOUTING_PATTERN.search(text):
        return "all_caps"
    return None
