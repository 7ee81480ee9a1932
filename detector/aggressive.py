"""
CommitLens aggressive detector — single-word credential patterns used as
the fallback when the entropy check finds nothing in a word.
"""
import re

from detector.patterns import AGGRESSIVE_PATTERNS, PLACEHOLDER_VALUES


COMPILED_PATTERNS = [
    {**p, "regex": re.compile(p["regex"])} for p in AGGRESSIVE_PATTERNS
]


def is_placeholder(value: str) -> bool:
    v = value.strip().lower().strip("\"'`,;")
    return (
        v in PLACEHOLDER_VALUES
        or v.startswith("<")
        or v.startswith("${")
        or v.startswith("%(")
        or v.startswith("{{")
        or len(v) < 4
        or bool(re.match(r"^\*+$", v))
        or bool(re.match(r"^x+$", v))
    )


class AggressiveDetector:
    """Matches a word against AGGRESSIVE_PATTERNS; returns the word or None."""

    def __init__(self, patterns=None):
        self.patterns = COMPILED_PATTERNS if patterns is None else patterns

    def match_pattern(self, word: str):
        """Return the first pattern dict that hits word, or None."""
        for pattern in self.patterns:
            m = pattern["regex"].search(word)
            if not m:
                continue
            value = m.groupdict().get("value")
            if value is not None and is_placeholder(value):
                continue
            return pattern
        return None

    def test(self, word: str):
        if self.match_pattern(word) is not None:
            return word
        return None
