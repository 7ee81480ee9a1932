"""
CommitLens file content detector.

Each addition is split into lines and each line into whitespace separated
words. A word is a secret when one of its base64 alphabet runs longer than
the minimum secret length has a Shannon entropy above the threshold. The
first such word ends the scan of that file and is reported as a failure.
"""
import logging
from typing import Iterator, Optional, Protocol

from detector.aggressive import AggressiveDetector
from detector.config import DetectorConfig
from detector.entropy import entropy_candidates, shannon_entropy
from detector.patterns import IGNORE_FILE_NAME

_log = logging.getLogger(__name__)


class SecondaryDetector(Protocol):
    def test(self, word: str) -> Optional[str]:
        ...


def iter_words(content: str) -> Iterator[str]:
    """Yield words line by line (top to bottom), left to right."""
    for line in content.split("\n"):
        yield from line.split()


class FileContentDetector:
    name = "filecontent"

    def __init__(self, config: DetectorConfig = None, secondary: SecondaryDetector = None):
        self.config = config or DetectorConfig()
        self.secondary = secondary

    @classmethod
    def from_config(cls, config: DetectorConfig) -> "FileContentDetector":
        """Build a detector, with the aggressive fallback when config asks for it."""
        secondary = None
        if config.aggressive:
            secondary = AggressiveDetector()
        return cls(config, secondary)

    # ─── Classification ───────────────────────────────────────────────────────

    def candidates(self, word: str) -> list:
        return entropy_candidates(word, self.config.min_secret_length, self.config.charset)

    def classify(self, word: str) -> Optional[str]:
        """Return word if it looks like an encoded secret, else None."""
        for candidate in self.candidates(word):
            if shannon_entropy(candidate, self.config.alphabet) > self.config.entropy_threshold:
                return word
        if self.secondary is not None:
            return self.secondary.test(word)
        return None

    def check_content(self, content: str) -> Optional[str]:
        """First matching word of content, or None when every word is clean."""
        for word in iter_words(content):
            match = self.classify(word)
            if match:
                return match
        return None

    def check_data(self, data: bytes) -> Optional[str]:
        # Invalid UTF-8 decodes to U+FFFD, which ends any alphabet run.
        if isinstance(data, str):
            return self.check_content(data)
        return self.check_content(data.decode("utf-8", errors="replace"))

    # ─── Scanning ─────────────────────────────────────────────────────────────

    def test(self, additions, ignores, results) -> None:
        for addition in additions:
            if ignores.deny(addition, self.name):
                _log.info("Ignoring addition %s as it was specified to be ignored.", addition.path)
                results.ignore(addition.path, f"{addition.path} was ignored by {IGNORE_FILE_NAME}")
                continue
            match = self.check_data(addition.data)
            if match:
                _log.info("Failing file %s as it contains a base64 encoded text.", addition.path)
                results.fail(
                    addition.path,
                    f"Expected file to not to contain base64 encoded texts such as: {match}",
                )
