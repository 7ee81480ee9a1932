"""
CommitLens filename detector — flags additions whose name alone suggests a
credential store. Content is never read.
"""
import logging
import os

from detector.patterns import FLAGGED_EXTENSIONS, FLAGGED_NAMES, FLAGGED_EXACT_NAMES, IGNORE_FILE_NAME

_log = logging.getLogger(__name__)


def suspicious_reason(path: str):
    """Return a failure message for a suspicious filename, or None."""
    name = path.replace("\\", "/").rsplit("/", 1)[-1].lower()
    stem, ext = os.path.splitext(name)

    if name in FLAGGED_EXACT_NAMES:
        return f'The file name "{path}" failed checks against the pattern {name}'
    if ext in FLAGGED_EXTENSIONS:
        return f'The file name "{path}" has a sensitive extension {ext}'
    for fragment in FLAGGED_NAMES:
        if fragment in stem:
            return f'The file name "{path}" failed checks against the pattern {fragment}'
    return None


class FileNameDetector:
    name = "filename"

    def test(self, additions, ignores, results) -> None:
        for addition in additions:
            if ignores.deny(addition, self.name):
                results.ignore(addition.path, f"{addition.path} was ignored by {IGNORE_FILE_NAME}")
                continue
            reason = suspicious_reason(addition.path)
            if reason:
                _log.info("Failing file %s as its name looks sensitive.", addition.path)
                results.fail(addition.path, reason)
