"""
CommitLens ignore policy — .commitlensignore parser and path matcher.
"""
import os
import fnmatch

from detector.patterns import IGNORE_FILE_NAME


# ─── Parsing (.commitlensignore) ──────────────────────────────────────────────

def parse_ignores(text: str) -> dict:
    """
    Parse ignore file text.
    Returns {'global': [...], 'detectors': {detector_name: [...]}}
    """
    rules = {"global": [], "detectors": {}}
    current_section = None
    for line in text.splitlines():
        line = line.split("#", 1)[0].strip()
        if not line:
            continue
        if line.startswith("[") and line.endswith("]"):
            current_section = line[1:-1].strip()
            rules["detectors"].setdefault(current_section, [])
        elif current_section:
            rules["detectors"][current_section].append(line)
        else:
            rules["global"].append(line)
    return rules


def load_ignores(root: str) -> "Ignores":
    """Load .commitlensignore from root; a missing file denies nothing."""
    ignore_file = os.path.join(root, IGNORE_FILE_NAME)
    try:
        with open(ignore_file, "r", encoding="utf-8", errors="ignore") as f:
            return Ignores(parse_ignores(f.read()))
    except OSError:
        return Ignores()


# ─── Matching ─────────────────────────────────────────────────────────────────

def matches(path: str, pattern: str) -> bool:
    """fnmatch against a forward-slash path; a trailing '/' matches a directory tree."""
    rel = path.replace("\\", "/").lstrip("/")
    if pattern.endswith("/"):
        prefix = pattern.lstrip("/")
        return rel.startswith(prefix) or fnmatch.fnmatch(rel, prefix + "*")
    return fnmatch.fnmatch(rel, pattern.lstrip("/"))


class Ignores:
    """Decides whether an addition is exempt from a detector."""

    def __init__(self, rules: dict = None):
        rules = rules or {}
        self._global = tuple(rules.get("global", ()))
        self._detectors = {
            name: tuple(patterns)
            for name, patterns in rules.get("detectors", {}).items()
        }

    @classmethod
    def from_patterns(cls, patterns) -> "Ignores":
        return cls({"global": list(patterns)})

    def deny(self, addition, detector: str = None) -> bool:
        """Return True if addition should not be scanned (by detector, when named)."""
        for pattern in self._global:
            if matches(addition.path, pattern):
                return True
        if detector is not None:
            for pattern in self._detectors.get(detector, ()):
                if matches(addition.path, pattern):
                    return True
        return False
