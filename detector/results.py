"""
CommitLens detection results — per-path failure and ignore messages.
A path with no recorded message passed.
"""
from types import MappingProxyType


class DetectionResults:
    def __init__(self):
        self._failures = {}
        self._ignores = {}

    def fail(self, path: str, message: str) -> None:
        self._failures.setdefault(path, []).append(message)

    def ignore(self, path: str, reason: str) -> None:
        reasons = self._ignores.setdefault(path, [])
        if reason not in reasons:
            reasons.append(reason)

    @property
    def failures(self):
        return MappingProxyType(self._failures)

    @property
    def ignores(self):
        return MappingProxyType(self._ignores)

    def has_failures(self) -> bool:
        return bool(self._failures)

    def has_ignores(self) -> bool:
        return bool(self._ignores)

    def successful(self) -> bool:
        return not self.has_failures()

    def to_dict(self) -> dict:
        """JSON-serialisable view, lists copied."""
        return {
            "passed": self.successful(),
            "failures": {p: list(m) for p, m in self._failures.items()},
            "ignores": {p: list(m) for p, m in self._ignores.items()},
        }

    def report(self) -> str:
        """Human-readable multi-line summary, failures first."""
        lines = []
        for path, messages in self._failures.items():
            lines.append(f"FAIL    {path}")
            lines.extend(f"        - {m}" for m in messages)
        for path, reasons in self._ignores.items():
            lines.append(f"IGNORED {path}")
            lines.extend(f"        - {r}" for r in reasons)
        if not self._failures:
            lines.append("No secrets detected.")
        else:
            lines.append(f"{len(self._failures)} file(s) failed checks.")
        return "\n".join(lines)
