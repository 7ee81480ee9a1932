"""
CommitLens detector configuration — immutable, validated at construction,
optionally read from COMMITLENS_* environment variables.
"""
import math
import os
from dataclasses import dataclass, field

from detector.entropy import alphabet_set
from detector.patterns import (
    BASE64_CHARS,
    MIN_SECRET_LENGTH,
    BASE64_ENTROPY_THRESHOLD,
)

_TRUE_VALUES = {"1", "true", "yes", "on"}


class ConfigError(ValueError):
    """Raised when a detector configuration value is unusable."""


@dataclass(frozen=True)
class DetectorConfig:
    alphabet: str = BASE64_CHARS
    min_secret_length: int = MIN_SECRET_LENGTH
    entropy_threshold: float = BASE64_ENTROPY_THRESHOLD
    aggressive: bool = False
    charset: frozenset = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.alphabet:
            raise ConfigError("alphabet must not be empty")
        if isinstance(self.min_secret_length, bool) or not isinstance(self.min_secret_length, int):
            raise ConfigError(f"min_secret_length must be an integer, got {self.min_secret_length!r}")
        if self.min_secret_length <= 0:
            raise ConfigError(f"min_secret_length must be positive, got {self.min_secret_length}")
        if isinstance(self.entropy_threshold, bool) or not isinstance(self.entropy_threshold, (int, float)):
            raise ConfigError(f"entropy_threshold must be a number, got {self.entropy_threshold!r}")
        if not math.isfinite(self.entropy_threshold) or self.entropy_threshold <= 0:
            raise ConfigError(f"entropy_threshold must be a positive finite number, got {self.entropy_threshold}")
        if not isinstance(self.aggressive, bool):
            raise ConfigError(f"aggressive must be a boolean, got {self.aggressive!r}")

        # Duplicate symbols would be counted twice by the entropy sum.
        object.__setattr__(self, "alphabet", "".join(dict.fromkeys(self.alphabet)))
        object.__setattr__(self, "entropy_threshold", float(self.entropy_threshold))
        object.__setattr__(self, "charset", alphabet_set(self.alphabet))

    @classmethod
    def from_env(cls, environ=None) -> "DetectorConfig":
        """Build a configuration from COMMITLENS_* variables, defaults elsewhere."""
        env = os.environ if environ is None else environ
        kwargs = {}

        if env.get("COMMITLENS_ALPHABET"):
            kwargs["alphabet"] = env["COMMITLENS_ALPHABET"]
        try:
            if env.get("COMMITLENS_MIN_SECRET_LENGTH"):
                kwargs["min_secret_length"] = int(env["COMMITLENS_MIN_SECRET_LENGTH"])
            if env.get("COMMITLENS_ENTROPY_THRESHOLD"):
                kwargs["entropy_threshold"] = float(env["COMMITLENS_ENTROPY_THRESHOLD"])
        except ValueError as e:
            raise ConfigError(f"Invalid numeric setting: {e}") from e
        kwargs["aggressive"] = env.get("COMMITLENS_AGGRESSIVE", "").strip().lower() in _TRUE_VALUES

        return cls(**kwargs)

    def with_overrides(self, **overrides) -> "DetectorConfig":
        """Return a copy with every non-None override applied."""
        values = {
            "alphabet": self.alphabet,
            "min_secret_length": self.min_secret_length,
            "entropy_threshold": self.entropy_threshold,
            "aggressive": self.aggressive,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return DetectorConfig(**values)
