"""
CommitLens entropy helpers — alphabet membership, Shannon entropy and
candidate extraction. All functions are pure.
"""
import math

from detector.patterns import BASE64_CHARS


def alphabet_set(alphabet: str = BASE64_CHARS) -> frozenset:
    """Return an immutable membership set for the characters of alphabet."""
    return frozenset(alphabet)


BASE64_SET = alphabet_set(BASE64_CHARS)


def shannon_entropy(candidate: str, superset: str = BASE64_CHARS) -> float:
    """
    Shannon entropy (bits per symbol) of candidate over the closed symbol
    universe superset. Every symbol of the universe is visited once, so the
    result stays comparable against one fixed threshold.
    """
    if not candidate:
        return 0.0
    length = len(candidate)
    entropy = 0.0
    for c in superset:
        p = candidate.count(c) / length
        if p > 0:
            entropy -= p * math.log2(p)
    return entropy


def entropy_candidates(word: str, min_length: int, superset: frozenset) -> list:
    """
    Split word into maximal runs of superset characters and return those
    strictly longer than min_length, in order of appearance.
    Runs are never joined across a character outside superset.
    """
    candidates = []
    if len(word) < min_length:
        return candidates

    run = []
    for char in word:
        if char in superset:
            run.append(char)
            continue
        if len(run) > min_length:
            candidates.append("".join(run))
        run = []

    if len(run) > min_length:
        candidates.append("".join(run))
    return candidates
