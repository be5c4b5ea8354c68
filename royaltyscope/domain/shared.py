"""Shared numeric and string helpers for the matching and valuation engines.

Pure utility functions with no I/O.
"""

import math
import re

from rapidfuzz.distance import Jaro

_PUNCTUATION = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")

# Winkler boost per shared prefix character, applied at any Jaro score
WINKLER_PREFIX_WEIGHT = 0.1
WINKLER_MAX_PREFIX = 4


def clamp(value: float, lower: float, upper: float) -> float:
    """Limit value to the closed interval [lower, upper]."""
    return max(lower, min(upper, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return math.floor(value + 0.5)


def normalize_text(text: str | None) -> str:
    """Lowercase, strip punctuation and collapse whitespace for comparison."""
    if not text:
        return ""
    text = _PUNCTUATION.sub("", text.lower())
    return _WHITESPACE.sub(" ", text).strip()


def _common_prefix_length(left: str, right: str) -> int:
    prefix = 0
    for a, b in zip(left[:WINKLER_MAX_PREFIX], right[:WINKLER_MAX_PREFIX]):
        if a != b:
            break
        prefix += 1
    return prefix


def compute_similarity(a: str | None, b: str | None) -> float:
    """Case-insensitive Jaro-Winkler similarity between two strings.

    Both inputs are normalized first. Identical normalized strings score
    exactly 1.0 (including two empty strings); a single empty side scores 0.0.
    The Winkler prefix boost applies at every Jaro score, not only above 0.7.
    """
    left, right = normalize_text(a), normalize_text(b)

    if left == right:
        return 1.0
    if not left or not right:
        return 0.0

    jaro = Jaro.similarity(left, right)
    prefix = _common_prefix_length(left, right)
    return jaro + WINKLER_PREFIX_WEIGHT * prefix * (1 - jaro)
