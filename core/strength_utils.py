# core/strength_utils.py
from __future__ import annotations
import math, re
from typing import List, NamedTuple, Optional

# (name, pattern, pool contribution)
_CLASSES = [
    ("Lowercase", re.compile(r"[a-z]"), 26),
    ("Uppercase", re.compile(r"[A-Z]"), 26),
    ("Digits",    re.compile(r"[0-9]"), 10),
    ("Symbols",   re.compile(r"[!@#$%^&*()\-_=+\[\]{};:,.<>/?]"), 32),
]

LABELS = ["Very weak", "Weak", "Okay", "Strong", "Very strong"]
TOO_SHORT = "Too short"


class Strength(NamedTuple):
    score: int
    label: str


def pool_size(password: Optional[str]) -> int:
    if not password:
        return 0
    return sum(size for _, rx, size in _CLASSES if rx.search(password))


def entropy_bits(password: Optional[str]) -> float:
    size = pool_size(password)
    if size <= 0:
        return 0.0
    return len(password) * math.log2(size)


def score_for_bits(bits: float) -> int:
    if bits > 80: return 4
    if bits > 60: return 3
    if bits > 40: return 2
    if bits > 20: return 1
    return 0


def estimate_strength(password: Optional[str]) -> Strength:
    """
    Crude strength estimate from length and the character classes present.
    Never raises; characters outside the four classes count for nothing.
    """
    if not password:
        return Strength(0, TOO_SHORT)
    score = score_for_bits(entropy_bits(password))
    return Strength(score, LABELS[score])


def strength_breakdown(password: Optional[str]) -> List[dict]:
    """Per-class presence and pool contribution, for display."""
    rows = []
    for name, rx, size in _CLASSES:
        present = bool(password) and rx.search(password) is not None
        rows.append({"Class": name, "Present": present, "Pool": size if present else 0})
    return rows
