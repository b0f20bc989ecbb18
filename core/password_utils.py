# core/password_utils.py
from __future__ import annotations
import logging, random
from typing import List, Optional, Protocol

from core.settings_utils import Settings

logger = logging.getLogger(__name__)

# --------- Character sets ---------
LOWER = "abcdefghijklmnopqrstuvwxyz"
UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
NUMBERS = "0123456789"
SYMBOLS = "!@#$%^&*()-_=+[]{};:,.<>/?"

# Characters often confused visually
SIMILAR = "0O1lI|`'\""


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


# OS CSPRNG, an toàn khi dùng chung giữa các thread
_default_rng = random.SystemRandom()


# --------- Helpers ---------
def strip_similar(chars: str) -> str:
    return "".join(ch for ch in chars if ch not in SIMILAR)


def build_pools(settings: Settings) -> List[str]:
    """Enabled class alphabets in canonical order: lower, upper, numbers, symbols."""
    pools: List[str] = []
    if settings.include_lower:
        pools.append(LOWER)
    if settings.include_upper:
        pools.append(UPPER)
    if settings.include_numbers:
        pools.append(NUMBERS)
    if settings.include_symbols:
        pools.append(SYMBOLS)
    return pools


def build_allowed(pools: List[str], exclude_similar: bool = False) -> str:
    """
    Returns the alphabet sampled by the fill step.
    - exclude_similar: drop look-alike chars and dedupe (first occurrence wins)
    - if that leaves nothing, the unfiltered concatenation is used instead
    """
    joined = "".join(pools)
    if not exclude_similar:
        return joined
    filtered = "".join(dict.fromkeys(strip_similar(joined)))
    if not filtered:
        logger.warning("Excluding similar characters empties the pool; keeping them.")
        return joined
    return filtered


def generation_notices(settings: Settings) -> List[str]:
    """Conditions worth showing the user before/after generating; nothing is raised."""
    notices: List[str] = []
    pools = build_pools(settings)
    if settings.length <= 0 or not pools:
        return notices
    if settings.exclude_similar_chars and not strip_similar("".join(pools)):
        notices.append("Excluding similar characters would leave nothing to pick from; they were kept.")
    if settings.guarantee_each_type and len(pools) > settings.length:
        notices.append(
            f"Length {settings.length} is shorter than the {len(pools)} selected character types; "
            f"only the first {settings.length} are guaranteed."
        )
    return notices


def _pick(rng: RandomSource, chars: str) -> str:
    return chars[rng.randrange(len(chars))]


def shuffle_in_place(items: list, rng: RandomSource) -> None:
    # Fisher–Yates
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]


# --------- Generator ---------
def generate_password(settings: Settings, rng: Optional[RandomSource] = None) -> str:
    """
    Generate one password for `settings`.
    Returns "" when length <= 0 or no character class is enabled.
    """
    rng = rng or _default_rng
    length = settings.length
    if length <= 0:
        return ""

    pools = build_pools(settings)
    if not pools:
        return ""

    allowed = build_allowed(pools, settings.exclude_similar_chars)

    pw_chars: List[str] = []
    if settings.guarantee_each_type:
        if len(pools) > length:
            logger.warning("Guarantee mode: %d classes for length %d, capping.", len(pools), length)
        for pool in pools[:length]:
            if settings.exclude_similar_chars:
                pool = strip_similar(pool)
            if pool:
                pw_chars.append(_pick(rng, pool))

    while len(pw_chars) < length:
        pw_chars.append(_pick(rng, allowed))

    shuffle_in_place(pw_chars, rng)
    return "".join(pw_chars[:length])
