"""
passforge.scorer

Strength rating based on length and character variety:
- character_variety(password): how many of lower/upper/digit/symbol appear
- score(password): one of four ordered StrengthTier values
- strength_bars(tier): colors for a 4-segment indicator
- describe(password): plain dict for the CLI and HTTP adapters
"""

from enum import Enum
from functools import total_ordering
from typing import Dict, List, Optional

from .charsets import CharacterClass

EMPTY_BAR_COLOR = "#08070B"
BAR_SEGMENTS = 4


@total_ordering
class StrengthTier(Enum):
    TOO_WEAK = (1, "Too Weak", "#f64a4a")
    WEAK = (2, "Weak", "#fb7c58")
    MEDIUM = (3, "Medium", "#f8cd65")
    STRONG = (4, "Strong", "#a4ffaf")

    def __init__(self, rank: int, label: str, color: str):
        self.rank = rank
        self.label = label
        self.color = color

    def __lt__(self, other):
        if not isinstance(other, StrengthTier):
            return NotImplemented
        return self.rank < other.rank

    def __str__(self):
        return self.label


def character_variety(password: str) -> int:
    return sum(
        1 for cls in CharacterClass if any(cls.contains(ch) for ch in password)
    )


def score(password: str) -> StrengthTier:
    """Classify a password; the first matching rule wins."""
    length = len(password)
    variety = character_variety(password)

    if length < 8:
        return StrengthTier.TOO_WEAK
    if variety == 1:
        return StrengthTier.WEAK
    if length >= 12 and variety >= 3:
        return StrengthTier.STRONG
    if variety >= 2:
        return StrengthTier.MEDIUM
    # only reachable with no recognised characters at all
    return StrengthTier.WEAK


def strength_bars(tier: Optional[StrengthTier], segments: int = BAR_SEGMENTS) -> List[str]:
    filled = tier.rank if tier is not None else 0
    color = tier.color if tier is not None else EMPTY_BAR_COLOR
    return [color if i < filled else EMPTY_BAR_COLOR for i in range(segments)]


def describe(password: str) -> Dict:
    """
    Score `password` and return a JSON-friendly summary:
    {"label", "rank", "color", "variety", "length", "bars"}
    """
    tier = score(password)
    return {
        "label": tier.label,
        "rank": tier.rank,
        "color": tier.color,
        "variety": character_variety(password),
        "length": len(password),
        "bars": strength_bars(tier),
    }
