"""
passforge.charsets
The four character classes a password can be built from, and helpers to
select them from flags or names.
"""

from enum import Enum
from typing import FrozenSet, Iterable

from .errors import UnknownCharacterClassError


class CharacterClass(Enum):
    UPPERCASE = "upper"
    LOWERCASE = "lower"
    NUMBER = "number"
    SYMBOL = "symbol"

    @property
    def alphabet(self) -> str:
        return _ALPHABETS[self]

    def contains(self, ch: str) -> bool:
        return ch in _ALPHABETS[self]


# alphabets are disjoint; keep them byte-for-byte stable
_ALPHABETS = {
    CharacterClass.UPPERCASE: "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    CharacterClass.LOWERCASE: "abcdefghijklmnopqrstuvwxyz",
    CharacterClass.NUMBER: "0123456789",
    CharacterClass.SYMBOL: "!@#$%^&*()_+[]{}|;:,.<>?/~`=-",
}

ALL_CLASSES: FrozenSet[CharacterClass] = frozenset(CharacterClass)

# accepted spellings for parse_classes()
_ALIASES = {
    "upper": CharacterClass.UPPERCASE,
    "uppercase": CharacterClass.UPPERCASE,
    "lower": CharacterClass.LOWERCASE,
    "lowercase": CharacterClass.LOWERCASE,
    "number": CharacterClass.NUMBER,
    "numbers": CharacterClass.NUMBER,
    "digit": CharacterClass.NUMBER,
    "digits": CharacterClass.NUMBER,
    "symbol": CharacterClass.SYMBOL,
    "symbols": CharacterClass.SYMBOL,
}


def canonical_order(classes: Iterable[CharacterClass]) -> list:
    """Return the distinct classes in declaration order."""
    wanted = set(classes)
    return [c for c in CharacterClass if c in wanted]


def coerce_class(value) -> CharacterClass:
    """Accept a CharacterClass member or any of its accepted names."""
    if isinstance(value, CharacterClass):
        return value
    if isinstance(value, str):
        cls = _ALIASES.get(value.strip().lower())
        if cls is not None:
            return cls
    raise UnknownCharacterClassError(value)


def parse_classes(names: Iterable[str]) -> FrozenSet[CharacterClass]:
    """
    Turn class names into a set, e.g. ["upper", "digits"].
    A single comma separated string is accepted too.
    """
    if isinstance(names, str):
        names = [n for n in names.split(",") if n.strip()]
    return frozenset(coerce_class(n) for n in names)


def select_classes(
    upper: bool = True,
    lower: bool = True,
    digits: bool = True,
    symbols: bool = True,
) -> FrozenSet[CharacterClass]:
    flags = (
        (upper, CharacterClass.UPPERCASE),
        (lower, CharacterClass.LOWERCASE),
        (digits, CharacterClass.NUMBER),
        (symbols, CharacterClass.SYMBOL),
    )
    return frozenset(cls for enabled, cls in flags if enabled)


def combined_alphabet(classes: Iterable[CharacterClass]) -> str:
    return "".join(c.alphabet for c in canonical_order(classes))
