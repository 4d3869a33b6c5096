"""
passforge.generator
Random password generator with one guaranteed character per enabled class.
"""

import logging
from random import SystemRandom
from typing import Iterable, List

from .charsets import CharacterClass, canonical_order, coerce_class, combined_alphabet
from .errors import InvalidLengthError, NoCharacterClassError


logger = logging.getLogger(__name__)

_sysrand = SystemRandom()


def _check_count(value, what: str) -> int:
    # bool is an int subclass; True is not a length
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidLengthError(f"invalid {what}: expected an integer, got {value!r}")
    if value < 1:
        raise InvalidLengthError(f"invalid {what}: must be >= 1, got {value}")
    return value


def _pick(alphabet: str, rng) -> str:
    return alphabet[rng.randrange(len(alphabet))]


def _shuffle(chars: List[str], rng) -> None:
    """In-place Fisher-Yates shuffle."""
    for i in range(len(chars) - 1, 0, -1):
        j = rng.randrange(i + 1)
        chars[i], chars[j] = chars[j], chars[i]


def generate(
    length: int,
    classes: Iterable[CharacterClass],
    rng=None,
) -> str:
    """
    Generate a password of `length` characters drawn from `classes`.

    Every enabled class contributes at least one character. If `length` is
    smaller than the number of classes, the result is clamped up to one
    character per class.

    `rng` is any object with a `randrange` method (e.g. `random.Random(seed)`);
    a SystemRandom instance is used when omitted.
    """
    _check_count(length, "length")
    enabled = canonical_order(coerce_class(c) for c in classes)
    if not enabled:
        raise NoCharacterClassError()
    if rng is None:
        rng = _sysrand

    if length < len(enabled):
        logger.warning(
            "length %d is smaller than the %d selected classes; clamping to %d",
            length, len(enabled), len(enabled),
        )
    logger.debug("generating %d chars from %s", max(length, len(enabled)),
                 ",".join(c.value for c in enabled))

    password_chars = [_pick(c.alphabet, rng) for c in enabled]

    all_chars = combined_alphabet(enabled)
    for _ in range(max(0, length - len(enabled))):
        password_chars.append(_pick(all_chars, rng))

    _shuffle(password_chars, rng)
    return "".join(password_chars)


def generate_many(
    count: int,
    length: int,
    classes: Iterable[CharacterClass],
    rng=None,
) -> List[str]:
    _check_count(count, "count")
    classes = list(classes)
    return [generate(length, classes, rng) for _ in range(count)]
