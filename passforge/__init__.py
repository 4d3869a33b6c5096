"""passforge — random password generator and strength rating."""

from .charsets import CharacterClass, parse_classes, select_classes
from .errors import (
    PassforgeError,
    GenerationError,
    NoCharacterClassError,
    InvalidLengthError,
    UnknownCharacterClassError,
    ConfigError,
)
from .generator import generate, generate_many
from .scorer import StrengthTier, score, strength_bars, describe

__version__ = "0.1.0"
