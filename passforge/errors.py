"""
passforge.errors
Exception hierarchy shared by the generator, scorer, config and adapters.
"""


class PassforgeError(Exception):
    """Base class for every error raised by passforge."""


class GenerationError(PassforgeError, ValueError):
    """A password could not be generated from the given arguments."""


class NoCharacterClassError(GenerationError):
    def __init__(self, message: str = "no character class selected"):
        super().__init__(message)


class InvalidLengthError(GenerationError):
    def __init__(self, message: str = "invalid length"):
        super().__init__(message)


class UnknownCharacterClassError(GenerationError):
    def __init__(self, name):
        super().__init__(f"unknown character class: {name!r}")
        self.name = name


class ConfigError(PassforgeError):
    """Settings file is unreadable or holds invalid values."""
