"""
Exceptions raised by the mines game.
"""


class MinesError(Exception):
    """Base class for all game errors."""


class ConfigError(MinesError, ValueError):
    """Board width, height or mine count is out of bounds."""


class ParseError(MinesError, ValueError):
    """A player command could not be understood."""


class CommandTooLongError(ParseError):
    """A player command exceeds the maximum command length."""
