"""
Game configuration.

Holds the validated board dimensions, mine count and the text printed
between frames.
"""
from dataclasses import dataclass

from .errors import ConfigError


# ============================================================================
# Constants
# ============================================================================

MIN_WIDTH = 1
MAX_WIDTH = 26
MIN_HEIGHT = 1
MAX_HEIGHT = 30
MIN_MINES = 0

DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 20
DEFAULT_MINES = 40
DEFAULT_SEPARATOR = "\n\n\n\n"

# Column names; the board is never wider than the alphabet.
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def validate_dimensions(width: int, height: int) -> None:
    """Raise ConfigError unless the board fits the supported bounds."""
    if not MIN_WIDTH <= width <= MAX_WIDTH:
        raise ConfigError(
            f"width must be between {MIN_WIDTH} and {MAX_WIDTH}"
        )
    if not MIN_HEIGHT <= height <= MAX_HEIGHT:
        raise ConfigError(
            f"height must be between {MIN_HEIGHT} and {MAX_HEIGHT}"
        )


# ============================================================================
# Game Configuration
# ============================================================================

@dataclass
class GameConfig:
    """
    Configuration for a game of mines.

    Attributes:
        width: Number of columns (1-26).
        height: Number of rows (1-30).
        num_mines: Mines to hide; clamped to the number of tiles.
        separator: Text printed before each frame of the board.
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    num_mines: int = DEFAULT_MINES
    separator: str = DEFAULT_SEPARATOR

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid, clamping the mine count."""
        validate_dimensions(self.width, self.height)
        if self.num_mines < MIN_MINES:
            raise ConfigError("Number of mines cannot be negative")
        self.num_mines = min(self.num_mines, self.area)

    @property
    def area(self) -> int:
        """Total number of tiles."""
        return self.width * self.height
