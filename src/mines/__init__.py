"""
Mines: a terminal minesweeper game.

Provides the board engine (grid, flood-fill reveal), the game state
machine and the command interpreter driving turn-by-turn play.
"""
__version__ = "0.4.7"

from .tile import Tile
from .errors import MinesError, ConfigError, ParseError, CommandTooLongError
from .config import GameConfig
from .grid import Grid
from .reveal import reveal
from .render import RenderSnapshot
from .state import GameState, Phase, Status, new_game, requires_quit_confirmation
from .commands import (
    Command,
    CommandInterpreter,
    Flag,
    Help,
    NoOp,
    Outcome,
    Quit,
    Reveal,
    apply_command,
    parse_command,
)

__all__ = [
    "Tile",
    "MinesError",
    "ConfigError",
    "ParseError",
    "CommandTooLongError",
    "GameConfig",
    "Grid",
    "reveal",
    "RenderSnapshot",
    "GameState",
    "Phase",
    "Status",
    "new_game",
    "requires_quit_confirmation",
    "Command",
    "CommandInterpreter",
    "NoOp",
    "Flag",
    "Reveal",
    "Help",
    "Quit",
    "Outcome",
    "apply_command",
    "parse_command",
]
