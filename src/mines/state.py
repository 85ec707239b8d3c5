"""
Game state for the mines game.

Tracks flag counters, the phase of play (fresh, active, won, lost, quit)
and applies flag, reveal and quit moves to the grid.
"""
import logging
from enum import Enum, auto
from typing import Optional

import numpy as np

from .config import GameConfig
from .grid import Grid
from .render import RenderSnapshot
from .reveal import reveal


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class Phase(Enum):
    """Lifecycle of a game."""

    FRESH = auto()
    ACTIVE = auto()
    WON = auto()
    LOST = auto()
    QUIT = auto()


class Status(Enum):
    """Outcome of a single command."""

    CONTINUE = auto()
    WON = auto()
    LOST = auto()
    QUIT = auto()


_TERMINAL_STATUS = {
    Phase.WON: Status.WON,
    Phase.LOST: Status.LOST,
    Phase.QUIT: Status.QUIT,
}

SCORE_SCALE = 1000


# ============================================================================
# Game State
# ============================================================================

class GameState:
    """
    A single game of mines.

    Mines are placed lazily by the first flag or reveal so that the first
    revealed tile can be kept free of a mine. Invariant:
    0 <= found_count <= flag_count <= mine_count.
    """

    def __init__(
        self,
        config: GameConfig,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Initialize a fresh game.

        Args:
            config: Validated board configuration.
            rng: Random source for mine placement (default: fresh
                numpy generator).
        """
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng()
        self.grid = Grid(config.width, config.height)
        self.flag_count = 0
        self.found_count = 0
        self.phase = Phase.FRESH

    # ========================================================================
    # Setup
    # ========================================================================

    def ensure_mines(self) -> bool:
        """
        Place the mines if that has not happened yet.

        Returns:
            True if the mines were placed by this call.
        """
        if self.grid.mines_placed:
            return False
        self.grid.place_mines(self.config.num_mines, self.rng)
        self._set_phase(Phase.ACTIVE)
        return True

    def _set_phase(self, phase: Phase) -> None:
        if phase != self.phase:
            logger.debug("Phase %s -> %s", self.phase.name, phase.name)
        self.phase = phase

    def _finish(self, phase: Phase) -> Status:
        self.grid.reveal_all()
        self._set_phase(phase)
        return _TERMINAL_STATUS[phase]

    # ========================================================================
    # Moves
    # ========================================================================

    def flag(self, x: int, y: int) -> Status:
        """
        Toggle the flag on a concealed tile.

        Revealed tiles are left alone. A new flag is refused once every
        mine has a flag. Winning (all mines flagged, nothing else) reveals
        the board.
        """
        if self.is_over:
            return self.status
        if self.grid.is_revealed(x, y):
            return Status.CONTINUE

        self.ensure_mines()
        mine = self.grid.is_mine(x, y)
        if self.grid.is_flagged(x, y):
            self.grid.set_flagged(x, y, False)
            self.flag_count -= 1
            self.found_count -= int(mine)
        elif self.flags_left > 0:
            self.grid.set_flagged(x, y, True)
            self.flag_count += 1
            self.found_count += int(mine)

        if self.is_won_position:
            return self._finish(Phase.WON)
        return Status.CONTINUE

    def reveal(self, x: int, y: int) -> Status:
        """
        Reveal a tile, flood-filling empty regions.

        The first reveal of the game places the mines and moves any mine
        off (x, y). Flagged tiles are not revealed.
        """
        if self.is_over:
            return self.status
        if self.grid.is_flagged(x, y):
            return Status.CONTINUE

        if self.ensure_mines():
            self.grid.relocate_mine(x, y, self.rng)

        if not reveal(self.grid, x, y):
            return self._finish(Phase.LOST)
        return Status.CONTINUE

    def quit(self, confirmed: bool = True) -> Status:
        """
        Quit the game.

        Args:
            confirmed: Player's answer to the confirmation prompt; only
                consulted while the game is active.
        """
        if self.is_over:
            return self.status
        if self.requires_quit_confirmation and not confirmed:
            return Status.CONTINUE
        self.ensure_mines()
        return self._finish(Phase.QUIT)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def initialized(self) -> bool:
        """Check if mines have been placed."""
        return self.grid.mines_placed

    @property
    def mine_count(self) -> int:
        return self.config.num_mines

    @property
    def flags_left(self) -> int:
        return self.mine_count - self.flag_count

    @property
    def is_won_position(self) -> bool:
        """Check if every mine, and nothing else, is flagged."""
        return (
            self.found_count == self.mine_count
            and self.flag_count == self.found_count
        )

    @property
    def requires_quit_confirmation(self) -> bool:
        """Quitting needs confirmation once the player has made a move."""
        return self.phase == Phase.ACTIVE

    @property
    def is_over(self) -> bool:
        return self.phase in _TERMINAL_STATUS

    @property
    def status(self) -> Status:
        return _TERMINAL_STATUS.get(self.phase, Status.CONTINUE)

    @property
    def score(self) -> int:
        """
        Player score: found_count squared, scaled by board area.

        Flagging every mine on a board gives the highest score that board
        allows.
        """
        return self.found_count * self.found_count * SCORE_SCALE // self.config.area

    def snapshot(self) -> RenderSnapshot:
        """Get the render-ready display state."""
        return RenderSnapshot.from_grid(
            self.grid, self.flag_count, self.mine_count
        )


# ============================================================================
# Factory
# ============================================================================

def new_game(
    width: int,
    height: int,
    mine_count: int,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
    separator: Optional[str] = None,
) -> GameState:
    """
    Create a fresh game.

    Args:
        width: Number of columns (1-26).
        height: Number of rows (1-30).
        mine_count: Mines to hide; clamped to the number of tiles.
        rng: Random source; takes precedence over seed.
        seed: Seed for a new numpy generator.
        separator: Text printed before each frame.

    Raises:
        ConfigError: If a parameter is out of bounds.
    """
    config = GameConfig(width, height, mine_count)
    if separator is not None:
        config.separator = separator
    if rng is None:
        rng = np.random.default_rng(seed)
    return GameState(config, rng)


def requires_quit_confirmation(state: GameState) -> bool:
    """Check if quitting must be confirmed by the player."""
    return state.requires_quit_confirmation
