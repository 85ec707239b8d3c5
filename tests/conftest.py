"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Iterable, List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mines import GameConfig, GameState, Grid, Tile


# ============================================================================
# Random Source Stub
# ============================================================================

class ScriptedRng:
    """
    Stands in for numpy.random.Generator with a fixed list of draws.

    Each call to integers(high) returns the next scripted value; a
    ValueError is raised if that value is out of range.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.values: List[int] = list(values)
        self.calls: List[int] = []

    def integers(self, high: int) -> int:
        self.calls.append(high)
        value = self.values.pop(0) if self.values else 0
        if not 0 <= value < high:
            raise ValueError(f"scripted value {value} not in [0, {high})")
        return value


def mines_at(grid: Grid) -> List[tuple]:
    """List (x, y) of every mined tile."""
    return [pos for pos in grid.positions() if grid.is_mine(*pos)]


def game_with_mines(width: int, height: int, mines: Iterable[tuple]) -> GameState:
    """
    Create an active game with mines at exactly the given positions.

    Mines are placed normally, then moved onto the targets so the mine
    count stays what the game expects.
    """
    targets = set(mines)
    state = GameState(GameConfig(width, height, len(targets)), ScriptedRng([]))
    state.ensure_mines()
    for x, y in state.grid.positions():
        state.grid.tile(x, y).mine = (x, y) in targets
    return state


# ============================================================================
# Grid Fixtures
# ============================================================================

@pytest.fixture
def empty_grid() -> Grid:
    """Create a 5x5 grid with no mines placed."""
    return Grid(5, 5)


@pytest.fixture
def corner_mine_grid() -> Grid:
    """Create a 3x3 grid with a single mine at (0, 0)."""
    grid = Grid(3, 3)
    grid.place_mines(1, ScriptedRng([0, 0]))
    return grid


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def fresh_game() -> GameState:
    """Create a fresh 9x9 game with 10 mines."""
    return GameState(GameConfig(9, 9, 10), ScriptedRng([]))


@pytest.fixture
def single_mine_game() -> GameState:
    """Create an active 5x5 game with one mine at C4 (x=2, y=3)."""
    return game_with_mines(5, 5, [(2, 3)])


# ============================================================================
# Tile Fixtures
# ============================================================================

@pytest.fixture
def concealed_tile() -> Tile:
    """Create a concealed tile."""
    return Tile()


@pytest.fixture
def mine_tile() -> Tile:
    """Create a tile containing a mine."""
    return Tile(mine=True)
