"""
Grid module for the mines game.

Owns the two-dimensional array of tiles and implements mine placement,
mine relocation and adjacency counting. The grid knows nothing about
commands or rendering.

Coordinates are (x, y): x is the column, y the row, both zero-based.
"""
import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

import numpy as np

from .config import validate_dimensions
from .tile import Tile


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

NEIGHBOR_OFFSETS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1), (0, 1), (1, 1),
)


# ============================================================================
# Grid Class
# ============================================================================

@dataclass
class Grid:
    """
    Board of width x height tiles.

    Mines are placed exactly once via place_mines(). From then on the
    number of mined tiles never changes; relocate_mine() moves a mine
    but keeps the total.
    """

    width: int
    height: int
    _tiles: List[List[Tile]] = field(default_factory=list, repr=False)
    _mine_count: int = 0
    _mines_placed: bool = False

    def __post_init__(self) -> None:
        """Validate dimensions and allocate concealed, mine-free tiles."""
        validate_dimensions(self.width, self.height)
        self._tiles = [
            [Tile() for _ in range(self.width)]
            for _ in range(self.height)
        ]

    # ========================================================================
    # Position Utilities (Low-level)
    # ========================================================================

    def is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_position(self, x: int, y: int) -> None:
        # Commands are parsed against the board size before they get here.
        assert self.is_valid_position(x, y), f"({x}, {y}) is off the board"

    def positions(self) -> Iterator[Tuple[int, int]]:
        """Yield every (x, y) in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """
        Get in-bounds positions around a tile.

        Args:
            x: Column of the center tile.
            y: Row of the center tile.

        Returns:
            List of (x, y) tuples, clipped at the edges (no wraparound).
        """
        result = []
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if self.is_valid_position(nx, ny):
                result.append((nx, ny))
        return result

    # ========================================================================
    # Mine Placement
    # ========================================================================

    def place_mines(self, count: int, rng: np.random.Generator) -> None:
        """
        Hide mines on the board.

        The first `count` tiles in row-major order are given mines, then
        each of those tiles, in the same order, is swapped with a tile at
        a random position. This swaps once per mine rather than once per
        tile, so the resulting layout only approximates a uniform draw.

        Args:
            count: Number of mines; clamped to the number of tiles.
            rng: Source of random integers.

        Raises:
            RuntimeError: If mines have already been placed.
        """
        if self._mines_placed:
            raise RuntimeError("Mines have already been placed")
        count = max(0, min(count, self.width * self.height))
        self._mines_placed = True
        self._mine_count = count

        seeded = []
        for x, y in self.positions():
            if len(seeded) == count:
                break
            self._tiles[y][x].mine = True
            seeded.append((x, y))

        for x, y in seeded:
            other_x = int(rng.integers(self.width))
            other_y = int(rng.integers(self.height))
            self._tiles[y][x], self._tiles[other_y][other_x] = (
                self._tiles[other_y][other_x],
                self._tiles[y][x],
            )
        logger.debug(
            "Placed %d mines on %dx%d grid", count, self.width, self.height
        )

    def relocate_mine(self, x: int, y: int, rng: np.random.Generator) -> None:
        """
        Move the mine at (x, y), if any, to a random mine-free tile.

        The destination is the n-th free tile in row-major order, n drawn
        uniformly over the free tiles. Nothing happens when (x, y) holds no
        mine or every tile is mined.
        """
        self._check_position(x, y)
        if not self._tiles[y][x].mine:
            return
        free_tiles = self.width * self.height - self._mine_count
        if free_tiles <= 0:
            return
        nth = int(rng.integers(free_tiles))
        for free_x, free_y in self.positions():
            if self._tiles[free_y][free_x].mine:
                continue
            if nth == 0:
                self._tiles[y][x].mine = False
                self._tiles[free_y][free_x].mine = True
                logger.debug(
                    "Moved mine from (%d, %d) to (%d, %d)",
                    x, y, free_x, free_y,
                )
                return
            nth -= 1

    # ========================================================================
    # Queries
    # ========================================================================

    def adjacent_mine_count(self, x: int, y: int) -> int:
        """Count mines in the 8-neighborhood of (x, y)."""
        self._check_position(x, y)
        count = 0
        for nx, ny in self.neighbors(x, y):
            if self._tiles[ny][nx].mine:
                count += 1
        return count

    def tile(self, x: int, y: int) -> Tile:
        """Get the tile at (x, y)."""
        self._check_position(x, y)
        return self._tiles[y][x]

    def is_mine(self, x: int, y: int) -> bool:
        return self.tile(x, y).mine

    def is_revealed(self, x: int, y: int) -> bool:
        return self.tile(x, y).revealed

    def is_flagged(self, x: int, y: int) -> bool:
        return self.tile(x, y).flagged

    def set_flagged(self, x: int, y: int, flagged: bool) -> None:
        self.tile(x, y).flagged = flagged

    def set_revealed(self, x: int, y: int, revealed: bool) -> None:
        self.tile(x, y).revealed = revealed

    def reveal_all(self) -> None:
        """Mark every tile revealed, for the final display."""
        for row in self._tiles:
            for tile in row:
                tile.revealed = True

    @property
    def mine_count(self) -> int:
        """Mines on the board (0 until placement)."""
        return self._mine_count

    @property
    def mines_placed(self) -> bool:
        return self._mines_placed

    def mine_mask(self) -> np.ndarray:
        """
        Get mine locations as a numpy array.

        Returns:
            Boolean array of shape (height, width), indexed [y, x].
        """
        mask = np.zeros((self.height, self.width), dtype=bool)
        for x, y in self.positions():
            mask[y, x] = self._tiles[y][x].mine
        return mask
