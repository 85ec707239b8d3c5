"""
Render snapshots of the board.

A RenderSnapshot is an immutable picture of what the player may see:
one display symbol per tile plus the flag and mine counters.
"""
from dataclasses import dataclass

import numpy as np

from .config import ALPHABET, DEFAULT_SEPARATOR
from .grid import Grid


# ============================================================================
# Render Snapshot
# ============================================================================

@dataclass(frozen=True, eq=False)
class RenderSnapshot:
    """
    Display state of the board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        symbols: Array of shape (height, width), indexed [y, x], holding
            '*', '1'-'8', ' ', 'F' or '@'.
        flag_count: Tiles currently flagged.
        mine_count: Mines on the board.
    """

    width: int
    height: int
    symbols: np.ndarray
    flag_count: int
    mine_count: int

    @classmethod
    def from_grid(
        cls, grid: Grid, flag_count: int, mine_count: int
    ) -> "RenderSnapshot":
        """Build a snapshot from the current grid contents."""
        symbols = np.full((grid.height, grid.width), "@", dtype="<U1")
        for x, y in grid.positions():
            tile = grid.tile(x, y)
            adjacent = grid.adjacent_mine_count(x, y) if tile.revealed else 0
            symbols[y, x] = tile.symbol(adjacent)
        symbols.setflags(write=False)
        return cls(grid.width, grid.height, symbols, flag_count, mine_count)

    def symbol_at(self, x: int, y: int) -> str:
        """Get the display symbol of tile (x, y)."""
        return str(self.symbols[y, x])

    # ========================================================================
    # Text Frame
    # ========================================================================

    def _column_names(self) -> str:
        return "    " + "".join(f" {ALPHABET[x]}" for x in range(self.width))

    def _horizontal_border(self) -> str:
        return "    -" + " -" * self.width

    def to_text(self, separator: str = DEFAULT_SEPARATOR) -> str:
        """
        Render the board as a monospaced text frame.

        Args:
            separator: Text placed before the frame.

        Returns:
            Frame with column letters, row numbers on both sides, tiles
            delimited by backticks and a trailing "Flags: n/m" line.
        """
        lines = [self._column_names(), self._horizontal_border()]
        for y in range(self.height):
            row = y + 1
            tiles = "".join(f"`{self.symbol_at(x, y)}" for x in range(self.width))
            lines.append(f"{row:2d} |{tiles}`| {row}")
        lines.append(self._horizontal_border())
        lines.append(self._column_names())
        lines.append(f"Flags: {self.flag_count}/{self.mine_count}")
        return separator + "\n".join(lines)

    def __str__(self) -> str:
        return self.to_text(separator="")
