"""
Tile module for the mines game.

Represents a single square of the board: whether it hides a mine,
whether the player has revealed it, and whether it carries a flag.
"""
from dataclasses import dataclass


# ============================================================================
# Tile Data Class
# ============================================================================

@dataclass
class Tile:
    """
    Represents a single tile in the mines grid.

    Attributes:
        mine: Whether this tile hides a mine.
        revealed: Whether the player has uncovered this tile.
        flagged: Whether the player has flagged this tile.
    """

    mine: bool = False
    revealed: bool = False
    flagged: bool = False

    def symbol(self, adjacent_mines: int) -> str:
        """
        Character used to draw this tile.

        Args:
            adjacent_mines: Mine count of the tile's neighborhood.

        Returns:
            '*' revealed mine, '1'-'8' revealed numbered tile,
            ' ' revealed empty tile, 'F' flagged, '@' concealed.
        """
        if self.revealed:
            if self.mine:
                return "*"
            if adjacent_mines > 0:
                return str(adjacent_mines)
            return " "
        if self.flagged:
            return "F"
        return "@"
