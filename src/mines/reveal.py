"""
Flood-fill reveal.

Uncovers a tile and, when it borders no mines, the whole contiguous
region of empty tiles around it together with their numbered border.
"""
from collections import deque

from .grid import Grid


def reveal(grid: Grid, x: int, y: int) -> bool:
    """
    Reveal (x, y) and cascade through empty neighbors.

    Uses an explicit work-list instead of recursion; a tile is marked
    revealed when it is queued, so each tile is queued at most once and
    the queue never holds more than width * height entries.

    Flagged neighbors are skipped rather than uncovered with the rest of
    the region: a flag on a revealed tile could no longer be removed, and
    the flag counter would never get back to a winning count.

    Args:
        grid: Board to reveal on.
        x: Column of the tile.
        y: Row of the tile.

    Returns:
        False if (x, y) holds a mine (nothing is changed), True otherwise.
    """
    if grid.is_mine(x, y):
        return False
    if grid.is_revealed(x, y):
        return True

    grid.set_revealed(x, y, True)
    pending = deque([(x, y)])
    while pending:
        cx, cy = pending.pop()
        if grid.adjacent_mine_count(cx, cy) > 0:
            continue
        for nx, ny in grid.neighbors(cx, cy):
            tile = grid.tile(nx, ny)
            if tile.revealed or tile.flagged:
                continue
            tile.revealed = True
            pending.append((nx, ny))
    return True
