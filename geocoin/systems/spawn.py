"""Spawn system.

Stocks caches around a point. Whether a cell has a cache and how many coins it
starts with are decided by caller-supplied functions (``SpawnFn`` and
``CountFn``), typically a deterministic hash of the cell coordinates, so the
same area always produces the same caches.

Cells that already have a cache are skipped: walking back into an area must
not mint a second batch of coins there.
"""

import logging

from geocoin.board import Board
from geocoin.components import Point
from geocoin.ledger import Ledger, stock_cache
from geocoin.types import CountFn, SpawnFn

logger = logging.getLogger(__name__)


def spawn_caches(
    board: Board,
    ledger: Ledger,
    point: Point,
    spawn_fn: SpawnFn,
    count_fn: CountFn,
) -> Ledger:
    """Create caches in the neighborhood of ``point``.

    Args:
        board (Board): Grid used to enumerate the neighborhood.
        ledger (Ledger): Current ledger.
        point (Point): Player location.
        spawn_fn (SpawnFn): Returns True if a cell should host a cache.
        count_fn (CountFn): Initial coin count for a spawned cache.

    Returns:
        Ledger: Ledger with the new caches added, in row-major cell order.

    Raises:
        ValueError: If ``count_fn`` returns a negative count.
    """
    spawned = 0
    for cell in board.get_cells_near_point(point):
        if cell in ledger or not spawn_fn(cell):
            continue
        ledger = stock_cache(ledger, cell, count_fn(cell))
        spawned += 1
    logger.debug("Spawned %d caches around %s", spawned, point)
    return ledger
