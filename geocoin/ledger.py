"""Immutable coin ledger.

The :class:`Ledger` is the world-side bookkeeping: one :class:`Cache` per
cell that has ever held coins. It is a frozen value; every operation here is a
pure function returning a new ``Ledger`` (and, for removals, the coin taken).

Design notes:

* Caches live in a persistent map keyed by :class:`Cell` values. Absence of a
  key means the cell is *uninitialized*: it has never been stocked, deposited
  into or restored. The first such operation creates the entry; entries are
  never dropped, even once emptied.
* Removal is FIFO, see :mod:`geocoin.utils.inventory`.
* Depositing into an unknown cell creates its cache.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Iterator, Optional, Tuple

from pyrsistent import PMap, PVector, pmap, pvector

from geocoin.board import Board
from geocoin.components import Cache, Cell, Coin
from geocoin.memento import from_memento, to_memento
from geocoin.utils import inventory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ledger:
    """All caches known to the game.

    Attributes:
        caches (PMap[Cell, Cache]): Cache per initialized cell.
    """

    caches: PMap[Cell, Cache] = pmap()

    def __contains__(self, cell: object) -> bool:
        return cell in self.caches

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.caches)

    def __len__(self) -> int:
        return len(self.caches)

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse ``"i:j" -> [coin labels]`` map of the non-empty caches."""
        return pmap(
            {
                f"{cell.i}:{cell.j}": pvector(str(coin) for coin in cache.coins)
                for cell, cache in self.caches.items()
                if cache.coins
            }
        )


def get_cache(ledger: Ledger, cell: Cell) -> Optional[Cache]:
    """Return the cache at ``cell`` or None if it was never initialized."""
    return ledger.caches.get(cell)


def get_coins(ledger: Ledger, cell: Cell) -> PVector[Coin]:
    """Return the coins at ``cell``, oldest first; empty for unknown cells."""
    cache = ledger.caches.get(cell)
    return cache.coins if cache is not None else pvector()


def coin_count(ledger: Ledger, cell: Cell) -> int:
    return len(get_coins(ledger, cell))


def _cache_or_new(ledger: Ledger, cell: Cell) -> Cache:
    cache = ledger.caches.get(cell)
    return cache if cache is not None else Cache(cell)


def set_cache(ledger: Ledger, cache: Cache) -> Ledger:
    """Return a ledger with ``cache`` stored under its cell, replacing the old one."""
    return replace(ledger, caches=ledger.caches.set(cache.cell, cache))


def add_coin(ledger: Ledger, cell: Cell) -> Ledger:
    """Mint a coin at ``cell`` with the smallest free serial."""
    cache = inventory.add_coin(_cache_or_new(ledger, cell))
    logger.debug("Minted coin %s", cache.coins[-1])
    return set_cache(ledger, cache)


def stock_cache(ledger: Ledger, cell: Cell, count: int) -> Ledger:
    """Mint ``count`` coins at ``cell``; ``count == 0`` still initializes it."""
    cache = inventory.add_coins(_cache_or_new(ledger, cell), count)
    logger.debug("Stocked cell %s:%s with %d coins", cell.i, cell.j, count)
    return set_cache(ledger, cache)


def remove_coin(ledger: Ledger, cell: Cell) -> Tuple[Ledger, Optional[Coin]]:
    """Take the oldest coin from ``cell``.

    Returns:
        ``(new_ledger, coin)``; ``(ledger, None)`` if ``cell`` is unknown or
        empty. Running out of coins is not an error.
    """
    cache = ledger.caches.get(cell)
    if cache is None:
        return ledger, None
    cache, coin = inventory.remove_coin(cache)
    if coin is None:
        return ledger, None
    logger.debug("Removed coin %s from %s:%s", coin, cell.i, cell.j)
    return set_cache(ledger, cache), coin


def deposit_coin(ledger: Ledger, cell: Cell, coin: Coin) -> Ledger:
    """Put ``coin`` into the cache at ``cell``, creating the cache if needed.

    The coin keeps its original ``{cell, serial}`` identity even when
    ``cell`` is not its home cell.

    Raises:
        DuplicateCoinError: If the target cache already holds that identity.
    """
    cache = inventory.deposit_coin(_cache_or_new(ledger, cell), coin)
    logger.debug("Deposited coin %s into %s:%s", coin, cell.i, cell.j)
    return set_cache(ledger, cache)


def restore(
    ledger: Ledger, memento: str, board: Optional[Board] = None
) -> Tuple[Ledger, Cell]:
    """Replace the cache for the memento's cell with the decoded one.

    Returns:
        ``(new_ledger, cell)`` where ``cell`` is the restored cache's cell,
        canonicalized through ``board`` when one is given.

    Decoding completes before the ledger is touched, so a bad memento raises
    :class:`geocoin.errors.MementoError` and no partial state is produced.
    """
    cache = from_memento(memento, board)
    return set_cache(ledger, cache), cache.cell


def snapshot(ledger: Ledger, cell: Cell) -> str:
    """Encode the cache at ``cell`` as a memento; unknown cells encode as empty."""
    return to_memento(_cache_or_new(ledger, cell))
