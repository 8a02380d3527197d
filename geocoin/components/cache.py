"""Cache component.

The coins stored at one cell, in arrival order, together with the serials
currently allocated to coins minted there. Like every other component it is a
frozen value; the helpers in :mod:`geocoin.utils.inventory` return new
instances instead of mutating.
"""

from dataclasses import dataclass, field

from pyrsistent import PSet, PVector, pset, pvector

from geocoin.components.cell import Cell
from geocoin.components.coin import Coin
from geocoin.types import Serial


@dataclass(frozen=True)
class Cache:
    """Per-cell coin inventory.

    Invariant: ``serials`` equals the set of serials of the coins in ``coins``
    whose home cell is ``cell``. Coins minted elsewhere may sit in ``coins``
    (after a deposit) but never occupy a slot in ``serials``.

    Attributes:
        cell:
            Cell this cache belongs to.
        coins:
            Persistent vector of coins, oldest first.
        serials:
            Persistent set of serials allocated to coins native to ``cell``.
    """

    cell: Cell
    coins: PVector[Coin] = field(default_factory=pvector)
    serials: PSet[Serial] = field(default_factory=pset)

    def __len__(self) -> int:
        return len(self.coins)
