"""Mutable game session.

A thin imperative wrapper for UI code: it owns one :class:`Board`, the current
:class:`Ledger` and the player's :class:`Purse`, and swaps in the new values
returned by the pure functions. Nothing here holds game logic of its own.

Not thread-safe; a session models a single player acting serially.
"""

from typing import Optional

from pyrsistent import PVector

from geocoin import ledger as ledger_ops
from geocoin.components import Cell, Coin, Point, Purse
from geocoin.config import BoardConfig
from geocoin.ledger import Ledger
from geocoin.systems.exchange import collect, deposit
from geocoin.systems.spawn import spawn_caches
from geocoin.types import CountFn, SpawnFn


class Session:
    """One player's view of the world.

    Attributes:
        config (BoardConfig): Tiling parameters the board was built from.
        board (Board): Grid index; hands out canonical cells.
        ledger (Ledger): Current coin ledger, replaced on every change.
        purse (Purse): Coins the player is carrying.
    """

    def __init__(self, config: Optional[BoardConfig] = None) -> None:
        self.config = config if config is not None else BoardConfig()
        self.board = self.config.make_board()
        self.ledger = Ledger()
        self.purse = Purse()

    @property
    def points(self) -> int:
        """Number of coins carried."""
        return len(self.purse)

    def cell_at(self, point: Point) -> Cell:
        return self.board.get_cell_for_point(point)

    def coins_at(self, cell: Cell) -> PVector[Coin]:
        return ledger_ops.get_coins(self.ledger, cell)

    def add_coin(self, cell: Cell) -> None:
        self.ledger = ledger_ops.add_coin(self.ledger, cell)

    def remove_coin(self, cell: Cell) -> Optional[Coin]:
        """Take the oldest coin at ``cell`` out of the world (not into the purse)."""
        self.ledger, coin = ledger_ops.remove_coin(self.ledger, cell)
        return coin

    def deposit_coin(self, cell: Cell, coin: Coin) -> None:
        self.ledger = ledger_ops.deposit_coin(self.ledger, cell, coin)

    def collect(self, cell: Cell) -> bool:
        """Move the oldest coin at ``cell`` into the purse; False if there was none."""
        before = len(self.purse)
        self.ledger, self.purse = collect(self.ledger, self.purse, cell)
        return len(self.purse) > before

    def deposit(self, cell: Cell) -> bool:
        """Move the last collected coin into ``cell``; False if the purse was empty."""
        before = len(self.purse)
        self.ledger, self.purse = deposit(self.ledger, self.purse, cell)
        return len(self.purse) < before

    def to_memento(self, cell: Cell) -> str:
        return ledger_ops.snapshot(self.ledger, cell)

    def from_memento(self, memento: str) -> Cell:
        """Restore a cache from ``memento`` and return its (canonical) cell.

        Raises:
            MementoError: If ``memento`` is invalid; the ledger is unchanged.
        """
        self.ledger, cell = ledger_ops.restore(self.ledger, memento, self.board)
        return cell

    def spawn_around(
        self, point: Point, spawn_fn: SpawnFn, count_fn: CountFn
    ) -> None:
        self.ledger = spawn_caches(self.board, self.ledger, point, spawn_fn, count_fn)
