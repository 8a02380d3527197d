"""Exchange system.

Moves coins between the world (the :class:`Ledger`) and the player's
:class:`Purse`. Two flows exist:

1. Collect: the oldest coin of a cache is taken and appended to the purse.
2. Deposit: the most recently collected coin leaves the purse and is
   deposited, identity unchanged, into a cache (creating it if needed).

Both return the input values unchanged when there is nothing to move, so a UI
can call them unconditionally and compare the results.
"""

from dataclasses import replace
from typing import Tuple

from geocoin.components import Cell, Purse
from geocoin.ledger import Ledger, deposit_coin, remove_coin


def collect(ledger: Ledger, purse: Purse, cell: Cell) -> Tuple[Ledger, Purse]:
    """Take the oldest coin at ``cell`` into ``purse``.

    Arguments:
        ledger:
            Current ledger.
        purse:
            Player's purse.
        cell:
            Cache to take from.

    Returns:
        Tuple[Ledger, Purse]
            Updated values, or the inputs if ``cell`` holds no coins.
    """
    new_ledger, coin = remove_coin(ledger, cell)
    if coin is None:
        return ledger, purse
    return new_ledger, replace(purse, coins=purse.coins.append(coin))


def deposit(ledger: Ledger, purse: Purse, cell: Cell) -> Tuple[Ledger, Purse]:
    """Deposit the last collected coin from ``purse`` into ``cell``.

    Returns:
        Tuple[Ledger, Purse]
            Updated values, or the inputs if the purse is empty.

    Raises:
        DuplicateCoinError: If ``cell`` already holds a coin with that identity.
            Nothing is moved in that case.
    """
    if not purse.coins:
        return ledger, purse
    coin = purse.coins[-1]
    new_ledger = deposit_coin(ledger, cell, coin)
    return new_ledger, replace(purse, coins=purse.coins.delete(len(purse.coins) - 1))
