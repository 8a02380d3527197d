"""Cache manipulation helpers.

Every helper takes a :class:`Cache` and returns a new one; the input is never
modified. Removal is FIFO: the coin that arrived first (minted or deposited)
leaves first.
"""

from dataclasses import replace
from typing import Optional, Tuple

from geocoin.components import Cache, Coin
from geocoin.errors import DuplicateCoinError
from geocoin.types import Serial


def next_serial(cache: Cache) -> Serial:
    """Return the smallest non-negative serial not allocated in ``cache``."""
    serial = 0
    while serial in cache.serials:
        serial += 1
    return serial


def add_coin(cache: Cache) -> Cache:
    """Return a new cache with a freshly minted coin appended."""
    coin = Coin(cache.cell, next_serial(cache))
    return replace(
        cache,
        coins=cache.coins.append(coin),
        serials=cache.serials.add(coin.serial),
    )


def add_coins(cache: Cache, count: int) -> Cache:
    """Return a new cache with ``count`` freshly minted coins appended."""
    if count < 0:
        raise ValueError(f"Coin count must be non-negative, got {count}")
    for _ in range(count):
        cache = add_coin(cache)
    return cache


def remove_coin(cache: Cache) -> Tuple[Cache, Optional[Coin]]:
    """Pop the oldest coin.

    Returns:
        ``(new_cache, coin)``; ``(cache, None)`` if the cache is empty.
    """
    if not cache.coins:
        return cache, None
    coin = cache.coins[0]
    serials = cache.serials
    if coin.cell == cache.cell:
        serials = serials.discard(coin.serial)
    return replace(cache, coins=cache.coins.delete(0), serials=serials), coin


def has_coin(cache: Cache, coin: Coin) -> bool:
    """Return True if a coin with ``coin``'s identity is in ``cache``."""
    if coin.cell == cache.cell:
        return coin.serial in cache.serials
    return coin in cache.coins


def deposit_coin(cache: Cache, coin: Coin) -> Cache:
    """Return a new cache with ``coin`` appended, identity unchanged.

    A coin returning to its home cell takes its serial back. A coin minted
    elsewhere keeps its foreign identity and leaves ``serials`` untouched.

    Raises:
        DuplicateCoinError: If a coin with the same identity is already here,
            e.g. the serial was freed and re-minted while the coin was away.
    """
    if has_coin(cache, coin):
        raise DuplicateCoinError(coin)
    serials = cache.serials
    if coin.cell == cache.cell:
        serials = serials.add(coin.serial)
    return replace(cache, coins=cache.coins.append(coin), serials=serials)
