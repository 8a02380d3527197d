"""geocoin.components
=====================

Aggregate import surface for the value objects used by the engine.

All components are frozen ``@dataclass`` values; they carry no behavior beyond
their fields (and small serialization helpers) and are transformed by the pure
functions in :mod:`geocoin.utils` and :mod:`geocoin.systems`::

    from geocoin.components import Cell, Coin, Cache

"""

from .point import Bounds, Point
from .cell import Cell
from .coin import Coin
from .cache import Cache
from .purse import Purse

__all__ = [
    "Bounds",
    "Cache",
    "Cell",
    "Coin",
    "Point",
    "Purse",
]
