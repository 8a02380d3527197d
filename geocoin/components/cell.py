"""Cell component.

Immutable integer grid coordinates. A :class:`geocoin.board.Board` hands out a
single canonical instance per ``(i, j)``, so cells coming from the same board
can be compared with ``is`` as well as ``==``.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Cell:
    """Discrete grid coordinate.

    Attributes:
        i: Row index (``floor(lat / tile_width)``).
        j: Column index (``floor(lng / tile_width)``).
    """

    i: int
    j: int

    def to_dict(self) -> Dict[str, int]:
        return {"i": self.i, "j": self.j}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Cell":
        return cls(i=data["i"], j=data["j"])
