"""Coin component.

A coin is identified by the cell it was minted in plus a serial that is unique
among the coins currently allocated to that cell. The identity never changes,
not even when the coin is carried away and deposited in another cell.
"""

from dataclasses import dataclass
from typing import Any, Dict

from geocoin.components.cell import Cell
from geocoin.types import Serial


@dataclass(frozen=True)
class Coin:
    """Serialized coin.

    Attributes:
        cell: Home cell, where the coin was minted.
        serial: Per-cell serial number.
    """

    cell: Cell
    serial: Serial

    def __str__(self) -> str:
        return f"{self.cell.i}:{self.cell.j}#{self.serial}"

    def to_dict(self) -> Dict[str, Any]:
        return {"cell": self.cell.to_dict(), "serial": self.serial}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Coin":
        return cls(cell=Cell.from_dict(data["cell"]), serial=data["serial"])
