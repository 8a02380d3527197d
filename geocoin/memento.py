"""Cache mementos.

A memento is a JSON text record capturing one cache so it can be dropped from
memory when the player walks away and rebuilt exactly when they return::

    {"cell": {"i": 369995, "j": -1220534},
     "coins": [{"cell": {"i": 369995, "j": -1220534}, "serial": 0}, ...]}

``coins`` keeps arrival order and exact serials, including coins minted in
other cells. The allocated-serial set is not stored; decoding rebuilds it
from the native coins so later mints still pick the smallest free serial.

Both directions are pure functions. :func:`from_memento` validates the whole
document before building anything and raises :class:`MementoError` on any
defect; it never returns a partially populated cache.
"""

import json
import logging
from typing import Any, List, Optional, Set, Tuple

from pyrsistent import pset, pvector

from geocoin.board import Board
from geocoin.components import Cache, Cell, Coin
from geocoin.errors import MementoError

logger = logging.getLogger(__name__)


def to_memento(cache: Cache) -> str:
    """Encode ``cache`` as a memento string."""
    payload = {
        "cell": cache.cell.to_dict(),
        "coins": [coin.to_dict() for coin in cache.coins],
    }
    return json.dumps(payload, sort_keys=True, separators=(",", ":"))


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_cell(memento: str, value: Any, field_name: str) -> None:
    if not isinstance(value, dict):
        raise MementoError(memento, f"{field_name} must be an object")
    for axis in ("i", "j"):
        if axis not in value:
            raise MementoError(memento, f"{field_name} requires '{axis}'")
        if not _is_int(value[axis]):
            raise MementoError(memento, f"{field_name}.{axis} must be an integer")


def _check_coin(memento: str, value: Any, index: int) -> None:
    field_name = f"coins[{index}]"
    if not isinstance(value, dict):
        raise MementoError(memento, f"{field_name} must be an object")
    if "cell" not in value or "serial" not in value:
        raise MementoError(memento, f"{field_name} requires 'cell' and 'serial'")
    _check_cell(memento, value["cell"], f"{field_name}.cell")
    serial = value["serial"]
    if not _is_int(serial) or serial < 0:
        raise MementoError(
            memento, f"{field_name}.serial must be a non-negative integer"
        )


def _parse(memento: str) -> Any:
    if not isinstance(memento, str) or not memento.strip():
        raise MementoError(memento, "memento is empty")
    try:
        return json.loads(memento)
    except json.JSONDecodeError as e:
        raise MementoError(memento, f"not valid JSON ({e.msg})") from e
    except RecursionError as e:
        raise MementoError(memento, "nested too deeply") from e
    except ValueError as e:
        # e.g. an integer literal beyond the interpreter's digit limit
        raise MementoError(memento, str(e)) from e


def from_memento(memento: str, board: Optional[Board] = None) -> Cache:
    """Decode a memento produced by :func:`to_memento`.

    Arguments:
        memento: Text to decode.
        board: If given, every decoded cell is replaced by ``board``'s
            canonical instance so identity comparisons keep working.

    Raises:
        MementoError: If the text is empty, not JSON, misses a field, has a
            field of the wrong type, or lists the same coin twice.
    """
    try:
        data = _parse(memento)
        if not isinstance(data, dict):
            raise MementoError(memento, "top level must be an object")
        if "cell" not in data or "coins" not in data:
            raise MementoError(memento, "requires 'cell' and 'coins'")
        _check_cell(memento, data["cell"], "cell")
        if not isinstance(data["coins"], list):
            raise MementoError(memento, "coins must be a list")
        seen: Set[Tuple[int, int, int]] = set()
        for index, raw_coin in enumerate(data["coins"]):
            _check_coin(memento, raw_coin, index)
            raw_cell = raw_coin["cell"]
            identity = (raw_cell["i"], raw_cell["j"], raw_coin["serial"])
            if identity in seen:
                raise MementoError(
                    memento, f"coins[{index}] is listed more than once"
                )
            seen.add(identity)
    except MementoError as e:
        logger.warning("Rejected cache memento: %s", e.reason)
        raise

    def make_cell(raw: Any) -> Cell:
        if board is not None:
            return board.get_canonical_cell(raw["i"], raw["j"])
        return Cell.from_dict(raw)

    cell = make_cell(data["cell"])
    coins: List[Coin] = [
        Coin(make_cell(raw["cell"]), raw["serial"]) for raw in data["coins"]
    ]
    return Cache(
        cell=cell,
        coins=pvector(coins),
        serials=pset(coin.serial for coin in coins if coin.cell == cell),
    )
