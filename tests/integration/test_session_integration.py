# tests/integration/test_session_integration.py

import pytest

from geocoin.components import Coin, Point
from geocoin.config import BoardConfig
from geocoin.errors import MementoError
from geocoin.session import Session
from tests.test_utils import serials_of


def make_session(radius: int = 1) -> Session:
    return Session(BoardConfig(tile_width=1.0, tile_visibility_radius=radius))


def test_default_session_uses_default_config() -> None:
    session = Session()
    assert session.board.tile_width == 1e-4
    assert session.board.tile_visibility_radius == 8
    assert session.points == 0


def test_poke_and_deposit_flow() -> None:
    session = make_session()
    pit = session.cell_at(Point(0.5, 0.5))
    other = session.cell_at(Point(1.5, 0.5))
    for _ in range(3):
        session.add_coin(pit)

    assert session.collect(pit)
    assert session.collect(pit)
    assert session.points == 2
    assert serials_of(session.coins_at(pit)) == [2]

    assert session.deposit(other)
    assert list(session.coins_at(other)) == [Coin(pit, 1)]
    assert session.points == 1


def test_collect_and_deposit_report_nothing_to_move() -> None:
    session = make_session()
    pit = session.cell_at(Point(0.5, 0.5))
    assert not session.collect(pit)
    assert not session.deposit(pit)
    assert session.points == 0


def test_remove_and_deposit_coin_directly() -> None:
    session = make_session()
    pit = session.cell_at(Point(0.5, 0.5))
    session.add_coin(pit)
    coin = session.remove_coin(pit)
    assert coin == Coin(pit, 0)
    assert session.remove_coin(pit) is None
    session.deposit_coin(pit, coin)
    assert list(session.coins_at(pit)) == [coin]


def test_memento_round_trip_through_fresh_session() -> None:
    session = make_session()
    pit = session.cell_at(Point(0.5, 0.5))
    for _ in range(4):
        session.add_coin(pit)
    session.collect(pit)
    memento = session.to_memento(pit)

    fresh = make_session()
    restored_cell = fresh.from_memento(memento)
    assert restored_cell is fresh.cell_at(Point(0.5, 0.5))
    assert list(fresh.coins_at(restored_cell)) == list(session.coins_at(pit))
    fresh.add_coin(restored_cell)
    assert fresh.coins_at(restored_cell)[-1].serial == 0


def test_bad_memento_leaves_session_unchanged() -> None:
    session = make_session()
    pit = session.cell_at(Point(0.5, 0.5))
    session.add_coin(pit)
    ledger = session.ledger
    with pytest.raises(MementoError):
        session.from_memento("")
    assert session.ledger is ledger


def test_spawn_around() -> None:
    session = make_session(radius=2)
    session.spawn_around(
        Point(0.5, 0.5),
        spawn_fn=lambda cell: (cell.i + cell.j) % 2 == 0,
        count_fn=lambda cell: abs(cell.i) + 1,
    )
    assert len(session.ledger) == 13
    origin = session.cell_at(Point(0.5, 0.5))
    assert len(session.coins_at(origin)) == 1
    assert len(session.coins_at(session.board.get_canonical_cell(-2, 0))) == 3
