import pytest

from xiangqi_engine.stone import PieceType, Stone


def test_red_general_starts_in_palace():
    stone = Stone(4)
    assert stone.type is PieceType.JIANG
    assert stone.is_red
    assert (stone.row, stone.col) == (0, 4)


def test_black_pieces_mirror_red_pieces():
    for red_id in range(16):
        red = Stone(red_id)
        black = Stone(red_id + 16)
        assert red.is_red and not black.is_red
        assert black.type == red.type
        assert black.row == 9 - red.row
        assert black.col == 8 - red.col


def test_starting_positions_are_distinct_and_on_board():
    stones = [Stone(i) for i in range(32)]
    squares = {(s.col, s.row) for s in stones}
    assert len(squares) == 32
    assert all(0 <= s.col <= 8 and 0 <= s.row <= 9 for s in stones)
    assert all(not s.dead and not s.selected for s in stones)


def test_each_side_has_one_general():
    stones = [Stone(i) for i in range(32)]
    generals = [s for s in stones if s.type is PieceType.JIANG]
    assert sorted(s.is_red for s in generals) == [False, True]


@pytest.mark.parametrize("bad_id", [-1, 32, 100])
def test_reset_rejects_out_of_range_id(bad_id):
    with pytest.raises(ValueError):
        Stone(bad_id)


def test_reset_restores_starting_state():
    stone = Stone(0)
    stone.row = 5
    stone.col = 3
    stone.dead = True
    stone.selected = True
    stone.reset(0)
    fresh = Stone(0)
    assert (stone.row, stone.col, stone.dead, stone.selected) == (
        fresh.row,
        fresh.col,
        False,
        False,
    )


def test_setters_emit_only_on_change():
    stone = Stone(9)
    events = []
    stone.row_changed.connect(lambda: events.append("row"))
    stone.col_changed.connect(lambda: events.append("col"))
    stone.dead_changed.connect(lambda: events.append("dead"))
    stone.selected_changed.connect(lambda: events.append("selected"))

    stone.row = stone.row
    stone.col = stone.col
    stone.dead = stone.dead
    stone.selected = stone.selected
    assert events == []

    stone.row = stone.row + 1
    stone.col = stone.col + 1
    stone.dead = True
    stone.selected = True
    assert events == ["row", "col", "dead", "selected"]


def test_starting_piece_types_and_their_values():
    expected = [0, 1, 2, 3, 4, 3, 2, 1, 0, 5, 5, 6, 6, 6, 6, 6]
    assert [Stone(i).type.value for i in range(16)] == expected
    assert [Stone(i + 16).type.value for i in range(16)] == expected
    assert Stone(4).type == 4


def test_default_stone_has_no_identity():
    stone = Stone()
    assert stone.id == -1
    assert stone.type is None