import logging

import pytest

from minesweeper.engine import Board, DisplayState, Tile

from conftest import board_with_mines, mine_cells, revealed_cells


def around(board, x, y):
    return {(x, y), *board.neighbors(x, y)}


def test_corner_scenario_wins_in_one_reveal(corner_mine_board):
    board = corner_mine_board
    assert board.reveal(0, 0) == Tile.safe(0)
    assert mine_cells(board) == {(2, 2)}
    assert not mine_cells(board) & around(board, 0, 0)
    assert revealed_cells(board) == {(x, y) for x in range(3) for y in range(3)} - {(2, 2)}
    assert board.is_won()


def test_mine_under_first_click_moves_to_far_corner():
    # only (2, 2) lies outside the 3x3 area around (0, 0)
    board = board_with_mines(3, 3, [(0, 0)], extra=[0, 0])
    assert board.reveal(0, 0) == Tile.safe(0)
    assert mine_cells(board) == {(2, 2)}
    assert board.is_won()


def test_relocation_picks_side_then_index():
    # x: side 1 ("after"), index 0 -> 4; y: side 0 ("before"), index 0 -> 0
    board = board_with_mines(5, 5, [(2, 2)], extra=[1, 0, 0, 0])
    board.reveal(2, 2)
    assert mine_cells(board) == {(4, 0)}
    assert board.get_tile(3, 1) == Tile.safe(1)
    assert board.rng.calls[-4:] == [2, 1, 2, 1]


def test_relocation_retries_on_mined_cell():
    board = board_with_mines(5, 5, [(2, 2), (4, 0)], extra=[1, 0, 0, 0, 0, 0, 1, 0])
    board.reveal(2, 2)
    assert mine_cells(board) == {(4, 0), (0, 4)}
    assert board.mine_count() == 2


def test_relocation_uses_only_available_side():
    # clicked on the left edge, so only the right-hand x range exists
    board = board_with_mines(6, 6, [(1, 1)], extra=[0, 1])
    board.reveal(0, 0)
    assert board.rng.calls[-2:] == [4, 4]
    assert mine_cells(board) == {(2, 3)}


def test_relocation_without_room_drops_mine(caplog):
    board = board_with_mines(3, 3, [(1, 1)])
    with caplog.at_level(logging.WARNING, logger='minesweeper.engine'):
        tile = board.reveal(1, 1)
    assert tile == Tile.safe(0)
    assert board.mine_count() == 0
    assert board.mines == 1
    assert board.is_won()
    assert 'no room to relocate' in caplog.text


def test_relocation_stops_when_zone_is_full(caplog):
    # 4x4 clicked at (0, 0): the zone is x, y in {2, 3}, already holding 4 mines
    zone = [(2, 2), (3, 2), (2, 3), (3, 3)]
    board = board_with_mines(4, 4, zone + [(1, 1)])
    with caplog.at_level(logging.WARNING, logger='minesweeper.engine'):
        board.reveal(0, 0)
    assert mine_cells(board) == set(zone)
    assert 'no room to relocate' in caplog.text


def test_relocation_happens_only_once():
    board = board_with_mines(5, 5, [(0, 0), (4, 4)])
    board.reveal(4, 0)
    assert board.first_reveal_done
    assert board.reveal(0, 0).is_mine
    assert mine_cells(board) == {(0, 0), (4, 4)}


def test_first_reveal_on_flagged_cell_still_reveals(corner_mine_board):
    board = corner_mine_board
    board.toggle(0, 0)
    board.reveal(0, 0)
    assert board.get_display(0, 0) == DisplayState.REVEALED


@pytest.mark.parametrize('seed', range(25))
def test_first_reveal_is_safe_on_random_boards(seed):
    board = Board(16, 16, 40, seed=seed)
    x, y = (seed * 7) % 16, (seed * 11) % 16
    tile = board.reveal(x, y)
    assert tile == Tile.safe(0)
    assert not mine_cells(board) & around(board, x, y)
    assert board.mine_count() == 40
    for yy in range(board.height):
        for xx in range(board.width):
            t = board.get_tile(xx, yy)
            if not t.is_mine:
                expected = sum(1 for nx, ny in board.neighbors(xx, yy) if board.get_tile(nx, ny).is_mine)
                assert t.adj_mines == expected


@pytest.mark.parametrize('seed', range(10))
def test_dense_board_keeps_mine_count(seed):
    board = Board(9, 9, 30, seed=seed)
    board.reveal(4, 4)
    assert board.mine_count() == 30
    assert not mine_cells(board) & around(board, 4, 4)
