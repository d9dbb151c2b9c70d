import pytest

from tttstate import InvalidStateError, Move, TicTacToeState

ROW_MAJOR = [(r, c) for r in range(3) for c in range(3)]


def test_empty_board_legal_moves_row_major():
    s = TicTacToeState(False)
    moves = s.legal_moves()
    assert len(moves) == 9
    assert [(m.row, m.col) for m in moves] == ROW_MAJOR
    assert s.grid == ((None,) * 3,) * 3


def test_legal_moves_skip_occupied_cells():
    s = TicTacToeState.from_string("X...O...X", False)
    assert [m.index for m in s.legal_moves()] == [1, 2, 3, 5, 6, 7]


def test_current_mark_follows_turn_flag():
    assert TicTacToeState(False).current_mark() == "X"
    assert TicTacToeState(True).current_mark() == "O"
    assert TicTacToeState(True).is_player_turn() is True
    assert TicTacToeState(False).is_player_turn() is False


def test_apply_move_writes_mark_and_keeps_turn():
    s = TicTacToeState(True)
    assert s.apply_move(Move(1, 1)) is True
    assert s.grid[1][1] == "O"
    assert s.is_player_turn() is True
    assert s.apply_move(Move(0, 0)) is True
    assert s.grid[0][0] == "O"


def test_next_ply_alternates_marks():
    s = TicTacToeState(False)
    s.apply_move(Move(0, 0))
    s.next_ply()
    s.apply_move(Move(1, 1))
    assert s.serialize() == "X...O...."
    assert s.current_mark() == "O"


@pytest.mark.parametrize("move", [Move(0, 0), Move(3, 0), Move(0, 3), Move(-1, 0), Move(1, -1)])
def test_apply_move_rejects_occupied_or_out_of_range(move):
    s = TicTacToeState.from_string("X........", True)
    before = s.grid
    assert s.apply_move(move) is False
    assert s.grid == before
    assert s.history == ()


def test_undo_restores_previous_grid():
    s = TicTacToeState.from_string("X...O....", False)
    before = s.grid
    for m in s.legal_moves():
        assert s.apply_move(m)
        assert s.grid != before
        s.undo_move(m)
        assert s.grid == before
    assert s.history == ()


def test_undo_is_unconditional_by_default():
    s = TicTacToeState.from_string("X...O....", False)
    # never applied through apply_move; the cell is cleared anyway
    s.undo_move(Move(1, 1))
    assert s.serialize() == "X........"
    s.undo_move(Move(2, 2))
    assert s.serialize() == "X........"


def test_undo_out_of_grid_raises_index_error():
    s = TicTacToeState(False)
    with pytest.raises(IndexError):
        s.undo_move(Move(-1, 0))
    with pytest.raises(IndexError):
        s.undo_move(Move(0, 3))


def test_non_terminal_positions():
    assert TicTacToeState(False).is_terminal() is False
    # not full, no three in a row
    s = TicTacToeState.from_string("XO.OX....", False)
    assert s.is_terminal() is False
    assert s.winner() is None


def test_evaluate_requires_terminal_position():
    s = TicTacToeState.from_string("XO.OX....", False)
    with pytest.raises(InvalidStateError):
        s.evaluate()
    with pytest.raises(InvalidStateError):
        TicTacToeState(True).evaluate()


def test_first_mark_row_win_scores_plus_one():
    s = TicTacToeState.from_string("XXX......", False)
    assert s.is_terminal() is True
    assert s.evaluate() == 1
    assert s.winner() == "X"


def test_full_board_without_line_is_draw():
    s = TicTacToeState.from_string("XOXXOOOXX", False)
    assert s.is_terminal() is True
    assert s.evaluate() == 0
    assert s.legal_moves() == []


def test_second_mark_anti_diagonal_scores_minus_one():
    s = TicTacToeState.from_string("..O.O.O..", True)
    assert s.is_terminal() is True
    assert s.evaluate() == -1


@pytest.mark.parametrize("board,value", [
    ("O..O..O..", -1),  # column 0
    (".X..X..X.", 1),   # column 1
    ("X...X...X", 1),   # main diagonal
    ("...OOO...", -1),  # row 1
])
def test_every_line_kind_is_detected(board, value):
    s = TicTacToeState.from_string(board, False)
    assert s.is_terminal()
    assert s.evaluate() == value


def test_evaluate_uses_scan_order_for_multiple_lines():
    # illegal position: X owns row 0, O owns row 2
    s = TicTacToeState.from_grid([["X", "X", "X"], [None, None, None], ["O", "O", "O"]], False)
    assert s.evaluate() == 1
    # O owns column 0, X owns column 2
    s = TicTacToeState.from_grid([["O", None, "X"], ["O", None, "X"], ["O", None, "X"]], False)
    assert s.evaluate() == -1


def test_mutation_allowed_after_terminal():
    s = TicTacToeState.from_string("XXX......", True)
    assert s.apply_move(Move(2, 2)) is True
    assert s.evaluate() == 1


def test_win_with_empty_cells_still_lists_them():
    s = TicTacToeState.from_string("XXXOO....", False)
    assert s.is_terminal()
    assert len(s.legal_moves()) == 4


def test_from_grid_deep_copies_source():
    src = [["X", None, None], [None, "O", None], [None, None, None]]
    s = TicTacToeState.from_grid(src, False)
    assert s.grid == tuple(tuple(r) for r in src)
    s.apply_move(Move(2, 2))
    s.undo_move(Move(0, 0))
    assert src == [["X", None, None], [None, "O", None], [None, None, None]]
    src[1][0] = "X"
    assert s.grid[1][0] is None


def test_from_grid_rejects_bad_cells():
    with pytest.raises(ValueError):
        TicTacToeState.from_grid([["X", None, None], [None, 1, None], [None, None, None]], False)
    with pytest.raises(ValueError):
        TicTacToeState.from_grid([[None] * 3] * 2, False)


def test_grid_snapshot_is_read_only():
    s = TicTacToeState(False)
    g = s.grid
    with pytest.raises(TypeError):
        g[0][0] = "X"  # type: ignore[index]
    s.apply_move(Move(0, 0))
    assert g[0][0] is None
    assert s.grid[0][0] == "X"


def test_copy_and_with_turn_are_independent():
    s = TicTacToeState(False)
    s.apply_move(Move(0, 0))
    c = s.copy()
    t = s.with_turn(True)
    assert c.grid == s.grid and c.history == s.history
    assert t.is_player_turn() is True and s.is_player_turn() is False
    c.apply_move(Move(1, 1))
    t.apply_move(Move(2, 2))
    assert s.serialize() == "X........"
    assert c.serialize() == "X...X...."
    assert t.serialize() == "X.......O"


def test_render_and_repr():
    s = TicTacToeState.from_string("X...O....", True)
    assert str(s) == s.render()
    assert " | X |   |   |" in s.render()
    assert repr(s) == "TicTacToeState('X...O....', player_turn=True)"


def test_mark_count():
    s = TicTacToeState.from_string("XOX.O....", False)
    assert s.mark_count() == {"X": 2, "O": 2}
