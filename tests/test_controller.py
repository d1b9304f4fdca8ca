"""Tests for the Reversi turn controller."""

import pytest

from reversiboard import IllegalCell, InvalidColor, OutOfBounds, PlacementResult, TurnController
from reversiboard.envs.reversi import CellState

B, W, H, E = CellState.BLACK, CellState.WHITE, CellState.HINT, CellState.EMPTY

BLACK_OPENING_HINTS = [(4, 2), (5, 3), (2, 4), (3, 5)]


def pieces(controller):
    return {(x, y): s for x, y, s in controller.all_cells() if s in (B, W)}


def test_initial_position():
    controller = TurnController(8)

    assert controller.board_size() == 8
    assert controller.current_color() is B
    assert pieces(controller) == {(3, 3): B, (4, 3): W, (4, 4): B, (3, 4): W}
    assert controller.hints() == BLACK_OPENING_HINTS


@pytest.mark.parametrize("size", [4, 6, 8, 10, 16])
def test_seeding_for_any_even_size(size):
    controller = TurnController(size)
    mid = size // 2

    assert len(pieces(controller)) == 4
    assert controller.cell_at(mid - 1, mid - 1) is B
    assert controller.cell_at(mid, mid) is B
    assert controller.cell_at(mid, mid - 1) is W
    assert controller.cell_at(mid - 1, mid) is W
    assert controller.current_color() is B
    assert len(controller.hints()) == 4


@pytest.mark.parametrize("size", [0, 3, 5, 9])
def test_invalid_sizes(size):
    with pytest.raises(ValueError):
        TurnController(size)


def test_reinitialize_resets_everything():
    controller = TurnController(8)
    controller.request_placement(5, 3)
    controller.initialize(6)

    assert controller.board_size() == 6
    assert controller.current_color() is B
    assert len(pieces(controller)) == 4


def test_failed_reinitialize_keeps_board():
    controller = TurnController(8)
    controller.request_placement(5, 3)
    before = controller.board.copy()

    with pytest.raises(ValueError):
        controller.initialize(5)
    assert controller.board == before
    assert controller.current_color() is W


def test_request_placement_on_hint():
    controller = TurnController(8)
    result = controller.request_placement(5, 3)

    assert isinstance(result, PlacementResult)
    assert result.color is B
    assert result.next_color is W
    assert result.flipped == ()
    assert controller.cell_at(5, 3) is B
    assert controller.cell_at(4, 3) is W  # no capture by default
    assert controller.current_color() is W
    assert set(controller.hints()) == {(2, 3), (3, 2), (4, 5), (5, 4), (6, 3)}
    assert list(result.hints) == controller.hints()


def test_placement_reports_changed_cells():
    controller = TurnController(8)
    result = controller.request_placement(5, 3)

    assert list(result) == [
        (3, 2, H),
        (4, 2, E),
        (2, 3, H),
        (5, 3, B),
        (6, 3, H),
        (2, 4, E),
        (5, 4, H),
        (3, 5, E),
        (4, 5, H),
    ]


def test_placement_on_non_hinted_empty_cell_is_allowed():
    controller = TurnController(8)
    controller.request_placement(0, 0)

    assert controller.cell_at(0, 0) is B
    assert controller.current_color() is W


def test_only_target_and_hints_change():
    controller = TurnController(8)
    before = {(x, y): s for x, y, s in controller.all_cells()}
    controller.request_placement(2, 4)
    after = {(x, y): s for x, y, s in controller.all_cells()}

    for cell, old in before.items():
        new = after[cell]
        if cell == (2, 4):
            assert new is B
        elif old != new:
            assert {old, new} <= {E, H}


def test_turn_alternation():
    controller = TurnController(8)
    seen = [controller.current_color()]
    for _ in range(10):
        x, y = controller.hints()[0] if controller.hints() else _first_empty(controller)
        controller.request_placement(x, y)
        seen.append(controller.current_color())

    assert seen == [B, W] * 5 + [B]


def _first_empty(controller):
    return next((x, y) for x, y, s in controller.all_cells() if s in (E, H))


@pytest.mark.parametrize("cell", [(3, 3), (4, 3)])
def test_illegal_placement_leaves_state_unchanged(cell):
    controller = TurnController(8)
    before = controller.board.copy()

    with pytest.raises(IllegalCell):
        controller.request_placement(*cell)
    assert controller.board == before
    assert controller.current_color() is B


def test_out_of_bounds():
    controller = TurnController(8)
    for x, y in [(-1, 0), (8, 0), (0, 8), (0, -1)]:
        with pytest.raises(OutOfBounds):
            controller.cell_at(x, y)
        with pytest.raises(OutOfBounds):
            controller.request_placement(x, y)
    assert controller.current_color() is B


def test_place_piece_does_not_pass_turn():
    controller = TurnController(8)
    controller.place_piece(5, 3, W)

    assert controller.cell_at(5, 3) is W
    assert controller.current_color() is B
    assert (5, 3) not in controller.hints()
    # (6, 3) is now outflanked from (3, 3) through two whites.
    assert (6, 3) in controller.hints()


def test_place_piece_without_recompute_keeps_old_hints():
    controller = TurnController(8)
    controller.place_piece(0, 0, W, recompute=False)
    assert controller.hints() == BLACK_OPENING_HINTS


def test_place_piece_validation():
    controller = TurnController(8)
    before = controller.board.copy()

    with pytest.raises(InvalidColor):
        controller.place_piece(0, 0, CellState.HINT)
    with pytest.raises(IllegalCell):
        controller.place_piece(3, 3, W)
    assert controller.board == before


def test_capture_mode_flips_outflanked_pieces():
    controller = TurnController(8, capture=True)
    result = controller.request_placement(5, 3)

    assert result.flipped == ((4, 3),)
    assert controller.cell_at(4, 3) is B
    assert (4, 3, B) in list(result)
    assert controller.current_color() is W
    assert controller.hints() == [(3, 2), (5, 2), (5, 4)]


def test_capture_mode_without_outflank_flips_nothing():
    controller = TurnController(8, capture=True)
    result = controller.request_placement(0, 0)
    assert result.flipped == ()
    assert len(pieces(controller)) == 5


@pytest.mark.parametrize("size", [8.0, 6.5, "8", True])
def test_failed_reinitialize_with_non_integer_size_keeps_board(size):
    controller = TurnController(8)
    controller.request_placement(5, 3)
    before = controller.board.copy()

    with pytest.raises(ValueError):
        controller.initialize(size)
    assert controller.board == before
    assert controller.current_color() is W
    assert controller.board_size() == 8


def test_non_integer_coordinates():
    controller = TurnController(8)
    before = controller.board.copy()

    with pytest.raises(OutOfBounds):
        controller.cell_at(1.5, 0)
    with pytest.raises(OutOfBounds):
        controller.request_placement(2.0, 4)
    assert controller.board == before
    assert controller.current_color() is B
