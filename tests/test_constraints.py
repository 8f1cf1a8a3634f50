from hamilton.core.constraints import (
    MoveResult,
    only_move,
    place_high,
    place_low,
    propagate,
    straight_path,
)
from hamilton.core.model import Location as L
from hamilton.core.state import SolverState

SOLVED_4X4 = [16, 5, 4, 3,
              15, 6, 1, 2,
              14, 7, 8, 9,
              13, 12, 11, 10]


def make_state(grid, w, h, diagonal=False):
    state, _ = SolverState.from_grid(grid, w, h, diagonal)
    return state


def test_only_move_next_to_8():
    grid = [0, 5, 4, 3,
            0, 0, 1, 2,
            14, 0, 8, 9,
            0, 12, 11, 0]
    state = make_state(grid, 4, 4)
    assert state.gaps[0].n1 == 5 and state.gaps[0].n2 == 8
    assert only_move(state, 0) is MoveResult.MOVED
    assert state.at(L(1, 2)) == 7
    assert state.gaps[0].n2 == 7 and state.gaps[0].l2 == L(1, 2)


def test_only_move_completes_gap():
    grid = [0, 5, 4, 3,
            0, 0, 1, 2,
            14, 0, 8, 9,
            0, 12, 11, 0]
    state = make_state(grid, 4, 4)
    assert (state.gaps[1].n1, state.gaps[1].n2) == (9, 11)
    assert only_move(state, 1) is MoveResult.MOVED
    assert state.at(L(3, 3)) == 10
    assert all((g.n1, g.n2) != (9, 11) for g in state.gaps)


def test_only_move_needs_single_square():
    grid = [1, 0, 0,
            0, 0, 0,
            0, 0, 0]
    state = make_state(grid, 3, 3)
    assert only_move(state, 0) is MoveResult.DIDNT_MOVE
    assert state.grid == grid


def test_propagate_solves_easy_grid():
    grid = [0, 5, 4, 3,
            0, 0, 1, 2,
            14, 0, 8, 9,
            0, 12, 11, 0]
    state = make_state(grid, 4, 4)
    assert propagate(state)
    assert state.gaps == []
    assert state.grid == SOLVED_4X4


def test_straight_path_horizontal_and_vertical():
    grid = [10, 0, 0, 7,
            0, 12, 0, 0,
            16, 0, 2, 0,
            0, 14, 0, 0]
    state = make_state(grid, 4, 4)
    index = [(g.n1, g.n2) for g in state.gaps].index((7, 10))
    assert straight_path(state, index) is MoveResult.MOVED
    assert state.grid[0:4] == [10, 9, 8, 7]

    index = [(g.n1, g.n2) for g in state.gaps].index((12, 14))
    assert straight_path(state, index) is MoveResult.MOVED
    assert state.at(L(1, 2)) == 13


def test_straight_path_blocked_square():
    grid = [1, 5, 0, 4,
            0, 0, 0, 0,
            0, 0, 0, 0,
            0, 0, 0, 0]
    state = make_state(grid, 4, 4)
    assert (state.gaps[0].n1, state.gaps[0].n2) == (1, 4)
    assert straight_path(state, 0) is MoveResult.UNSOLVABLE


def test_straight_path_diagonal():
    grid = [1, 0, 0,
            0, 0, 0,
            0, 0, 3]
    state = make_state(grid, 3, 3, diagonal=True)
    assert straight_path(state, 0) is MoveResult.MOVED
    assert state.at(L(1, 1)) == 2

    # a row is not forced when king moves are allowed
    grid = [1, 0, 3,
            0, 0, 0,
            0, 0, 0]
    state = make_state(grid, 3, 3, diagonal=True)
    assert straight_path(state, 0) is MoveResult.DIDNT_MOVE


def test_place_blocking_a_clue_fails():
    grid = [16, 15, 0, 0,
            11, 0, 0, 0,
            0, 7, 6, 0,
            0, 0, 0, 0]
    state = make_state(grid, 4, 4)
    index = [(g.n1, g.n2) for g in state.gaps].index((7, 11))
    assert not place_low(state.copy(), index, L(1, 1))
    assert place_low(state.copy(), index, L(1, 3))


def test_place_too_far_from_other_end_fails():
    grid = [16, 15, 0, 0,
            11, 0, 0, 0,
            0, 7, 6, 0,
            0, 0, 0, 0]
    state = make_state(grid, 4, 4)
    index = [(g.n1, g.n2) for g in state.gaps].index((7, 11))
    assert not place_low(state, index, L(3, 3))


def test_propagate_is_idempotent():
    grid = [0, 0, 4, 3,
            0, 0, 0, 0,
            0, 7, 0, 9,
            0, 0, 0, 0]
    state = make_state(grid, 4, 4)
    assert propagate(state)
    once = state.copy()
    assert propagate(state)
    assert state.grid == once.grid
    assert state.gaps == once.gaps


def test_propagate_stalls_on_lone_one():
    grid = [1, 0, 0,
            0, 0, 0,
            0, 0, 0]
    state = make_state(grid, 3, 3)
    assert propagate(state)
    assert state.grid == grid
    assert len(state.gaps) == 1


def test_last_number_needs_one_open_square():
    # placing 4 beside the 3 leaves the 16 a single free neighbour
    grid = [0, 16, 8, 0,
            3, 0, 0, 0,
            0, 14, 0, 0,
            0, 0, 0, 0]
    state = make_state(grid, 4, 4)
    index = [(g.n1, g.n2) for g in state.gaps].index((3, 8))
    assert place_low(state, index, L(0, 0))
    assert state.at(L(0, 0)) == 4
    assert (state.gaps[index].n1, state.gaps[index].l1) == (4, L(0, 0))

    # on a bigger board the 16 sits mid-path and needs two
    grid = [0, 16, 8, 0, 0,
            3, 0, 0, 0, 0,
            0, 14, 0, 0, 0,
            0, 0, 0, 0, 0]
    state = make_state(grid, 5, 4)
    index = [(g.n1, g.n2) for g in state.gaps].index((3, 8))
    assert not place_low(state, index, L(0, 0))


def test_copy_is_independent():
    grid = [0, 0, 4, 3,
            0, 0, 0, 0,
            0, 7, 0, 9,
            0, 0, 0, 0]
    state = make_state(grid, 4, 4)
    branch = state.copy()
    index = [(g.n1, g.n2) for g in branch.gaps].index((4, 7))
    assert place_high(branch, index, L(1, 1))
    assert branch.at(L(1, 1)) == 6
    assert state.grid == grid
    assert (state.gaps[index].n2, state.gaps[index].l2) == (7, L(1, 2))
    assert (branch.gaps[index].n2, branch.gaps[index].l2) == (6, L(1, 1))
