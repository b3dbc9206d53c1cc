import random

import pytest

from quadkit.life import CellState, count_neighbors, next_generation, next_state, random_grid

A = CellState.ALIVE
D = CellState.DEAD


def grid(rows):
    return [[A if ch == "#" else D for ch in row] for row in rows]


@pytest.mark.parametrize("n", [0, 1, 4, 8])
def test_live_cell_dies(n):
    assert next_state(A, n) is D


@pytest.mark.parametrize("n", [2, 3])
def test_live_cell_survives(n):
    assert next_state(A, n) is A


def test_dead_cell_birth_only_on_three():
    assert next_state(D, 3) is A
    assert all(next_state(D, n) is D for n in range(9) if n != 3)


def test_count_neighbors_excludes_self_and_edges():
    full = grid(["###", "###", "###"])
    assert count_neighbors(full, 1, 1) == 8
    assert count_neighbors(full, 0, 0) == 3
    empty = grid(["...", "...", "..."])
    assert count_neighbors(empty, 1, 1) == 0


def test_block_is_still_life():
    block = grid(["....", ".##.", ".##.", "...."])
    assert next_generation(block) == block


def test_blinker_oscillates():
    blinker = grid([".....", "..#..", "..#..", "..#..", "....."])
    flipped = next_generation(blinker)
    assert flipped == grid([".....", ".....", ".###.", ".....", "....."])
    assert next_generation(flipped) == blinker


def test_next_generation_does_not_mutate_input():
    cells = grid(["#..", ".#.", "..#"])
    snapshot = [row[:] for row in cells]
    next_generation(cells)
    assert cells == snapshot


def test_random_grid_shape_and_determinism():
    a = random_grid(7, 4, random.Random(42))
    b = random_grid(7, 4, random.Random(42))
    assert a == b
    assert len(a) == 4
    assert all(len(row) == 7 for row in a)
    assert all(cell in (A, D) for row in a for cell in row)