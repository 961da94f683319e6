import numpy as np
import pytest
from codec import CellCodec
from lattice import Lattice
from rules import State


def test_creates_every_cell_inactive_by_default():
    lattice = Lattice(3)
    assert len(lattice) == 27
    assert lattice.population() == 0
    assert all(lattice.state(i) == State.INACTIVE for i in lattice.ids())
    assert all(lattice.active_neighbors(i) == 0 for i in lattice.ids())


def test_initial_states_are_indexed_xyz():
    grid = np.zeros((3, 3, 3), dtype=bool)
    grid[2, 0, 1] = True
    lattice = Lattice(3, grid)
    assert lattice.cell_at(2, 0, 1).state == State.ACTIVE
    assert lattice.cell_at(1, 0, 2).state == State.INACTIVE
    assert lattice.active_cells() == [(2, 0, 1)]
    assert np.array_equal(lattice.snapshot(), grid)


def test_nested_list_states_accepted():
    grid = [[[0, 1], [0, 0]], [[0, 0], [1, 0]]]
    lattice = Lattice(2, grid)
    assert sorted(lattice.active_cells()) == [(0, 0, 1), (1, 1, 0)]


def test_snapshot_is_a_copy():
    lattice = Lattice(2)
    snap = lattice.snapshot()
    snap[0, 0, 0] = True
    assert lattice.population() == 0


def test_shape_mismatch_rejected():
    with pytest.raises(ValueError):
        Lattice(3, np.zeros((3, 3, 2), dtype=bool))


def test_invalid_room_size():
    with pytest.raises(ValueError):
        Lattice(0)


def test_room_too_large_for_codec():
    with pytest.raises(ValueError):
        Lattice(5, codec=CellCodec(bits=2))


def test_unknown_id_fails_fast():
    lattice = Lattice(2)
    outside = lattice.codec.encode(2, 0, 0)
    assert outside not in lattice
    with pytest.raises(LookupError):
        lattice.state(outside)
    with pytest.raises(LookupError):
        lattice.set_state(outside, State.ACTIVE)
    with pytest.raises(LookupError):
        lattice.cell_at(0, 0, 5)


def test_setters_update_one_cell():
    lattice = Lattice(3)
    target = lattice.id_of(1, 1, 1)
    lattice.set_state(target, State.ACTIVE)
    lattice.set_active_neighbors(target, 4)
    assert lattice.state(target) == State.ACTIVE
    assert lattice.active_neighbors(target) == 4
    assert lattice.population() == 1
    with pytest.raises(ValueError):
        lattice.set_active_neighbors(target, -1)


def test_neighbors_come_from_table():
    lattice = Lattice(3)
    assert len(lattice.neighbors(lattice.id_of(0, 0, 0))) == 7
    assert len(lattice.neighbors(lattice.id_of(1, 1, 1))) == 26
