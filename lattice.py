from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np
from numpy.typing import ArrayLike, NDArray

from codec import CellCodec
from neighbors import Coord, build_neighbor_table
from rules import State


@dataclass
class Cell:
    '''
    One lattice site. `neighbors` never changes after construction;
    `active_neighbors` is rewritten by the neighbor pass, `state` by the rule pass.
    '''
    state: State
    neighbors: Tuple[int, ...]
    active_neighbors: int = 0


class Lattice:
    """
    Fixed room_size**3 cube of cells keyed by packed cell id.

    `states`, when given, is anything numpy can turn into a (room_size,)*3
    array indexed [x, y, z]; truthy entries start Active. Cells are created in
    z, y, x order and are never added or removed afterwards.
    """

    def __init__(self, room_size: int, states: Optional[ArrayLike] = None, *, codec: Optional[CellCodec] = None):
        if room_size < 1:
            raise ValueError(f"room_size must be positive, got {room_size}")
        self.room_size = room_size
        self.codec = codec if codec is not None else CellCodec.for_room(room_size)

        shape = (room_size,) * 3
        if states is None:
            grid = np.zeros(shape, dtype=bool)
        else:
            grid = np.asarray(states, dtype=bool)
            if grid.shape != shape:
                raise ValueError(f"initial states must have shape {shape}, got {grid.shape}")

        table = build_neighbor_table(room_size, self.codec)
        self._cells: Dict[int, Cell] = {}
        for cell_id, neighbor_ids in table.items():
            x, y, z = self.codec.decode(cell_id)
            self._cells[cell_id] = Cell(State.from_value(grid[x, y, z]), neighbor_ids)

    def _cell(self, cell_id: int) -> Cell:
        try:
            return self._cells[cell_id]
        except KeyError:
            raise LookupError(f"cell id {cell_id:#x} is not part of this lattice") from None

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, cell_id: object) -> bool:
        return cell_id in self._cells

    def ids(self) -> Iterator[int]:
        return iter(self._cells)

    def id_of(self, x: int, y: int, z: int) -> int:
        if not all(0 <= c < self.room_size for c in (x, y, z)):
            raise LookupError(f"({x}, {y}, {z}) is outside a lattice of size {self.room_size}")
        return self.codec.encode(x, y, z)

    def cell_at(self, x: int, y: int, z: int) -> Cell:
        return self._cell(self.id_of(x, y, z))

    def state(self, cell_id: int) -> State:
        return self._cell(cell_id).state

    def neighbors(self, cell_id: int) -> Tuple[int, ...]:
        return self._cell(cell_id).neighbors

    def active_neighbors(self, cell_id: int) -> int:
        return self._cell(cell_id).active_neighbors

    def set_active_neighbors(self, cell_id: int, count: int) -> None:
        if count < 0:
            raise ValueError(f"active neighbor count cannot be negative, got {count}")
        self._cell(cell_id).active_neighbors = count

    def set_state(self, cell_id: int, state: State) -> None:
        self._cell(cell_id).state = State(state)

    # presentation-facing views

    def population(self) -> int:
        return sum(1 for cell in self._cells.values() if cell.state == State.ACTIVE)

    def active_cells(self) -> List[Coord]:
        """Coordinates of every Active cell, in creation order."""
        return [self.codec.decode(cell_id) for cell_id, cell in self._cells.items() if cell.state == State.ACTIVE]

    def snapshot(self) -> NDArray[np.bool_]:
        """Boolean copy of the current states, indexed [x, y, z]."""
        grid = np.zeros((self.room_size,) * 3, dtype=bool)
        for x, y, z in self.active_cells():
            grid[x, y, z] = True
        return grid
