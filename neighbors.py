from __future__ import annotations
from typing import Dict, List, Tuple

from codec import CellCodec

Coord = Tuple[int, int, int]


def neighbor_coords(x: int, y: int, z: int, room_size: int) -> List[Coord]:
    """
    Return the in-bounds Moore neighbors (26-connectivity) of (x, y, z).
    Coordinates outside [0, room_size) are dropped, so boundary cells get fewer.
    Order: z outermost, then y, then x, each ascending.
    """
    coords = []
    for nz in (z - 1, z, z + 1):
        if not 0 <= nz < room_size:
            continue
        for ny in (y - 1, y, y + 1):
            if not 0 <= ny < room_size:
                continue
            for nx in (x - 1, x, x + 1):
                if not 0 <= nx < room_size:
                    continue
                if nx == x and ny == y and nz == z:
                    continue
                coords.append((nx, ny, nz))
    return coords


def neighbor_ids(x: int, y: int, z: int, room_size: int, codec: CellCodec) -> Tuple[int, ...]:
    return tuple(codec.encode(nx, ny, nz) for nx, ny, nz in neighbor_coords(x, y, z, room_size))


def build_neighbor_table(room_size: int, codec: CellCodec) -> Dict[int, Tuple[int, ...]]:
    """
    Precompute the neighbor id list of every cell in a room_size**3 lattice.
    """
    if room_size > codec.capacity:
        raise ValueError(
            f"room_size {room_size} does not fit in a {codec.bits}-bit codec "
            f"(max {codec.capacity} per axis)"
        )
    table: Dict[int, Tuple[int, ...]] = {}
    for z in range(room_size):
        for y in range(room_size):
            for x in range(room_size):
                table[codec.encode(x, y, z)] = neighbor_ids(x, y, z, room_size, codec)
    return table
