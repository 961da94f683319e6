from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

DEFAULT_BITS = 8  # one byte per axis


@dataclass(frozen=True)
class CellCodec:
    '''
    Packs lattice coordinates into a single integer cell id, x most significant:
        id = x << 2*bits | y << bits | z
    Every coordinate must lie in [0, 2**bits).
    '''
    bits: int = DEFAULT_BITS

    def __post_init__(self) -> None:
        if self.bits < 1:
            raise ValueError(f"bits per axis must be positive, got {self.bits}")

    @property
    def capacity(self) -> int:
        '''Number of distinct values per axis.'''
        return 1 << self.bits

    def encode(self, x: int, y: int, z: int) -> int:
        return (((x << self.bits) | y) << self.bits) | z

    def decode(self, cell_id: int) -> Tuple[int, int, int]:
        mask = self.capacity - 1
        return (cell_id >> (2 * self.bits)) & mask, (cell_id >> self.bits) & mask, cell_id & mask

    @classmethod
    def for_room(cls, room_size: int) -> CellCodec:
        '''Narrowest codec (never below one byte per axis) that fits room_size cells per axis.'''
        if room_size < 1:
            raise ValueError(f"room_size must be positive, got {room_size}")
        return cls(max(DEFAULT_BITS, (room_size - 1).bit_length()))
