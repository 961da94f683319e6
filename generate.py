from __future__ import annotations
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from lattice import Lattice
from rules import GameRules
from simulate import step

DEFAULT_DENSITY = 1 / 20


class LatticeGenerator:
    """
    Random initial lattices: each cell is independently Active with
    probability `density`, Inactive otherwise.
    """
    def __init__(self, room_size: int, *, seed: Optional[int] = None, density: float = DEFAULT_DENSITY):
        if room_size < 1:
            raise ValueError(f"room_size must be positive, got {room_size}")
        if not 0.0 <= density <= 1.0:
            raise ValueError(f"density must be in [0, 1], got {density}")
        self.room_size = room_size
        self.density = density
        self.rng = np.random.default_rng(seed)

    def _make_states(self) -> NDArray[np.bool_]:
        '''
        Sample a room_size**3 boolean grid, indexed [x, y, z].
        '''
        return self.rng.random((self.room_size,) * 3) < self.density

    def generate(self) -> Lattice:
        return Lattice(self.room_size, self._make_states())

    @staticmethod
    def is_trivial(lattice: Lattice, rules: GameRules) -> bool:
        """
        True if the lattice is all dead, all alive, or already a fixed point
        under `rules`. Does not modify `lattice`.
        """
        population = lattice.population()
        if population == 0 or population == len(lattice):
            return True
        probe = Lattice(lattice.room_size, lattice.snapshot(), codec=lattice.codec)
        return not step(probe, rules)

    def generate_nontrivial(self, rules: GameRules, max_attempts: int = 10) -> Lattice:
        for _ in range(max_attempts):
            lattice = self.generate()
            if not self.is_trivial(lattice, rules):
                return lattice
        raise RuntimeError(f"Could not create a nontrivial lattice in {max_attempts} attempts.")
