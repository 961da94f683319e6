from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional

from lattice import Lattice
from rules import GameRules, State
from timer import UpdateTimer


def count_neighbors(lattice: Lattice) -> int:
    '''
    Neighbor pass: store every cell's active-neighbor count.
    Only reads states, so every count reflects the pre-tick lattice.
    The state cache lives for this call only. Returns the number of cache hits.
    '''
    cache: Dict[int, State] = {}
    hits = 0
    for cell_id in lattice.ids():
        active = 0
        for neighbor_id in lattice.neighbors(cell_id):
            state = cache.get(neighbor_id)
            if state is None:
                state = lattice.state(neighbor_id)
                cache[neighbor_id] = state
            else:
                hits += 1
            if state == State.ACTIVE:
                active += 1
        lattice.set_active_neighbors(cell_id, active)
    return hits


def apply_rules(lattice: Lattice, rules: GameRules) -> List[int]:
    '''
    Rule pass: move each cell to its next state using the counts from the
    neighbor pass. Returns the ids of cells whose state changed.
    '''
    changed = []
    for cell_id in lattice.ids():
        current = lattice.state(cell_id)
        nxt = rules(current, lattice.active_neighbors(cell_id))
        if nxt != current:
            lattice.set_state(cell_id, nxt)
            changed.append(cell_id)
    return changed


def step(lattice: Lattice, rules: GameRules) -> List[int]:
    """
    One synchronous update: the neighbor pass finishes for all cells before
    any state is rewritten.
    """
    count_neighbors(lattice)
    return apply_rules(lattice, rules)


def simulate(lattice: Lattice, rules: GameRules, timesteps: int = 1) -> Lattice:
    for _ in range(timesteps):
        step(lattice, rules)
    return lattice


@dataclass
class TickResult:
    generation: int
    changed: List[int]
    population: int


class Simulation:
    """
    Couples a lattice and its rules to an UpdateTimer: `update(delta)` is called
    once per frame and only advances the automaton when the timer fires.
    """

    def __init__(self, lattice: Lattice, rules: GameRules, timer: Optional[UpdateTimer] = None):
        self.lattice = lattice
        self.rules = rules
        self.timer = timer if timer is not None else UpdateTimer()
        self.generation = 0

    def update(self, delta: float) -> Optional[TickResult]:
        if not self.timer.tick(delta):
            return None
        return self.advance()

    def advance(self) -> TickResult:
        """Run one tick immediately, bypassing the timer."""
        changed = step(self.lattice, self.rules)
        self.generation += 1
        return TickResult(self.generation, changed, self.lattice.population())
