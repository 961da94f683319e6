from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Sequence


class State(IntEnum):
    INACTIVE = 0
    ACTIVE = 1

    @classmethod
    def from_value(cls, value) -> State:
        """Truthy -> ACTIVE, falsy -> INACTIVE (accepts bools, 0/1, numpy scalars)."""
        return cls.ACTIVE if value else cls.INACTIVE


RULE_FIELDS = ("reproduction", "underpopulation", "continuation", "overpopulation")


@dataclass(frozen=True)
class GameRules:
    """
    Outer-totalistic 3-D rule over the 26-cell Moore neighborhood.
    Each field is a half-open range of active-neighbor counts:
        active cell:   underpopulation -> dies, continuation -> lives,
                       overpopulation -> dies, anything else -> lives
        inactive cell: reproduction -> born, anything else -> stays dead
    """
    reproduction: range = field(default_factory=lambda: range(4, 5))
    underpopulation: range = field(default_factory=lambda: range(0, 2))
    continuation: range = field(default_factory=lambda: range(2, 5))
    overpopulation: range = field(default_factory=lambda: range(5, 28))

    def __post_init__(self) -> None:
        for name in RULE_FIELDS:
            r = getattr(self, name)
            if not isinstance(r, range) or r.step != 1:
                raise ValueError(f"{name} must be a contiguous range, got {r!r}")
            if r.start < 0:
                raise ValueError(f"{name} must not start below 0, got {r.start}")

    def next_state(self, state: State, active_neighbors: int) -> State:
        """Return the state a cell moves to given its pre-tick state and neighbor count."""
        if state == State.ACTIVE:
            if active_neighbors in self.underpopulation:
                return State.INACTIVE
            elif active_neighbors in self.continuation:
                return State.ACTIVE
            elif active_neighbors in self.overpopulation:
                return State.INACTIVE
            return State.ACTIVE
        if active_neighbors in self.reproduction:
            return State.ACTIVE
        return State.INACTIVE

    def __call__(self, state: State, active_neighbors: int) -> State:
        return self.next_state(state, active_neighbors)

    @classmethod
    def from_bounds(cls, **bounds: Sequence[int]) -> GameRules:
        """Build from [start, stop] pairs, e.g. from_bounds(reproduction=(4, 5))."""
        unknown = set(bounds) - set(RULE_FIELDS)
        if unknown:
            raise ValueError(f"unknown rule fields: {sorted(unknown)}")
        ranges = {}
        for name, pair in bounds.items():
            if len(pair) != 2:
                raise ValueError(f"{name} must be a [start, stop] pair, got {pair!r}")
            ranges[name] = range(int(pair[0]), int(pair[1]))
        return cls(**ranges)

    def to_bounds(self) -> Dict[str, list]:
        return {name: [getattr(self, name).start, getattr(self, name).stop] for name in RULE_FIELDS}
