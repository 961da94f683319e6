"""
run_simulation.py

Run the 3-D Life automaton headless and record every tick as JSONL.

Example
-------
python run_simulation.py --config settings.yaml \
       --ticks 20 --seed 123 \
       --outfile runs/demo.jsonl

Frames of --dt seconds are fed to the update timer until --ticks ticks have
fired; line 0 of the output is the initial lattice.
"""

from __future__ import annotations
import argparse, json, pathlib, sys
from typing import List

from config import Settings, load_settings
from generate import LatticeGenerator
from lattice import Lattice
from simulate import Simulation
from tick_logger import LOG_PATH, log_tick
from timer import UpdateTimer


def tick_to_jsonl(generation: int, lattice: Lattice) -> str:
    """
    Serialize the lattice after a tick as one JSON line.
    Only Active cells are listed, as [x, y, z] triples.
    """
    active = lattice.active_cells()
    return json.dumps(
        {
            "generation": generation,
            "population": len(active),
            "active": [list(c) for c in active],
        },
        separators=(",", ":"),
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Run a 3-D Life simulation and write one JSON line per tick.")
    p.add_argument("--config", type=pathlib.Path, default=None, help="YAML settings file.")
    p.add_argument("--ticks", type=int, default=10, help="Number of ticks to simulate.")
    p.add_argument("--room-size", type=int, default=None, help="Edge length of the cube, in cells.")
    p.add_argument("--density", type=float, default=None, help="Probability a cell starts Active.")
    p.add_argument("--seed", type=int, default=None, help="RNG seed for reproducibility.")
    p.add_argument("--interval", type=float, default=None, help="Seconds of simulated time per tick.")
    p.add_argument("--dt", type=float, default=1 / 60, help="Frame delta fed to the update timer.")
    p.add_argument("--outfile", type=pathlib.Path, required=True, help="Where to write the JSONL.")
    p.add_argument("--log-file", type=pathlib.Path, default=LOG_PATH, help="Tick log (JSON lines).")
    p.add_argument("--verbose", action="store_true", help="Print every cell as it is created.")
    return p


def main(argv: List[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    if args.ticks < 0:
        print("--ticks must not be negative", file=sys.stderr)
        sys.exit(2)
    if args.dt <= 0:
        print("--dt must be positive", file=sys.stderr)
        sys.exit(2)

    settings = load_settings(args.config) if args.config else Settings()
    settings = settings.override(
        room_size=args.room_size,
        density=args.density,
        seed=args.seed,
        interval=args.interval,
    )

    gen = LatticeGenerator(settings.room_size, seed=settings.seed, density=settings.density)
    lattice = gen.generate()
    if lattice.population() == 0:
        print("[warning] initial lattice has no active cells", file=sys.stderr)

    if args.verbose:
        for cell_id in lattice.ids():
            x, y, z = lattice.codec.decode(cell_id)
            print(f"Creating cell {x}-{y}-{z} => {cell_id:#x} is {lattice.state(cell_id).name}")

    sim = Simulation(lattice, settings.rules, UpdateTimer(settings.interval))

    args.outfile.parent.mkdir(parents=True, exist_ok=True)
    with args.outfile.open("w", encoding="utf-8") as f:
        f.write(tick_to_jsonl(0, lattice) + "\n")
        log_tick(0, lattice.population(), 0, log_file=args.log_file)
        while sim.generation < args.ticks:
            result = sim.update(args.dt)
            if result is None:
                continue
            f.write(tick_to_jsonl(result.generation, lattice) + "\n")
            log_tick(result.generation, result.population, len(result.changed), log_file=args.log_file)

    print(f"Wrote {args.ticks + 1:,} generations of a {settings.room_size}^3 lattice to {args.outfile}")


if __name__ == "__main__":
    main()
