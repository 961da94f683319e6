from __future__ import annotations

import json
import pathlib
import time

# Path to the default tick log file
LOG_PATH = pathlib.Path("logs") / "ticks.log"


def log_tick(generation: int, population: int, changed: int, *, log_file: pathlib.Path = LOG_PATH) -> None:
    """Append a record of one completed tick to the log file.

    Each line is a JSON object with the keys:
      - ts: ISO timestamp (UTC)
      - generation: tick number, 0 for the initial lattice
      - population: number of Active cells after the tick
      - changed: number of cells whose state flipped during the tick
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)
    entry = {
        "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "generation": generation,
        "population": population,
        "changed": changed,
    }
    with log_file.open("a", encoding="utf-8") as fp:
        fp.write(json.dumps(entry) + "\n")
