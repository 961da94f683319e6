import json

import pytest
from run_simulation import main as run_cli


def _run(tmp_path, *, ticks=3, room=5, seed=77, name="out.jsonl", extra=()):
    """
    Helper that invokes the CLI and returns (outfile, log_file).
    """
    outfile = tmp_path / "nested" / name   # nested dir exercises mkdir
    log_file = tmp_path / "logs" / "ticks.log"
    run_cli(
        [
            "--ticks", str(ticks),
            "--room-size", str(room),
            "--density", "0.2",
            "--seed", str(seed),
            "--interval", "0.5",
            "--dt", "0.25",
            "--outfile", str(outfile),
            "--log-file", str(log_file),
            *extra,
        ]
    )
    return outfile, log_file


def test_cli_writes_one_line_per_generation(tmp_path):
    outfile, _ = _run(tmp_path, ticks=4)
    lines = outfile.read_text().splitlines()
    assert len(lines) == 5
    records = [json.loads(line) for line in lines]
    assert [r["generation"] for r in records] == [0, 1, 2, 3, 4]
    for r in records:
        assert r["population"] == len(r["active"])
        for x, y, z in r["active"]:
            assert 0 <= x < 5 and 0 <= y < 5 and 0 <= z < 5


def test_cli_deterministic_with_seed(tmp_path):
    file1, _ = _run(tmp_path, seed=123, name="a.jsonl")
    file2, _ = _run(tmp_path, seed=123, name="b.jsonl")
    assert file1.read_text() == file2.read_text()


def test_cli_logs_every_tick(tmp_path):
    _, log_file = _run(tmp_path, ticks=2)
    entries = [json.loads(line) for line in log_file.read_text().splitlines()]
    assert [e["generation"] for e in entries] == [0, 1, 2]
    for field in ("ts", "population", "changed"):
        assert field in entries[0]


def test_cli_reads_config(tmp_path):
    cfg = tmp_path / "sim.yaml"
    cfg.write_text("room_size: 3\ndensity: 1.0\ninterval: 0.5\n")
    outfile = tmp_path / "cfg.jsonl"
    run_cli([
        "--config", str(cfg),
        "--room-size", "4",
        "--ticks", "1",
        "--dt", "0.25",
        "--outfile", str(outfile),
        "--log-file", str(tmp_path / "ticks.log"),
    ])
    first = json.loads(outfile.read_text().splitlines()[0])
    # --room-size on the command line wins over the file; density comes from the file
    assert first["population"] == 64


def test_cli_verbose_prints_cells(tmp_path, capsys):
    _run(tmp_path, ticks=0, room=2, extra=("--verbose",))
    out = capsys.readouterr().out
    assert out.count("Creating cell") == 8


def test_cli_rejects_bad_dt(tmp_path):
    with pytest.raises(SystemExit):
        run_cli(["--dt", "0", "--outfile", str(tmp_path / "x.jsonl")])
