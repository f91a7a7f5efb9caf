# blochq/tests/test_cli.py
from blochq.cli import main

def test_apply_prints_each_gate(capsys):
    assert main(["apply", "h", "z"]) == 0
    out = capsys.readouterr().out
    assert "start" in out and "H" in out and "Z" in out
    assert "P0=50.0%" in out

def test_apply_with_custom_start(capsys):
    assert main(["apply", "--start", "3", "4j"]) == 0
    out = capsys.readouterr().out
    assert "(0.600)|0⟩ + (0.800i)|1⟩" in out

def test_zero_start_is_an_error(capsys):
    assert main(["apply", "--start", "0", "0"]) == 2
    assert "error" in capsys.readouterr().err

def test_unknown_gate_is_an_error(capsys):
    assert main(["apply", "Q"]) == 2

def test_measure_counts_shots(capsys):
    assert main(["measure", "X", "--shots", "50", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "count=0 " in out
    assert "count=50 " in out

def test_random_is_seeded(capsys):
    main(["random", "--seed", "4"])
    a = capsys.readouterr().out
    main(["random", "--seed", "4"])
    assert capsys.readouterr().out == a

def test_measure_leaves_prepared_state_alone(capsys):
    assert main(["measure", "H", "--shots", "200", "--seed", "9"]) == 0
    a = capsys.readouterr().out
    counts = [int(line.split("count=")[1].split()[0]) for line in a.splitlines() if "count=" in line]
    assert sum(counts) == 200
    assert all(c > 0 for c in counts)
    main(["measure", "H", "--shots", "200", "--seed", "9"])
    assert capsys.readouterr().out == a
