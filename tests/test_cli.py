"""
Tests for the weakrsa command line.
"""

import pytest

from weakrsa import fixtures
from weakrsa.cli import main


def test_demo_cycling(capsys):
    assert main(["--demo", "cycling", "--attack", "cycling"]) == 0
    out = capsys.readouterr().out
    assert "Plaintext recovered" in out
    assert fixtures.CYCLING_PLAINTEXT in out


def test_demo_fermat_reports_key(capsys):
    assert main(["--demo", "fermat", "--attack", "fermat"]) == 0
    out = capsys.readouterr().out
    assert "By:" in out and "fermat" in out
    assert fixtures.FERMAT_PLAINTEXT in out
    assert "7692977" in out and "7675427" in out
    assert "31944145322807" in out


def test_explicit_values(capsys):
    blocks = [pow(b, 17, 3233) for b in "Да".encode("cp1251")]
    argv = ["-n", "3233", "-e", "17", "--decrypt", ",".join(map(str, blocks))]
    assert main(argv) == 0
    assert "'Да'" in capsys.readouterr().out


def test_no_stop_runs_every_attack(capsys):
    blocks = [str(pow(b, 17, 3233)) for b in "Да".encode("cp1251")]
    assert main(["-n", "3233", "-e", "17", "--no-stop", "--decrypt"] + blocks) == 0
    out = capsys.readouterr().out
    summary = out.split("ATTACK SUMMARY", 1)[1]
    assert "fermat" in summary and "cycling" in summary


def test_failure_exit_code(capsys):
    assert main(["-n", "3233", "-e", "3", "--decrypt", "5", "--attack", "fermat"]) == 1
    assert "No plaintext recovered" in capsys.readouterr().out


def test_capped_search_fails_cleanly(capsys):
    assert main(["-n", "3233", "-e", "17", "--decrypt", "2790", "--attack", "cycling",
                 "--max-iterations", "1"]) == 1
    assert "no-convergence" in capsys.readouterr().out


def test_input_file(tmp_path, capsys):
    blocks = [pow(b, 17, 3233) for b in "Мир".encode("cp1251")]
    path = tmp_path / "task.txt"
    path.write_text("n = 3233\ne = 17\nc = {}\n".format(" ".join(map(str, blocks))), encoding="utf-8")
    assert main([str(path), "--attack", "cycling"]) == 0
    assert "'Мир'" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [
    ["--decrypt", "5"],
    ["-n", "3233", "-e", "17"],
    ["-n", "3233", "--decrypt", "5", "--attack", "bogus"],
    ["-n", "3233", "--decrypt", "5", "--max-iterations", "0"],
    ["/nonexistent/task.txt"],
])
def test_bad_input_exit_code(argv):
    assert main(argv) == 1
