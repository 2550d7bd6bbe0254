import json
import subprocess
import sys

import pytest

from optim.cli import main


def _run_cmd(cmd):
    return subprocess.run(cmd, shell=True, stdout=subprocess.PIPE, stderr=subprocess.PIPE, timeout=60)


@pytest.mark.cli
def test_cli_module_help():
    proc = _run_cmd(f"{sys.executable} -m optim.cli --help")
    assert proc.returncode == 0, proc.stderr.decode()


def test_cli_lists_benchmarks(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "ackley" in out and "eggholder" in out


def test_cli_runs_benchmark_with_config(tmp_path, capsys):
    cfg_path = tmp_path / "swarm.json"
    cfg_path.write_text(json.dumps({"pop_size": 10, "step": 0.0}), encoding="utf-8")

    assert main(["sphere", "--config", str(cfg_path), "--max-evals", "200", "--seed", "4", "--cache"]) == 0
    out = capsys.readouterr().out
    assert "[optim] sphere:" in out
    assert "best value:" in out


def test_cli_rejects_unknown_benchmark(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["rosenbrock"])
    assert excinfo.value.code == 2
    assert "Unknown benchmark" in capsys.readouterr().err


def test_cli_rejects_negative_step():
    with pytest.raises(SystemExit):
        main(["sphere", "--step", "-1"])


def test_cli_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip()


def test_cli_reports_missing_config(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["sphere", "--config", str(tmp_path / "nope.json")])
    assert excinfo.value.code == 2
    assert "does not exist" in capsys.readouterr().err


def test_cli_rejects_non_numeric_tol(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["sphere", "--tol", "tight"])
    assert excinfo.value.code == 2
    assert "--tol" in capsys.readouterr().err
