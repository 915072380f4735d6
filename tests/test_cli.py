import json
import logging
from pathlib import Path
from typing import Any

import pytest

from spi_search import cli


def test_expression_run_prints_table(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--expr", "(x-2)**2 + 1", "4", "0", "1"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "(x-2)**2 + 1"
    assert out[1].split() == ["#", "x", "y", "z"]
    assert out[2].split() == ["0", "0.000000000", "1.000000000", "4.000000000"]
    assert out[-1].split() == ["2", "1.000000000", "2.000000000", "2.000000000"]


def test_default_example_runs_every_start(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("x^2/10 - 2sin(x)\n")
    # One header per starting triple of the default example.
    assert out.count("#       x") == 4


def test_list_examples(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "quadratic-sine" in out
    assert "weierstrass" in out


def test_example_with_custom_start(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--example", "sinh-sine", "0", "1", "2", "--max-iterations", "3"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("sinh(sin(x))\n")
    assert out.count("#       x") == 1


def test_html_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--expr", "(x-2)**2", "0", "1", "4", "--html"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("<table><caption>(x-2)**2</caption>")


def test_json_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    target = tmp_path / "run.json"
    assert cli.main(["--expr", "(x-2)**2", "0", "1", "4", "--out", str(target)]) == 0
    assert f"written to {target}" in capsys.readouterr().out
    data = json.loads(target.read_text("utf-8"))
    assert data["title"] == "(x-2)**2"
    (run,) = data["runs"]
    assert run["start"] == [0.0, 1.0, 4.0]
    assert run["iterations"] == 2
    assert run["reason"] == "degenerate"
    assert [r["iteration"] for r in run["rows"]] == [0, 1, 2]


def test_plot_output(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DISPLAY", raising=False)
    monkeypatch.delenv("MPLBACKEND", raising=False)
    assert cli.main(["--example", "exp-sine", "--plot", str(tmp_path / "exp.png")]) == 0
    assert sorted(p.name for p in tmp_path.iterdir()) == ["exp-1.png", "exp-2.png", "exp-3.png"]


@pytest.mark.parametrize(
    "argv, message",
    [
        (["--expr", "x**2"], "requires three starting abscissas"),
        (["--expr", "x**2", "1", "2"], "expected exactly three abscissas"),
        (["--expr", "x + y", "0", "1", "2"], "Unexpected symbols: y"),
        (["--example", "nope"], "Unknown example 'nope'"),
        (["--max-iterations", "-1"], "must be non-negative"),
    ],
)
def test_input_errors_exit(argv: list[str], message: str) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    assert message in str(exc.value.code)


def test_log_level_is_isolated(monkeypatch: pytest.MonkeyPatch, capsys: Any) -> None:
    root = logging.getLogger()
    old_handlers = root.handlers[:]
    old_level = root.level
    for h in old_handlers:
        root.removeHandler(h)

    real_run = cli.run_approximation

    def fake_run_approximation(*args, **kwargs):
        logging.getLogger().debug("root debug")
        logging.getLogger("spi_search").debug("pkg debug")
        return real_run(*args, **kwargs)

    monkeypatch.setattr(cli, "run_approximation", fake_run_approximation)
    try:
        cli.main(["--expr", "(x-2)**2", "0", "1", "4", "--log-level", "DEBUG"])
        err = capsys.readouterr().err
        assert "pkg debug" in err
        assert "[spi] start" in err
        assert "root debug" not in err
    finally:
        for h in root.handlers[:]:
            root.removeHandler(h)
        for h in old_handlers:
            root.addHandler(h)
        root.setLevel(old_level)
