import io

import pytest

from Scripts.solve import build_parser, main


@pytest.fixture
def problem_file(tmp_path):
    path = tmp_path / "problem.txt"
    path.write_text("3 50\n60 10\n100 20\n120 30\n", encoding="utf-8")
    return path


@pytest.mark.parametrize("strategy", ["auto", "dp", "bnb"])
def test_solves_problem_file(problem_file, capsys, strategy):
    assert main([str(problem_file), "--strategy", strategy]) == 0
    assert capsys.readouterr().out == "220 1\n0 1 1\n"


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 5\n60 10\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "0 1\n0\n"


def test_infeasible_problem_fails(tmp_path, capsys):
    path = tmp_path / "problem.txt"
    path.write_text("1 -1\n5 5\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == ""


def test_malformed_problem_fails(tmp_path):
    path = tmp_path / "problem.txt"
    path.write_text("2 10\n1 1\n", encoding="utf-8")
    assert main([str(path)]) == 1


def test_missing_file_fails(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1


def test_parser_defaults_defer_to_config():
    args = build_parser().parse_args([])
    assert args.input is None
    assert args.strategy is None
    assert args.tie_break is None
    assert args.dp_threshold is None


def test_values_beyond_int64(tmp_path, capsys):
    path = tmp_path / "problem.txt"
    path.write_text("2 2\n10000000000000000000 1\n3 1\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "10000000000000000003 1\n1 1\n"
