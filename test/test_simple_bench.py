import pytest

from simple_bench import parse_args


def test_parse_args_defaults():
    args = parse_args([])

    assert not args.check
    assert not args.deletes


def test_parse_args_flags():
    args = parse_args(["--check", "--deletes"])

    assert args.check
    assert args.deletes


def test_check_help_matches_when_it_runs(capsys):
    with pytest.raises(SystemExit):
        parse_args(["--help"])

    out = " ".join(capsys.readouterr().out.split())
    assert "verify the tree invariants once all writes are done" in out
