import io

import pytest

from intsets.cli import main, run

HEADER = "\ninsercoes feitas!\n"


@pytest.mark.parametrize("kind", [0, 1])
def test_membership_found(kind):
    out = run(f"{kind} 3 2 1 2 3 4 5 1 2")
    assert out == HEADER + "{1 2 3 }\n\n{4 5 }\n\nPertence."


@pytest.mark.parametrize("kind", [0, 1])
def test_membership_missing(kind):
    out = run(f"{kind} 2 1 7 8 9 1 9")
    assert out.endswith("Nao pertence.")


@pytest.mark.parametrize("kind", [0, 1])
def test_union(kind):
    out = run(f"{kind} 3 3 5 1 3 2 3 4 2")
    assert out.endswith("{1 2 3 4 5 }\n")


@pytest.mark.parametrize("kind", [0, 1])
def test_intersection(kind):
    out = run(f"{kind} 3 3 5 1 3 2 3 5 3")
    assert out.endswith("{3 5 }\n")


@pytest.mark.parametrize("kind", [0, 1])
def test_remove_present(kind):
    out = run(f"{kind} 3 1 5 1 3 9 4 3")
    assert out.endswith("{\n".replace("{", "{1 5 }"))
    assert "elemento nao esta no conjunto" not in out


@pytest.mark.parametrize("kind", [0, 1])
def test_remove_absent(kind):
    out = run(f"{kind} 2 1 5 1 9 4 7")
    assert out.endswith("elemento nao esta no conjunto\n{1 5 }\n")


def test_both_kinds_produce_same_output():
    data = "3 4 10 -2 7 7 -2 0 11 {op}"
    for op in ("2", "3", "1 7", "4 10", "4 99", "9"):
        text = data.format(op=op)
        assert run("0 " + text) == run("1 " + text)


def test_unknown_operation_prints_only_sets():
    out = run("0 1 1 4 6 8")
    assert out == HEADER + "{4 }\n\n{6 }\n\n"


def test_invalid_structure_raises():
    with pytest.raises(ValueError):
        run("5 1 1 1 2 2")


def test_truncated_input_raises():
    with pytest.raises(ValueError, match="unexpected end of input"):
        run("0 2 2 1")


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2 2 1 2 2 3 2"))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith("{1 2 3 }\n")


def test_main_reports_errors(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("7 0 0 1"))
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error:")