import io

from gridpath.__main__ import main
from gridpath.app.demo import run_demo


def test_demo_matches_expected_grids():
    lines = []
    assert run_demo(lines.append) is True
    assert "expected shortest: 12" in lines
    assert "got shortest: 12" in lines


def test_main_demo(capsys):
    assert main(["--demo"]) == 0
    assert "got shortest: 12" in capsys.readouterr().out


def test_main_text_session(monkeypatch, capsys):
    session = "\n".join(["s", "0", "0", "g", "2", "0", "b", "1", "0", "exit"]) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(session))
    assert main(["--width=3", "--height=3"]) == 0
    out = capsys.readouterr().out
    assert "Shortest distance: 4" in out


def test_main_unreachable(monkeypatch, capsys):
    session = "\n".join(["s", "0", "0", "g", "2", "0", "w", "1", "0", "1", "2", "exit"]) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(session))
    assert main(["--width=3", "--height=3"]) == 0
    assert "No path between start and goal" in capsys.readouterr().out


def test_main_aborted_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("s\n0\n0\n"))
    assert main([]) == 1


def test_main_bad_config(capsys):
    assert main(["--width=zero"]) == 1
    assert "width" in capsys.readouterr().err
