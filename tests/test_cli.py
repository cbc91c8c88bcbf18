import io
import sys

import pytest

from junkfield.cli import main, read_intro, update_best_score


@pytest.fixture
def files(tmp_path):
    intro = tmp_path / "intro.txt"
    intro.write_text("Welcome pilot\nCollect the junk\n")
    scores = tmp_path / "scores.txt"
    scores.write_text("0\n")
    return intro, scores


def run(monkeypatch, files, text, seed=1):
    intro, scores = files
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    return main(["--intro", str(intro), "--scores", str(scores), "--seed", str(seed)])


def test_read_intro(files):
    intro, _ = files
    assert read_intro(intro) == "Welcome pilot\nCollect the junk\n"


def test_read_intro_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_intro(tmp_path / "absent.txt")


def test_update_best_score_higher(tmp_path):
    path = tmp_path / "best.txt"
    path.write_text("3\n")
    assert update_best_score(path, 5) == 3
    assert path.read_text() == "5\n"


def test_update_best_score_lower_keeps_file(tmp_path):
    path = tmp_path / "best.txt"
    path.write_text("3\n")
    assert update_best_score(path, 2) == 3
    assert path.read_text() == "3\n"


def test_update_best_score_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        update_best_score(tmp_path / "absent.txt", 1)


def test_update_best_score_garbage(tmp_path):
    path = tmp_path / "best.txt"
    path.write_text("abc")
    with pytest.raises(ValueError):
        update_best_score(path, 1)


def test_main_quit(monkeypatch, capsys, files):
    assert run(monkeypatch, files, "1\nx\nq\n") == 0
    out = capsys.readouterr().out
    assert "Welcome pilot" in out
    assert "use w/a/s/d to move" in out
    assert "fuel: 60/60" in out
    assert files[1].read_text() == "0\n"


def test_main_reprompts_for_difficulty(monkeypatch, capsys, files):
    assert run(monkeypatch, files, "abc\n9\n2\nx\nq\n") == 0
    out = capsys.readouterr().out
    assert out.count("please enter your choice") == 2
    rows = [line for line in out.splitlines() if line and set(line) <= set(".#@&")]
    assert rows
    assert all(len(row) == 30 for row in rows)


def test_main_end_of_input(monkeypatch, files):
    assert run(monkeypatch, files, "1\n") == 0


def test_main_missing_intro(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\nx\nq\n"))
    code = main(["--intro", str(tmp_path / "absent.txt"), "--scores", str(tmp_path / "s.txt")])
    assert code == 1


def test_main_death_records_score(monkeypatch, capsys, files):
    assert run(monkeypatch, files, "1\nx\n" + "1\n" * 1000) == 0
    out = capsys.readouterr().out
    assert "you scored:" in out
    assert int(files[1].read_text()) >= 1