import io

import pytest

from opportunity_board.cli import main
from opportunity_board.database import OpportunityDatabase


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def run(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return main([])


def test_exit_immediately(workdir, monkeypatch, capsys):
    assert run(monkeypatch, "3\n") == 0
    captured = capsys.readouterr()
    assert "Exiting the program." in captured.out
    assert "No opportunities loaded." in captured.err


def test_invalid_choice_then_exit(workdir, monkeypatch, capsys):
    assert run(monkeypatch, "8\nzzz\n3\n") == 0
    assert capsys.readouterr().out.count("Invalid choice, please try again.") == 2


def test_end_of_input_stops(workdir, monkeypatch, capsys):
    assert run(monkeypatch, "") == 0
    assert "--- Main Menu ---" in capsys.readouterr().out


def test_add_then_exit_writes_file(workdir, monkeypatch, capsys):
    assert run(monkeypatch, "1\nFair\nJobs\n5\nTuesday\nHall\n3\n") == 0
    db = OpportunityDatabase()
    assert db.load_from_file(str(workdir / "opportunities.txt")) == 1
    stored = db.get(0)
    assert (stored.title, stored.category, stored.location) == ("Fair", "Conference", "Hall")
    assert "Adding opportunity..." in capsys.readouterr().out


def test_search_loaded_data(workdir, monkeypatch, capsys):
    seed = OpportunityDatabase()
    seed.add_opportunity("Math Camp", "Numbers", "Summer Camp", "August", "Campus")
    seed.save_to_file(str(workdir / "opportunities.txt"))
    assert run(monkeypatch, "2\n1\nMath\n3\n") == 0
    out = capsys.readouterr().out
    assert seed.get(0).describe() in out
    assert "Searching opportunity..." in out


def test_search_without_match(workdir, monkeypatch, capsys):
    assert run(monkeypatch, "2\n3\nLecture\n3\n") == 0
    assert "No opportunities found in that category." in capsys.readouterr().out