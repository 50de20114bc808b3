import pytest

from opportunity_board.database import OpportunityDatabase
from opportunity_board.file_manager import load_opportunities, save_opportunities


@pytest.fixture
def db():
    database = OpportunityDatabase()
    database.add_opportunity("Camp", "Outdoor camp", "Summer Camp", "July", "Lake")
    database.add_opportunity("Help", "Help out", "Volunteer Opportunity", "Sat", "Park, north gate")
    return database


def test_round_trip(db, tmp_path):
    path = str(tmp_path / "data.txt")
    save_opportunities(path, db)
    loaded = OpportunityDatabase()
    assert load_opportunities(path, loaded) == 2
    assert list(loaded) == list(db)


def test_save_format_matches_records(db, tmp_path):
    path = tmp_path / "data.txt"
    save_opportunities(str(path), db)
    assert path.read_text(encoding="utf-8").splitlines() == [o.to_line() for o in db]


def test_save_empty_database_gives_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    save_opportunities(str(path), OpportunityDatabase())
    assert path.read_text(encoding="utf-8") == ""


def test_load_appends(db, tmp_path):
    path = str(tmp_path / "data.txt")
    save_opportunities(path, db)
    load_opportunities(path, db)
    records = list(db)
    assert len(records) == 4
    assert records[:2] == records[2:]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_opportunities(str(tmp_path / "absent.txt"), OpportunityDatabase())


def test_save_to_directory_raises(db, tmp_path):
    with pytest.raises(OSError):
        save_opportunities(str(tmp_path), db)


def test_load_drops_incomplete_trailing_record(tmp_path):
    path = tmp_path / "partial.txt"
    path.write_text("a,b,c,d,e\nbroken,line\n", encoding="utf-8")
    database = OpportunityDatabase()
    assert load_opportunities(str(path), database) == 1
    assert database.get(0).location == "e"