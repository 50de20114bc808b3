# opportunity-board

An interactive terminal tool that keeps a list of educational opportunities:
internships, lectures, workshops, summer camps, conferences, training and
volunteer openings. You can add new entries and search the ones that are
already on the list.

## Installing

```
pip install .
```

## Running

```
opportunity-board
```

The command takes no options. When it starts, it loads `opportunities.txt` from
the current directory. If that file is missing, it prints a warning to standard
error and starts with an empty list. It then shows this menu:

```
--- Main Menu ---
1. Add Opportunity
2. Search Opportunity
3. Exit
```

The menu appears again after each action. It stops when you choose `3` or when
input ends. Any other entry prints `Invalid choice, please try again.`

- **Add Opportunity** asks for a title, a description, a category, a time and a
  location. You pick the category from a numbered list:

  ```
  1. Internship
  2. Lecture
  3. Workshop
  4. Summer Camp
  5. Conference
  6. Training
  7. Volunteer Opportunity
  0. Go back
  ```

  To go back to the main menu without adding anything, type `back` at the
  title prompt. At the category prompt, `0` does the same, and so does
  anything that is not a number. Any other number outside 1–7 stores the
  category as `Other`. Each new entry is written to `opportunities.txt` at once.
  If the file cannot be written, an error is printed to standard error and the
  entry stays in memory.
- **Search Opportunity** asks whether to search by title (1), location (2) or
  category (3), and then asks for the text to look for. It prints every entry
  whose field contains that text, in the order the entries were added. The
  match is case-sensitive. If nothing matches, it prints a message saying so.

## File format

Each line of `opportunities.txt` holds one opportunity, with its fields
separated by commas:

```
title,description,category,time,location
```

The location runs to the end of the line, so it may contain commas. Reading
stops at the first record that is not complete.

## Using it from Python

```python
from opportunity_board.database import OpportunityDatabase
from opportunity_board.search import SearchSystem

db = OpportunityDatabase()
db.add_opportunity("Robotics Workshop", "Build a rover", "Workshop",
                   "Saturday 10:00", "Main Hall")
db.save_to_file("opportunities.txt")

for opp in SearchSystem(db).find("location", "Hall"):
    print(opp.describe())
```

- `opportunity_board.opportunity.Opportunity` is a frozen dataclass with the
  fields `title`, `description`, `category`, `time` and `location`. It has two
  methods. `describe()` returns a multi-line description. `to_line()` returns
  the record as a comma-separated line. `parse_records(text)` yields the
  opportunities found in a file's text.
- `OpportunityDatabase` keeps entries in the order they were added. It supports
  `len()` and iteration. Its `get(index)` method returns `None` when the index
  is out of range, and `display_all_opportunities(out)` writes every entry's
  description to `out`, or to standard output when no stream is given.
  `save_to_file(filename)` raises `OSError` if the file cannot be written.
  `load_from_file(filename)` returns the number of entries it read. If the
  file is missing, it prints a warning and returns 0.
- `SearchSystem(db, stdin, stdout)` provides these methods:
  - `find(field, query)` returns the matching entries without printing them.
    The field is `"title"`, `"location"` or `"category"`; any other field
    raises `ValueError`.
  - `search_by_title`, `search_by_location` and `search_by_category` print the
    matches and return them.
  - `search_opportunity()` runs the interactive prompt.
- `Admin(db, stdin, stdout)` runs the interactive prompts for adding entries
  and for searching.
- `opportunity_board.file_manager` provides `save_opportunities(filename, db)`
  and `load_opportunities(filename, db)`. They do the same work as the
  database's own methods, with one difference: `load_opportunities` raises
  `FileNotFoundError` for a missing file instead of printing a warning.

## What it does not do

- The data file is always `opportunities.txt` in the current directory.
- Entries cannot be edited or removed. The only way to change them is to edit
  the file by hand.
- Fields are not quoted or escaped when saved. A comma in any of the first four
  fields, or a line break in any field, will break that record when the file is
  read back.

## Running the tests

```
pip install .[test]
pytest
```