"""Interactive administration: entering new opportunities and searching."""

from __future__ import annotations

import re
import sys
from typing import IO

from .database import OpportunityDatabase
from .opportunity import Opportunity
from .search import SearchSystem

DATA_FILE = "opportunities.txt"

CATEGORIES = (
    "Internship",
    "Lecture",
    "Workshop",
    "Summer Camp",
    "Conference",
    "Training",
    "Volunteer Opportunity",
)
OTHER_CATEGORY = "Other"
BACK = "back"

_CATEGORY_MENU = (
    "\n--- Category Menu ---\n"
    + "".join(f"{number}. {name}\n" for number, name in enumerate(CATEGORIES, start=1))
    + "0. Go back\n"
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _category_choice(text: str) -> int:
    """Read a menu number; anything that is not a number counts as 'go back'."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class Admin:
    """Adds opportunities to a database from prompted input and saves them."""

    def __init__(
        self,
        db: OpportunityDatabase,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
    ) -> None:
        self._db = db
        self._in = sys.stdin if stdin is None else stdin
        self._out = sys.stdout if stdout is None else stdout

    def _ask(self, prompt: str) -> str:
        self._out.write(prompt)
        line = self._in.readline()
        return line[:-1] if line.endswith("\n") else line

    def input_opportunity_details(self) -> Opportunity | None:
        """Prompt for an opportunity's details; return None if the user goes back."""
        title = self._ask(
            "Enter opportunity title (or type 'back' to return to the main menu): "
        )
        if title == BACK:
            return None
        description = self._ask("Enter opportunity description: ")

        self._out.write(_CATEGORY_MENU)
        choice = _category_choice(
            self._ask(
                "Enter the number for the category "
                "(or type 'back' to return to the main menu): "
            )
        )
        if choice == 0:
            return None
        if 1 <= choice <= len(CATEGORIES):
            category = CATEGORIES[choice - 1]
        else:
            self._out.write("Invalid category choice, defaulting to 'Other'.\n")
            category = OTHER_CATEGORY

        time = self._ask("Enter opportunity time: ")
        location = self._ask("Enter opportunity location: ")
        return Opportunity(title, description, category, time, location)

    def add_opportunity_to_database(self) -> Opportunity | None:
        """Prompt for a new opportunity, store it and save the database to disk."""
        details = self.input_opportunity_details()
        if details is None:
            self._out.write("Going back to the main menu...\n")
            return None
        added = self._db.add_opportunity(
            details.title,
            details.description,
            details.category,
            details.time,
            details.location,
        )
        self._save()
        self._out.write("Opportunity added and saved successfully!\n")
        return added

    def _save(self) -> None:
        try:
            self._db.save_to_file(DATA_FILE)
        except OSError as error:
            print(f"Error: {error}", file=sys.stderr)
        self._out.write(f"Saved to {DATA_FILE}.\n")

    def search_opportunity(self) -> list[Opportunity]:
        """Run an interactive search over the database and return the matches."""
        return SearchSystem(self._db, self._in, self._out).search_opportunity()