"""Interactive and programmatic searching of an opportunity database."""

from __future__ import annotations

import re
import sys
from typing import IO

from .database import OpportunityDatabase
from .opportunity import Opportunity

SEARCH_FIELDS = ("title", "location", "category")

_NOT_FOUND = {
    "title": "No opportunities found with that title.",
    "location": "No opportunities found in that location.",
    "category": "No opportunities found in that category.",
}

_MENU_CHOICES = {1: "title", 2: "location", 3: "category"}

_MENU = (
    "\n--- Search Options ---\n"
    "1. Search by Title\n"
    "2. Search by Location\n"
    "3. Search by Category\n"
    "Enter your choice: "
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _read_line(stream: IO[str]) -> str | None:
    line = stream.readline()
    if line == "":
        return None
    return line[:-1] if line.endswith("\n") else line


def _parse_int(text: str | None) -> int | None:
    if text is None:
        return None
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


class SearchSystem:
    """Finds opportunities whose title, location or category contains a query."""

    def __init__(
        self,
        db: OpportunityDatabase,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
    ) -> None:
        self._db = db
        self._in = sys.stdin if stdin is None else stdin
        self._out = sys.stdout if stdout is None else stdout

    def find(self, field: str, query: str) -> list[Opportunity]:
        """Return the opportunities whose ``field`` contains ``query``, in stored order."""
        if field not in SEARCH_FIELDS:
            raise ValueError(f"cannot search by {field!r}")
        return [opp for opp in self._db if query in getattr(opp, field)]

    def _report(self, field: str, query: str) -> list[Opportunity]:
        matches = self.find(field, query)
        for opp in matches:
            self._out.write(opp.describe() + "\n")
        if not matches:
            self._out.write(_NOT_FOUND[field] + "\n")
        return matches

    def search_by_title(self, title: str) -> list[Opportunity]:
        """Show and return the opportunities whose title contains ``title``."""
        return self._report("title", title)

    def search_by_location(self, location: str) -> list[Opportunity]:
        """Show and return the opportunities whose location contains ``location``."""
        return self._report("location", location)

    def search_by_category(self, category: str) -> list[Opportunity]:
        """Show and return the opportunities whose category contains ``category``."""
        return self._report("category", category)

    def search_opportunity(self) -> list[Opportunity]:
        """Ask which field to search and for what, then show and return the matches."""
        self._out.write(_MENU)
        field = _MENU_CHOICES.get(_parse_int(_read_line(self._in)))
        if field is None:
            self._out.write("Invalid choice!\n")
            return []
        self._out.write(f"Enter the {field} to search for: ")
        query = _read_line(self._in) or ""
        return self._report(field, query)