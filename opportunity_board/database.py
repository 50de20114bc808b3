"""In-memory collection of opportunities with plain-text persistence."""

from __future__ import annotations

import sys
from typing import IO, Iterator

from .opportunity import RECORD_TERMINATOR, Opportunity, parse_records


class OpportunityDatabase:
    """Holds opportunities in the order they were added."""

    def __init__(self) -> None:
        self._opportunities: list[Opportunity] = []

    def add_opportunity(
        self, title: str, description: str, category: str, time: str, location: str
    ) -> Opportunity:
        """Create an opportunity from the given details, store it and return it."""
        opportunity = Opportunity(title, description, category, time, location)
        self._opportunities.append(opportunity)
        return opportunity

    def display_all_opportunities(self, out: IO[str] | None = None) -> None:
        """Write the description of every opportunity to ``out`` (stdout by default)."""
        stream = sys.stdout if out is None else out
        for opportunity in self._opportunities:
            stream.write(opportunity.describe() + "\n")

    def save_to_file(self, filename: str) -> None:
        """Write every opportunity to ``filename``, one record per line.

        Raises OSError if the file cannot be written.
        """
        with open(filename, "w", encoding="utf-8", newline="\n") as file:
            for opportunity in self._opportunities:
                file.write(opportunity.to_line() + RECORD_TERMINATOR)

    def load_from_file(self, filename: str) -> int:
        """Append the opportunities stored in ``filename`` and return how many were read.

        A missing file is not an error: a warning is printed and nothing is loaded.
        """
        try:
            with open(filename, encoding="utf-8", newline="") as file:
                text = file.read()
        except FileNotFoundError:
            print(
                f"Warning: File {filename} not found. No opportunities loaded.",
                file=sys.stderr,
            )
            return 0
        loaded = list(parse_records(text))
        self._opportunities.extend(loaded)
        print("Opportunities loaded successfully.")
        return len(loaded)

    def get(self, index: int) -> Opportunity | None:
        """Return the opportunity at ``index``, or None if there is none."""
        if 0 <= index < len(self._opportunities):
            return self._opportunities[index]
        return None

    def __len__(self) -> int:
        return len(self._opportunities)

    def __iter__(self) -> Iterator[Opportunity]:
        return iter(self._opportunities)