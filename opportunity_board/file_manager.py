"""Saving and loading an opportunity database to and from a text file."""

from __future__ import annotations

from .database import OpportunityDatabase
from .opportunity import RECORD_TERMINATOR, parse_records


def save_opportunities(filename: str, db: OpportunityDatabase) -> None:
    """Write every opportunity in ``db`` to ``filename``.

    Raises OSError if the file cannot be opened for writing.
    """
    with open(filename, "w", encoding="utf-8", newline="\n") as file:
        file.writelines(opportunity.to_line() + RECORD_TERMINATOR for opportunity in db)


def load_opportunities(filename: str, db: OpportunityDatabase) -> int:
    """Add the opportunities stored in ``filename`` to ``db`` and return how many.

    Raises OSError (FileNotFoundError for a missing file) if it cannot be read.
    """
    with open(filename, encoding="utf-8", newline="") as file:
        text = file.read()
    count = 0
    for opportunity in parse_records(text):
        db.add_opportunity(
            opportunity.title,
            opportunity.description,
            opportunity.category,
            opportunity.time,
            opportunity.location,
        )
        count += 1
    return count