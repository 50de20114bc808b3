"""Command-line entry point: the main menu of the opportunity board."""

from __future__ import annotations

import re
import sys

from .admin import DATA_FILE, Admin
from .database import OpportunityDatabase

_MENU = (
    "\n--- Main Menu ---\n"
    "1. Add Opportunity\n"
    "2. Search Opportunity\n"
    "3. Exit\n"
    "Enter your choice: "
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def main(argv: list[str] | None = None) -> int:
    """Load the stored opportunities and run the main menu until the user exits."""
    stdin, stdout = sys.stdin, sys.stdout
    db = OpportunityDatabase()
    admin = Admin(db, stdin, stdout)

    stdout.write("Loading opportunities from file...\n")
    db.load_from_file(DATA_FILE)
    stdout.write("Opportunities loaded from file.\n")

    while True:
        stdout.write(_MENU)
        line = stdin.readline()
        if line == "":
            break
        match = _LEADING_INT.match(line)
        choice = int(match.group(1)) if match else None
        if choice == 1:
            stdout.write("Adding opportunity...\n")
            admin.add_opportunity_to_database()
        elif choice == 2:
            stdout.write("Searching opportunity...\n")
            admin.search_opportunity()
        elif choice == 3:
            stdout.write("Exiting the program.\n")
            break
        else:
            stdout.write("Invalid choice, please try again.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())