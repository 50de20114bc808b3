"""A single opportunity record and its comma-separated text form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

FIELD_SEPARATOR = ","
RECORD_TERMINATOR = "\n"


@dataclass(frozen=True)
class Opportunity:
    """An educational opportunity: what it is, when and where it takes place."""

    title: str
    description: str
    category: str
    time: str
    location: str

    def describe(self) -> str:
        """Return the human-readable, multi-line description of the opportunity."""
        return (
            f"Title: {self.title}\n"
            f"Description: {self.description}\n"
            f"Category: {self.category}\n"
            f"Time: {self.time}\n"
            f"Location: {self.location}"
        )

    def to_line(self) -> str:
        """Return the record as one comma-separated line, without a terminator."""
        return FIELD_SEPARATOR.join(
            (self.title, self.description, self.category, self.time, self.location)
        )


class _FieldReader:
    """Reads delimited fields from text the way a line-oriented stream does.

    A read fails only when nothing is left; a field that runs into the end of
    the text without meeting its delimiter is still returned.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def read_until(self, delimiter: str) -> str | None:
        if self._pos >= len(self._text):
            return None
        end = self._text.find(delimiter, self._pos)
        if end == -1:
            field = self._text[self._pos:]
            self._pos = len(self._text)
        else:
            field = self._text[self._pos:end]
            self._pos = end + 1
        return field


def parse_records(text: str) -> Iterator[Opportunity]:
    """Yield the opportunities stored in ``text``.

    Each record is four comma-terminated fields followed by a location that
    runs to the end of the line, so the location may itself contain commas.
    Parsing stops at the first record that cannot be read completely.
    """
    reader = _FieldReader(text)
    while True:
        fields = []
        for _ in range(4):
            field = reader.read_until(FIELD_SEPARATOR)
            if field is None:
                return
            fields.append(field)
        location = reader.read_until(RECORD_TERMINATOR)
        if location is None:
            return
        yield Opportunity(*fields, location)