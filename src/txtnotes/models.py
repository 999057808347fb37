"""Defines classes for representing notes and edit requests."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import os.path
import re
from typing import List, Optional

NUMBER_PATTERN = re.compile(r'[+-]?[0-9]+')

FILE_ERRORS = 'surrogateescape'
"""Bytes that aren't valid in the locale's encoding are carried through as lone surrogates and written back unchanged."""

FILE_NEWLINE = '\n'
"""Only ``\\n`` separates lines; a ``\\r`` inside a line is content."""


def parse_number(answer: str) -> int:
    """Converts a number typed by the user, such as ``"2"`` or ``" 2 "``, to an int.

    Only ASCII digits with an optional sign are accepted. Raises :exc:`ValueError` for anything else,
    including forms :func:`int` would allow like ``"1_0"``.
    """
    text = answer.strip()
    if not NUMBER_PATTERN.fullmatch(text):
        raise ValueError(f'Not a number: {answer!r}')
    return int(text)


@dataclass(frozen=True)
class Note:
    """A single plain-text note file.

    An instance does not imply that the file still exists - it may have been deleted since the listing that
    produced it was computed.
    """

    path: str
    """Path of the file, directly inside the notes directory."""

    @property
    def name(self) -> str:
        """The filename shown to the user, e.g. ``groceries (1).txt``."""
        return os.path.basename(self.path)

    def read_lines(self) -> List[str]:
        """Returns the lines of the file without their line terminators.

        Raises :exc:`OSError` if the file cannot be read.
        """
        with open(self.path, 'r', errors=FILE_ERRORS, newline=FILE_NEWLINE) as file:
            return [line[:-1] if line.endswith('\n') else line for line in file]


class EditMode(Enum):
    """How :meth:`txtnotes.api.Notes.edit` treats the existing content of a note."""

    OVERWRITE = '1'
    APPEND = '2'

    @property
    def file_mode(self) -> str:
        return 'w' if self == EditMode.OVERWRITE else 'a'

    @classmethod
    def parse(cls, choice: str) -> Optional[EditMode]:
        """Returns the mode for a menu choice like ``"2"``, or None if the choice is not one of the modes.

        Raises :exc:`ValueError` if the choice is not a number at all (see :func:`parse_number`).
        """
        number = parse_number(choice)
        try:
            return cls(str(number))
        except ValueError:
            return None
