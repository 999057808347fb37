"""Provides the main entry point for using the library, :class:`Notes`"""

from __future__ import annotations
from itertools import takewhile
import logging
import os
import os.path
from typing import Iterable, Iterator, List
from txtnotes.conf import NotesConf
from txtnotes.models import EditMode, FILE_ERRORS, FILE_NEWLINE, Note, parse_number
from txtnotes.naming import SUFFIX, available_path

logger = logging.getLogger(__name__)

TERMINATOR = '.'


class Error(Exception):
    pass


class InvalidSelection(Error):
    """Raised when a user's choice does not identify one of the listed notes."""


class CreateError(Error):
    """Raised when a new note cannot be written. :attr:`path` is the file that was being created."""
    def __init__(self, message: str, path: str, cause: BaseException = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.cause = cause


def collect_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yields lines up to, but not including, the first line that is exactly ``.``

    Lines that merely contain a period are content. If the input runs out first, every line is yielded.
    """
    return takewhile(lambda line: line != TERMINATOR, lines)


def select(listing: List[Note], choice: str) -> Note:
    """Returns the note at the 1-based position typed by the user.

    Raises :exc:`InvalidSelection` if the listing is empty, the choice is not a number, or it is out of range.
    """
    try:
        number = parse_number(choice)
    except (AttributeError, ValueError):
        raise InvalidSelection(f'Not a number: {choice!r}')
    if number < 1 or number > len(listing):
        raise InvalidSelection(f'No note numbered {number}')
    return listing[number - 1]


class Notes:
    """Main entry point for working programmatically with your collection of notes.

    Generally, you should get an instance using :meth:`txtnotes.conf.NotesConf.instantiate`.

    Methods that touch files let :exc:`OSError` propagate; nothing is retried.

    Here's an example that appends a line to every note:

    .. code-block:: python

       from txtnotes.conf import NotesConf
       notes = NotesConf(notes_dir='/tmp/notes').instantiate()
       notes.ensure_dir()
       for note in notes.list():
           notes.append(note, ['reviewed'])

    .. attribute:: conf
       :type: txtnotes.conf.NotesConf
    """

    def __init__(self, conf: NotesConf):
        self.conf = conf

    @property
    def directory(self) -> str:
        return self.conf.notes_dir

    def ensure_dir(self) -> None:
        """Creates the notes directory if it does not already exist.

        Raises :exc:`OSError` if that fails.
        """
        os.makedirs(self.directory, exist_ok=True)

    def list(self) -> List[Note]:
        """Returns the notes currently in the directory, sorted by path.

        Only regular files whose extension is exactly ``.txt`` are included; subdirectories are not searched.
        Returns an empty list if the directory does not exist. The result is computed fresh on every call.
        """
        if not os.path.isdir(self.directory):
            return []
        paths = []
        with os.scandir(self.directory) as entries:
            for entry in entries:
                if entry.is_file() and os.path.splitext(entry.name)[1] == SUFFIX:
                    paths.append(entry.path)
        paths.sort()
        logger.debug('Listed %d notes in %s', len(paths), self.directory)
        return [Note(p) for p in paths]

    def new_path(self, title: str) -> str:
        """Returns an unused path for a note with the given title. See :func:`txtnotes.naming.available_path`."""
        return available_path(self.directory, title)

    def create(self, title: str, lines: Iterable[str]) -> Note:
        """Creates a new note from the title and lines of content.

        The file is created before the lines are consumed, so ``lines`` may be a lazy iterator reading from the
        user. Consumption stops at a line that is exactly ``.`` (see :func:`collect_lines`).

        Raises :exc:`CreateError` if the file cannot be opened or written.
        """
        note = Note(self.new_path(title))
        try:
            count = self._write(note, lines, 'w')
        except OSError as e:
            raise CreateError(f'Could not write {note.path}: {e}', note.path, e) from e
        logger.info('Created %s with %d lines', note.path, count)
        return note

    def read(self, note: Note) -> List[str]:
        return note.read_lines()

    def edit(self, note: Note, mode: EditMode, lines: Iterable[str]) -> int:
        """Replaces or extends the content of an existing note, depending on the mode.

        Returns the number of lines written.
        """
        count = self._write(note, lines, mode.file_mode)
        logger.info('Edited %s (%s, %d lines)', note.path, mode.name.lower(), count)
        return count

    def overwrite(self, note: Note, lines: Iterable[str]) -> int:
        """Convenience method equivalent to calling :meth:`edit` with :attr:`EditMode.OVERWRITE`"""
        return self.edit(note, EditMode.OVERWRITE, lines)

    def append(self, note: Note, lines: Iterable[str]) -> int:
        """Convenience method equivalent to calling :meth:`edit` with :attr:`EditMode.APPEND`"""
        return self.edit(note, EditMode.APPEND, lines)

    def delete(self, note: Note) -> None:
        os.remove(note.path)
        logger.info('Deleted %s', note.path)

    def _write(self, note: Note, lines: Iterable[str], mode: str) -> int:
        count = 0
        with open(note.path, mode, errors=FILE_ERRORS, newline=FILE_NEWLINE) as file:
            for line in collect_lines(lines):
                file.write(line + '\n')
                count += 1
        return count
