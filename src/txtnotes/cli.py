"""Command-line interface for txtnotes: an interactive, numbered menu."""

import argparse
import logging
from logging.handlers import RotatingFileHandler
from terminaltables import AsciiTable
from txtnotes.api import CreateError, InvalidSelection, Notes, select
from txtnotes.conf import NotesConf
from txtnotes.console import Console
from txtnotes.models import EditMode, Note, parse_number

logger = logging.getLogger(__name__)

EXIT_CHOICE = 6

LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'


def _print_listing(listing, console: Console) -> None:
    for i, note in enumerate(listing, start=1):
        console.write(f'{i}) {note.name}')


def _pick(notes: Notes, console: Console) -> Note:
    """Shows a freshly computed, numbered listing and returns the note the user chooses.

    Raises :exc:`InvalidSelection` if there are no notes or the answer doesn't match one.
    """
    listing = notes.list()
    if not listing:
        raise InvalidSelection('No notes found')
    _print_listing(listing, console)
    choice = console.prompt('Choose note number: ')
    if choice is None:
        raise InvalidSelection('No answer')
    return select(listing, choice)


def _list(notes: Notes, console: Console) -> None:
    listing = notes.list()
    if not listing:
        console.write('No notes found.')
        return
    data = [('#', 'Filename', 'Lines')]
    for i, note in enumerate(listing, start=1):
        try:
            count = str(len(notes.read(note)))
        except OSError:
            count = '?'
        data.append((str(i), note.name, count))
    table = AsciiTable(data)
    table.justify_columns[0] = 'right'
    table.justify_columns[2] = 'right'
    console.write(table.table)


def _create(notes: Notes, console: Console) -> None:
    title = console.prompt('Enter note title: ') or ''
    console.write('Enter note content. End with a single line containing only a dot (.)')
    try:
        note = notes.create(title, console.lines())
    except CreateError as e:
        logger.warning('Could not create note titled %r: %s', title, e.cause)
        console.error(f'Failed to create note file: {e.path}')
        return
    console.write(f'Saved: {note.path}')


def _view(notes: Notes, console: Console) -> None:
    note = _pick(notes, console)
    try:
        lines = notes.read(note)
    except OSError as e:
        logger.warning('Could not read %s: %s', note.path, e)
        console.error(f'Failed to open: {note.path}')
        return
    console.write(f'---- {note.name} ----')
    for line in lines:
        console.write(line)
    console.write('---- end ----')


def _edit(notes: Notes, console: Console) -> None:
    note = _pick(notes, console)
    console.write('Edit options:')
    console.write('1) Overwrite')
    console.write('2) Append')
    try:
        mode = EditMode.parse(console.prompt('Choose: ') or '')
    except ValueError:
        console.write('Invalid input.')
        return
    if mode is None:
        console.write('Unknown option.')
        return
    if mode == EditMode.OVERWRITE:
        prompt, failure, done = 'Enter new content.', 'Failed to open for writing.', 'Overwritten.'
    else:
        prompt, failure, done = 'Enter content to append.', 'Failed to open for appending.', 'Appended.'

    def content():
        console.write(f'{prompt} End with a single line containing only a dot (.)')
        yield from console.lines()

    try:
        notes.edit(note, mode, content())
    except OSError as e:
        logger.warning('Could not edit %s: %s', note.path, e)
        console.error(failure)
        return
    console.write(done)


def _delete(notes: Notes, console: Console) -> None:
    note = _pick(notes, console)
    answer = (console.prompt(f"Delete '{note.name}'? (y/N): ") or '').strip()
    if answer[:1] not in ('y', 'Y'):
        console.write('Canceled.')
        return
    try:
        notes.delete(note)
    except OSError as e:
        logger.warning('Could not delete %s: %s', note.path, e)
        console.error(f'Failed to delete: {e}')
        return
    console.write('Deleted.')


ACTIONS = {
    1: ('List notes', _list),
    2: ('Create note', _create),
    3: ('View note', _view),
    4: ('Edit note (overwrite/append)', _edit),
    5: ('Delete note', _delete),
}


def _print_menu(console: Console) -> None:
    console.write()
    console.write('txtnotes - menu')
    for number, (label, _) in ACTIONS.items():
        console.write(f'{number}) {label}')
    console.write(f'{EXIT_CHOICE}) Exit')


def run(notes: Notes, console: Console) -> int:
    """Runs the menu loop until the user exits or the input runs out, and returns the exit code.

    The notes directory is created first; if that fails, the loop is never entered and 1 is returned.
    """
    try:
        notes.ensure_dir()
    except OSError as e:
        logger.error('Could not create notes directory %s: %s', notes.directory, e)
        console.error('Failed to ensure notes directory exists.')
        return 1

    while True:
        _print_menu(console)
        answer = console.prompt('Choose: ')
        if answer is None:
            console.write()
            console.write('Goodbye.')
            return 0
        try:
            choice = parse_number(answer)
        except ValueError:
            console.write('Invalid input.')
            continue
        if choice == EXIT_CHOICE:
            console.write('Goodbye.')
            return 0
        if choice not in ACTIONS:
            console.write('Unknown option.')
            continue
        try:
            ACTIONS[choice][1](notes, console)
        except InvalidSelection as e:
            logger.debug('Invalid selection: %s', e)
            console.write('Invalid selection.')


def _configure_logging(conf: NotesConf) -> None:
    if not conf.log_path:
        return
    package_logger = logging.getLogger('txtnotes')
    if any(isinstance(h, RotatingFileHandler) for h in package_logger.handlers):
        return
    handler = RotatingFileHandler(conf.log_path, maxBytes=2 * 1024 * 1024, backupCount=5)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.setLevel(conf.log_level.upper())
    package_logger.addHandler(handler)


def argparser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        description='Create, list, view, edit and delete plain-text notes through an interactive menu. '
                    'Notes are stored as .txt files in the directory configured in ~/.txtnotes.conf.py, '
                    'or in ./notes by default.')


def main(args=None) -> int:
    """Runs the tool and returns its exit code.

    args may be an array of string command-line arguments; if absent,
    the process's arguments are used.
    """
    argparser().parse_args(args)
    conf = NotesConf.for_user()
    _configure_logging(conf)
    return run(conf.instantiate(), Console())
