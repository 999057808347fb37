from pathlib import Path
import pytest
from txtnotes.api import collect_lines, CreateError, InvalidSelection, select
from txtnotes.conf import NotesConf
from txtnotes.models import EditMode, Note


def test_collect_lines():
    assert list(collect_lines(['hello', 'a.b', '. ', '.', 'after'])) == ['hello', 'a.b', '. ']
    assert list(collect_lines(['no', 'terminator'])) == ['no', 'terminator']
    assert list(collect_lines(['.'])) == []


def test_collect_lines_stops_reading_at_terminator():
    source = iter(['one', '.', 'menu choice'])
    assert list(collect_lines(source)) == ['one']
    assert next(source) == 'menu choice'


def test_select():
    listing = [Note('/notes/a.txt'), Note('/notes/b.txt')]
    assert select(listing, '1') == Note('/notes/a.txt')
    assert select(listing, ' 2\n') == Note('/notes/b.txt')
    for bad in ['0', '3', '-1', 'one', '', '1.5']:
        with pytest.raises(InvalidSelection):
            select(listing, bad)
    with pytest.raises(InvalidSelection):
        select([], '1')


def test_ensure_dir(fs):
    notes = NotesConf(notes_dir='/data/notes').instantiate()
    notes.ensure_dir()
    notes.ensure_dir()
    assert Path('/data/notes').is_dir()


def test_ensure_dir_failure(fs):
    fs.create_file('/data/notes')
    notes = NotesConf(notes_dir='/data/notes').instantiate()
    with pytest.raises(OSError):
        notes.ensure_dir()


def test_list_missing_dir(fs):
    assert NotesConf(notes_dir='/nowhere').instantiate().list() == []


def test_list(notes, fs):
    fs.create_file('/notes/b.txt')
    fs.create_file('/notes/a.txt')
    fs.create_file('/notes/c.md')
    fs.create_file('/notes/upper.TXT')
    fs.create_file('/notes/.txt')
    fs.create_file('/notes/sub/deep.txt')
    fs.create_dir('/notes/folder.txt')
    assert notes.list() == [Note('/notes/a.txt'), Note('/notes/b.txt')]


def test_list_sorts_by_code_point(notes, fs):
    for name in ['b.txt', 'B.txt', 'a (1).txt', 'a.txt', 'a (10).txt', 'a (2).txt']:
        fs.create_file(f'/notes/{name}')
    assert [n.name for n in notes.list()] == ['B.txt', 'a (1).txt', 'a (10).txt', 'a (2).txt', 'a.txt', 'b.txt']


def test_list_is_recomputed(notes, fs):
    fs.create_file('/notes/b.txt')
    assert [n.name for n in notes.list()] == ['b.txt']
    fs.create_file('/notes/a.txt')
    assert [n.name for n in notes.list()] == ['a.txt', 'b.txt']


def test_create_and_read(notes):
    note = notes.create('Hello', iter(['hello', 'world', '.', 'ignored']))
    assert note == Note('/notes/Hello.txt')
    assert Path(note.path).read_text() == 'hello\nworld\n'
    assert notes.read(note) == ['hello', 'world']


def test_create_same_title(notes):
    paths = [notes.create('dup', ['.']).path for _ in range(3)]
    assert paths == ['/notes/dup.txt', '/notes/dup (1).txt', '/notes/dup (2).txt']
    assert all(Path(p).read_text() == '' for p in paths)


def test_create_empty_title(notes):
    assert notes.create('', ['x']).name == 'note.txt'


def test_create_failure(fs):
    notes = NotesConf(notes_dir='/missing').instantiate()
    with pytest.raises(CreateError) as excinfo:
        notes.create('title', ['line'])
    assert excinfo.value.path == '/missing/title.txt'
    assert isinstance(excinfo.value.cause, FileNotFoundError)


def test_create_failure_while_writing(notes):
    def lines():
        yield 'first'
        raise OSError(28, 'No space left on device')

    with pytest.raises(CreateError) as excinfo:
        notes.create('full', lines())
    assert excinfo.value.path == '/notes/full.txt'
    assert Path('/notes/full.txt').exists()


def test_overwrite(notes, fs):
    fs.create_file('/notes/a.txt', contents='old\ncontent\n')
    note = Note('/notes/a.txt')
    assert notes.overwrite(note, ['new', '.']) == 1
    assert notes.read(note) == ['new']


def test_append(notes, fs):
    fs.create_file('/notes/a.txt', contents='old\ncontent\n')
    note = Note('/notes/a.txt')
    assert notes.append(note, ['more', 'stuff', '.']) == 2
    assert notes.read(note) == ['old', 'content', 'more', 'stuff']


def test_edit_with_mode(notes, fs):
    fs.create_file('/notes/a.txt', contents='old\n')
    note = Note('/notes/a.txt')
    notes.edit(note, EditMode.APPEND, ['x'])
    assert notes.read(note) == ['old', 'x']
    notes.edit(note, EditMode.OVERWRITE, [])
    assert notes.read(note) == []


def test_delete(notes, fs):
    fs.create_file('/notes/a.txt')
    fs.create_file('/notes/b.txt')
    notes.delete(Note('/notes/a.txt'))
    assert notes.list() == [Note('/notes/b.txt')]


def test_delete_missing(notes):
    with pytest.raises(FileNotFoundError):
        notes.delete(Note('/notes/gone.txt'))


def test_select_rejects_unusual_numbers():
    listing = [Note(f'/notes/{i}.txt') for i in range(12)]
    assert select(listing, '+10') == listing[9]
    for bad in ['1_0', '١', '１', '0x1', '1e1']:
        with pytest.raises(InvalidSelection):
            select(listing, bad)


def test_create_keeps_carriage_returns(notes):
    note = notes.create('t', ['a\rb', 'c\r', '.'])
    assert Path(note.path).read_bytes() == b'a\rb\nc\r\n'
    assert notes.read(note) == ['a\rb', 'c\r']


def test_append_keeps_undecodable_bytes(notes, fs):
    fs.create_file('/notes/latin1.txt', contents=b'caf\xe9\n')
    note = Note('/notes/latin1.txt')
    lines = notes.read(note)
    assert len(lines) == 1
    assert lines[0].startswith('caf')
    notes.append(note, ['more'])
    assert Path(note.path).read_bytes() == b'caf\xe9\nmore\n'
    notes.overwrite(note, lines)
    assert Path(note.path).read_bytes() == b'caf\xe9\n'
