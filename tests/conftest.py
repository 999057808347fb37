import pytest
from txtnotes.conf import NotesConf


@pytest.fixture
def notes(fs):
    nd = NotesConf(notes_dir='/notes').instantiate()
    nd.ensure_dir()
    return nd
