from __future__ import annotations
from dataclasses import dataclass, replace
import os.path
from typing import Optional


DEFAULT_NOTES_DIR = 'notes'


@dataclass
class NotesConf:
    notes_dir: str = DEFAULT_NOTES_DIR
    """Directory where notes are stored. Relative paths are resolved against the current working directory.

    The directory is created if it does not exist. Only ``.txt`` files directly inside it are treated as notes.
    """

    log_path: Optional[str] = None
    """If set, log messages are written to this file (rotated when it gets large).
    
    By default nothing is logged, so that log output does not get mixed into the interactive console.
    """

    log_level: str = 'INFO'
    """Name of the minimum level to log to :attr:`log_path`, e.g. ``DEBUG`` or ``WARNING``."""

    @classmethod
    def user_config_path(cls) -> str:
        return os.path.expanduser(os.path.join('~', '.txtnotes.conf.py'))

    @classmethod
    def for_user(cls) -> NotesConf:
        """Loads config from the user's ``~/.txtnotes.conf.py`` file, or returns the defaults if there isn't one.

        The file is a Python script that must assign an instance of this class to the variable ``conf``, e.g.:

        .. code-block:: python

           from txtnotes.conf import NotesConf
           conf = NotesConf(notes_dir='/Users/jacob/Documents/notes')
        """
        path = cls.user_config_path()
        if not os.path.exists(path):
            return cls()
        with open(path, 'r') as file:
            conf_script = file.read()
        context = {}
        exec(conf_script, context)
        if 'conf' not in context or not isinstance(context['conf'], cls):
            raise Exception('You need to assign an instance of NotesConf to the variable `conf` '
                            f'in your config file: {path}')
        return context['conf']

    def standardize(self) -> NotesConf:
        return replace(
            self,
            notes_dir=os.path.abspath(self.notes_dir)
        )

    def instantiate(self):
        from txtnotes.api import Notes
        return Notes(self.standardize())
