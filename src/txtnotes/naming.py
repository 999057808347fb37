"""Helpers for turning note titles into file names.

Generally, you should use :meth:`txtnotes.api.Notes.create` instead of using anything in this module directly.
"""

import os.path
import string

SAFE_CHARS = frozenset(string.ascii_letters + string.digits + ' -_.')

FALLBACK_NAME = 'note'

SUFFIX = '.txt'


def sanitize(title: str) -> str:
    """Converts a user-entered title into a name that is safe to use as a filename.

    The following adjustments are made:

    * Every character other than ASCII letters, digits, space, ``-``, ``_`` and ``.`` is replaced with ``_``
      (one for one, so the length does not change)
    * Leading and trailing whitespace is removed

    If nothing is left, ``note`` is returned. For example, ``"a/b: c"`` becomes ``"a_b_ c"``.
    """
    name = ''.join(c if c in SAFE_CHARS else '_' for c in title)
    name = name.strip()
    return name or FALLBACK_NAME


def available_path(directory: str, title: str) -> str:
    """Returns a path in the directory, based on the title, at which no file currently exists.

    The first candidate is ``<sanitized title>.txt``. If that is taken, `` (1)``, `` (2)`` and so on are inserted
    before the extension until an unused name is found.

    Nothing is reserved, so a file created by someone else between this call and your write can still collide.
    """
    base = sanitize(title)
    path = os.path.join(directory, f'{base}{SUFFIX}')
    idx = 1
    while os.path.exists(path):
        path = os.path.join(directory, f'{base} ({idx}){SUFFIX}')
        idx += 1
    return path
