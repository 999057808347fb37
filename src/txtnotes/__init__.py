"""Manages plain-text notes stored as ``.txt`` files in a single directory.

If you installed via ``pip``, run ``txtnotes`` to start the interactive menu.
Or, run ``python3 -m txtnotes``.

To use the Python API, look at :class:`txtnotes.api.Notes`
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
