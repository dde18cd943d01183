"""Scoped access to the inventory data file.

Every call opens the file, reads or writes it completely and closes it
again.  Writes overwrite the file in place; there is no temporary file and
no rename, so a crash in the middle of a write can leave a truncated
document behind.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pyvms._constants import EMPTY_DOCUMENT, FILE_ENCODING
from pyvms.exceptions import VmsStorageError

_logger = logging.getLogger(__name__)


class DataFile:
    """A UTF-8 text file holding one inventory document."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"DataFile({str(self.path)!r})"

    def ensure_exists(self) -> bool:
        """Create the file (and parent directories) with ``[]`` if missing.

        An existing empty file is initialised with ``[]`` as well.
        Returns ``True`` when the file had to be written.
        """
        try:
            if self.path.exists() and self.path.stat().st_size > 0:
                return False
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as err:
            raise VmsStorageError(f"cannot prepare {self.path}: {err}", path=self.path) from err
        self.write_text(EMPTY_DOCUMENT)
        _logger.info("Initialised data file %s", self.path)
        return True

    def read_text(self) -> str:
        try:
            with self.path.open("r", encoding=FILE_ENCODING) as handle:
                return handle.read()
        except (OSError, UnicodeError) as err:
            raise VmsStorageError(f"cannot read {self.path}: {err}", path=self.path) from err

    def write_text(self, text: str) -> None:
        try:
            with self.path.open("w", encoding=FILE_ENCODING) as handle:
                handle.write(text)
        except (OSError, UnicodeError) as err:
            raise VmsStorageError(f"cannot write {self.path}: {err}", path=self.path) from err
