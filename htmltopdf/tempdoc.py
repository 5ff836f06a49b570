# Purpose: Scoped temporary HTML file owned by exactly one conversion.


from __future__ import annotations

import logging
import tempfile
import uuid
from pathlib import Path
from types import TracebackType
from typing import Optional, Type

from .errors import CleanupError, WriteError
from .messages import CLEANUP_FAILED, TEMP_WRITE_FAILED

log = logging.getLogger("htmltopdf.tempdoc")


def unique_temp_path(suffix: str = ".html", directory: Optional[Path] = None) -> Path:
    base = Path(directory) if directory is not None else Path(tempfile.gettempdir())
    return base / f"{uuid.uuid4().hex}{suffix}"


class TemporaryDocument:
    """Writes HTML to a uniquely named file on enter and deletes it on exit.

    A failed delete raises CleanupError only when the block itself succeeded;
    otherwise it is logged and the block's exception keeps propagating.
    """

    def __init__(self, html: str, directory: Optional[Path] = None) -> None:
        self.html = html
        self.path = unique_temp_path(".html", directory)

    def __enter__(self) -> Path:
        try:
            self.path.write_text(self.html, encoding="utf-8")
        except OSError as e:
            self._discard_quietly()
            raise WriteError(TEMP_WRITE_FAILED, f"{self.path}: {e.strerror or e}") from e
        return self.path

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> bool:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            if exc is None:
                raise CleanupError(CLEANUP_FAILED, f"{self.path}: {e.strerror or e}") from e
            log.warning("Could not remove %s after failed conversion: %s", self.path, e)
        return False

    def _discard_quietly(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            log.warning("Could not remove partial temp file %s: %s", self.path, e)


__all__ = ["TemporaryDocument", "unique_temp_path"]
