"""File sink for finished material exports."""

import logging
import os

from .errors import SinkError

logger = logging.getLogger(__name__)


class FileSink:
    """Writes a complete, already-serialized export to a file.

    The text is written in one call inside a ``with`` block so the file is
    closed on every exit path.
    """

    def __init__(self, file_path: str, encoding: str = 'utf-8'):
        self.file_path = file_path
        self.encoding = encoding

    def write(self, text: str) -> None:
        """Persist the export text.

        Args:
            text: Serialized JSON document

        Raises:
            SinkError: If the directory cannot be created or the file written
        """
        directory = os.path.dirname(self.file_path)
        if directory:
            try:
                os.makedirs(directory, exist_ok=True)
            except OSError as e:
                raise SinkError(directory, str(e)) from e

        try:
            with open(self.file_path, 'w', encoding=self.encoding) as f:
                f.write(text)
        except PermissionError as e:
            raise SinkError(self.file_path, 'Permission denied') from e
        except OSError as e:
            raise SinkError(self.file_path, str(e)) from e

        logger.info(f"File successfully saved to: {self.file_path}")
