# semlog/infra/storage/log_writer.py
"""
Log file writer for development sessions.

Provides:
- One pretty-printed JSON file per flushed session
- Collision-free file names (timestamp + pid + random suffix)
- Loading a log file back into a LogDocument
"""

from __future__ import annotations

import logging
import os
import tempfile
import uuid
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from semlog.core.document.entries import LogDocument
from semlog.core.errors import LogFileNotFoundError, MalformedDocumentError
from semlog.core.logger import SemanticLogger


logger = logging.getLogger(__name__)

FILE_PREFIX = "semantic-dev"


class LogFileWriter:
    """
    Writes log documents as JSON files.

    Example:
        >>> writer = LogFileWriter("/tmp/logs")
        >>> path = writer.write_session(log)   # flush + write
    """

    def __init__(self, directory: Optional[Union[str, Path]] = None):
        self.directory = Path(directory) if directory else Path(tempfile.gettempdir())

    def write(self, document: LogDocument, *, filename: Optional[str] = None) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / (filename or self._generate_filename())
        path.write_text(document.to_json(indent=2), encoding="utf-8")
        logger.debug("wrote log document %s", path)
        return path

    def write_session(self, semantic_logger: SemanticLogger, *, relations=None) -> Path:
        """
        Flush the engine and write the result.

        Engine errors (unclosed operations, empty session) propagate: a
        broken open/close pairing must surface, not vanish into a missing file.
        """
        return self.write(semantic_logger.flush(relations))

    def _generate_filename(self) -> str:
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S-%f")
        return f"{FILE_PREFIX}-{timestamp}-{os.getpid()}-{uuid.uuid4().hex[:8]}.json"


def load_document(path: Union[str, Path]) -> LogDocument:
    """
    Read a JSON log file.

    Raises:
        LogFileNotFoundError: path does not exist
        MalformedDocumentError: unreadable, invalid JSON or wrong shape
    """
    path = Path(path)
    if not path.is_file():
        raise LogFileNotFoundError(str(path))
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedDocumentError(f"Failed to read log file: {path}: {e}", cause=e) from e
    return LogDocument.from_json(text)
