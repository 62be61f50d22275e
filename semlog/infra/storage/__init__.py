# semlog/infra/storage/__init__.py
from .log_writer import LogFileWriter, load_document

__all__ = [
    "LogFileWriter",
    "load_document",
]
