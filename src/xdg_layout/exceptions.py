"""Exceptions for xdg-layout."""

from pathlib import Path


class XdgError(Exception):
    """Base exception for base-directory errors."""

    pass


class LookupIOError(XdgError):
    """Filesystem error while probing a candidate file.

    Raised for anything other than plain absence (permission denied, I/O
    faults), so a real problem is never mistaken for "not found".
    """

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class XdgFileError(XdgError):
    """Error reading, writing or opening a concrete file."""

    pass
