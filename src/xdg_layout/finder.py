"""Locate files across layered base directories."""

import os
import stat
from collections.abc import Iterator
from collections.abc import Sequence
from pathlib import Path

from .exceptions import LookupIOError

# Errors that mean "nothing there" rather than a real problem
_ABSENT = (FileNotFoundError, NotADirectoryError)


def _candidate_roots(home: Path | None, dirs: Sequence[Path]) -> Iterator[Path]:
    if home is not None:
        yield home
    yield from dirs


def _is_regular_file(path: Path) -> bool:
    try:
        st = os.stat(path)
    except _ABSENT:
        return False
    except OSError as e:
        raise LookupIOError(f"Failed to probe {path}: {e}", path) from e
    return stat.S_ISREG(st.st_mode) and os.access(path, os.R_OK)


def _iter_matches(suffix: str | os.PathLike[str], home: Path | None, dirs: Sequence[Path]) -> Iterator[Path]:
    if os.path.isabs(suffix):
        raise ValueError(f"Lookup suffix must be relative: {suffix}")

    for root in _candidate_roots(home, dirs):
        candidate = root / suffix
        if _is_regular_file(candidate):
            yield candidate


def find_all(suffix: str | os.PathLike[str], home: Path | None, dirs: Sequence[Path] = ()) -> list[Path]:
    """Find every existing file named suffix under the layered directories.

    Candidate roots are home (skipped when None) followed by dirs, which is
    also the order of the result (highest precedence first). Only regular
    files the process can read count as matches.

    Args:
        suffix: Relative path to look for, e.g. "myapp/settings.yaml"
        home: Scalar base directory for the file class
        dirs: Search directories for the file class (empty for cache/runtime)

    Returns:
        Matching absolute paths, possibly empty

    Raises:
        ValueError: If suffix is absolute
        LookupIOError: If probing a candidate fails for a reason other than absence
    """
    return list(_iter_matches(suffix, home, dirs))


def find_first(suffix: str | os.PathLike[str], home: Path | None, dirs: Sequence[Path] = ()) -> Path | None:
    """Find the effective file named suffix.

    Stops probing at the first hit.

    Returns:
        First match in precedence order, or None if no root has the file
    """
    return next(_iter_matches(suffix, home, dirs), None)
