"""Data models for xdg-layout."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class FileClass(Enum):
    """Class of file being looked up.

    Determines which base directory (and search list) a lookup uses.
    """

    CONFIG = "config"
    DATA = "data"
    CACHE = "cache"
    RUNTIME = "runtime"


@dataclass(frozen=True)
class Diagnostic:
    """Non-fatal warning recorded while resolving the layout.

    Attributes:
        variable: Environment variable the warning is about
        message: Human-readable description
        value: Offending value, when there was one
    """

    variable: str
    message: str
    value: str | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ResolvedLayout:
    """Base directories resolved from a single environment snapshot.

    Immutable once built. Unresolvable scalars are None; search lists keep
    the order given in the environment (first entry searched first).

    Attributes:
        home: User home directory, used only to fill in defaults
        config_home: Write location and first read location for config files
        data_home: Write location and first read location for data files
        cache_home: Location for non-essential cached data
        runtime_dir: Location for runtime files (sockets, pipes, ...)
        config_dirs: Preference-ordered config search directories
        data_dirs: Preference-ordered data search directories
        diagnostics: Warnings in the order resolution was attempted
    """

    home: Path | None = None
    config_home: Path | None = None
    data_home: Path | None = None
    cache_home: Path | None = None
    runtime_dir: Path | None = None
    config_dirs: tuple[Path, ...] = ()
    data_dirs: tuple[Path, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()


class MergeAction(Enum):
    """Outcome a merge callback returns to steer the traversal."""

    CONTINUE = "continue"
    STOP = "stop"


@dataclass(frozen=True)
class Fail:
    """Outcome a merge callback returns to abort the traversal with an error."""

    error: BaseException


MergeOutcome = MergeAction | Fail | None
MergeCallback = Callable[[Path], MergeOutcome]
