"""Drive merge callbacks over layered files."""

import logging
import os
from collections.abc import Iterable
from collections.abc import Sequence
from pathlib import Path

from .finder import find_all
from .models import Fail
from .models import MergeAction
from .models import MergeCallback

logger = logging.getLogger(__name__)


def _drive(paths: Iterable[Path], callback: MergeCallback) -> None:
    for path in paths:
        outcome = callback(path)

        if outcome is None or outcome is MergeAction.CONTINUE:
            continue
        if outcome is MergeAction.STOP:
            logger.debug(f"Merge stopped by callback at {path}")
            return
        if isinstance(outcome, Fail):
            raise outcome.error
        raise TypeError(f"Merge callback returned unsupported outcome {outcome!r} for {path}")


def merge_forward(
    suffix: str | os.PathLike[str], home: Path | None, dirs: Sequence[Path], callback: MergeCallback
) -> None:
    """Feed matching files to callback, highest precedence first.

    Visit order is home, then dirs as given. Suited to "take the effective
    file and stop": the callback returns MergeAction.STOP once it found a
    usable file.

    Args:
        suffix: Relative path to look for
        home: Scalar base directory for the file class
        dirs: Search directories for the file class
        callback: Called with each absolute path

    Raises:
        LookupIOError: If probing a candidate fails
        Exception: Whatever error the callback raised or returned via Fail
    """
    _drive(find_all(suffix, home, dirs), callback)


def merge_backward(
    suffix: str | os.PathLike[str], home: Path | None, dirs: Sequence[Path], callback: MergeCallback
) -> None:
    """Feed matching files to callback, lowest precedence first.

    Visit order is dirs reversed, then home last. Suited to layered merging
    where more specific files override fields set by general ones.

    See merge_forward for arguments and errors.
    """
    _drive(reversed(find_all(suffix, home, dirs)), callback)
