"""Path validation shared by the resolver and the finder."""

import os


def is_absolute(candidate: str | None) -> bool:
    """Return True if candidate is a non-empty absolute path.

    Purely syntactic: no existence check and no filesystem access.

    Examples:
        >>> is_absolute("/etc/xdg")
        True
        >>> is_absolute("relative/path")
        False
        >>> is_absolute("")
        False
    """
    return bool(candidate) and os.path.isabs(candidate)
