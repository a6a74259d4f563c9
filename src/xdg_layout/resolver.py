"""Resolve XDG base directories from the environment."""

import logging
import os
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path

from .models import Diagnostic
from .models import ResolvedLayout
from .paths import is_absolute

logger = logging.getLogger(__name__)

HOME_PLACEHOLDER = "$HOME"

# (variable, default) in resolution order
SCALAR_DEFAULTS = (
    ("XDG_CONFIG_HOME", "$HOME/.config"),
    ("XDG_DATA_HOME", "$HOME/.local/share"),
    ("XDG_CACHE_HOME", "$HOME/.cache"),
    ("XDG_RUNTIME_DIR", ""),
)

LIST_DEFAULTS = (
    ("XDG_CONFIG_DIRS", "/etc/xdg"),
    ("XDG_DATA_DIRS", "/usr/local/share:/usr/share"),
)


class _Resolution:
    """Single pass over one environment snapshot, collecting diagnostics."""

    def __init__(self, env: Mapping[str, str]):
        self.env = env
        self.diagnostics: list[Diagnostic] = []
        self.home = self._resolve_home()

    def _warn(self, variable: str, message: str, value: str | None = None) -> None:
        self.diagnostics.append(Diagnostic(variable=variable, message=message, value=value))
        logger.debug(f"{message} (value: {value!r})")

    def _resolve_home(self) -> str | None:
        home = self.env.get("HOME", "")
        if not is_absolute(home):
            self._warn("HOME", "home invalid or unset", home or None)
            return None
        return home

    def scalar(self, variable: str, default: str) -> Path | None:
        """Resolve a single base directory.

        Args:
            variable: Environment variable to read
            default: Fallback template, may contain $HOME

        Returns:
            Absolute path, or None if no valid value could be resolved
        """
        value = self.env.get(variable, "")

        if not value:
            if HOME_PLACEHOLDER in default:
                # No partial paths when HOME is missing
                value = default.replace(HOME_PLACEHOLDER, self.home) if self.home else ""
            else:
                value = default

        if is_absolute(value):
            return Path(value)

        self._warn(variable, f"no value set for {variable}", value or None)
        return None

    def search_list(self, variable: str, default: str) -> tuple[Path, ...]:
        """Resolve a colon-separated list of search directories.

        Relative and empty elements are dropped one by one; the rest keep
        their order.
        """
        value = self.env.get(variable, "") or default

        dirs = []
        for segment in value.split(":"):
            if is_absolute(segment):
                dirs.append(Path(segment))
            else:
                self._warn(variable, f"ignoring {variable} path element: {segment}", segment)
        return tuple(dirs)


def resolve(env: Mapping[str, str] | None = None) -> ResolvedLayout:
    """Resolve the base-directory layout from an environment snapshot.

    Never raises for bad environment values. Anything that cannot be used is
    left empty (None for scalars, dropped for list elements) and recorded in
    ResolvedLayout.diagnostics.

    Args:
        env: Environment mapping (default: os.environ)

    Returns:
        Immutable resolved layout with its diagnostics
    """
    snapshot = dict(os.environ if env is None else env)
    resolution = _Resolution(snapshot)

    config_home, data_home, cache_home, runtime_dir = (
        resolution.scalar(variable, default) for variable, default in SCALAR_DEFAULTS
    )
    config_dirs, data_dirs = (resolution.search_list(variable, default) for variable, default in LIST_DEFAULTS)

    layout = ResolvedLayout(
        home=Path(resolution.home) if resolution.home else None,
        config_home=config_home,
        data_home=data_home,
        cache_home=cache_home,
        runtime_dir=runtime_dir,
        config_dirs=config_dirs,
        data_dirs=data_dirs,
        diagnostics=tuple(resolution.diagnostics),
    )
    logger.debug(f"Resolved base directories with {len(layout.diagnostics)} diagnostic(s)")
    return layout


@lru_cache(maxsize=1)
def get_layout() -> ResolvedLayout:
    """Return the process-wide layout, resolved from os.environ on first use.

    Call get_layout.cache_clear() to force re-resolution after the
    environment changed.
    """
    return resolve()
