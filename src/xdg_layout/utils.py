"""Utility functions for xdg-layout."""

import logging
from pathlib import Path
from typing import Any

import yaml

from .exceptions import XdgFileError
from .models import Fail
from .models import MergeAction
from .models import MergeOutcome

logger = logging.getLogger(__name__)


def deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries with overlay precedence.

    Nested dictionaries merge recursively; any other overlay value replaces
    the base value outright.

    Args:
        base: Base dictionary
        overlay: Overlay dictionary (takes precedence)

    Returns:
        New merged dictionary (base and overlay are not modified)

    Examples:
        >>> deep_merge({"ui": {"theme": "dark", "font": 10}}, {"ui": {"font": 12}})
        {'ui': {'theme': 'dark', 'font': 12}}

        >>> deep_merge({"plugins": ["a"]}, {"plugins": ["b"]})
        {'plugins': ['b']}
    """
    result = base.copy()

    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


class YamlLayers:
    """Merge callback that folds YAML documents into one dictionary.

    Each visited file is parsed with yaml.safe_load and deep-merged over what
    was collected so far, so later files win. Pair it with merge_backward to
    let the most specific layer override, or with first_only=True and
    merge_forward to take just the effective file.

    Example:
        ```python
        layers = YamlLayers()
        merge_backward("myapp/settings.yaml", layout.config_home, layout.config_dirs, layers)
        settings = layers.data
        ```

    Attributes:
        data: Merged result so far
        sources: Files that contributed, in visit order
    """

    def __init__(self, first_only: bool = False):
        self.first_only = first_only
        self.data: dict[str, Any] = {}
        self.sources: list[Path] = []

    def __call__(self, path: Path) -> MergeOutcome:
        try:
            with open(path) as f:
                document = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            error = XdgFileError(f"Failed to read configuration from {path}: {e}")
            error.__cause__ = e
            return Fail(error)

        if document is None:
            logger.debug(f"Skipping empty configuration file {path}")
            return MergeAction.CONTINUE

        if not isinstance(document, dict):
            return Fail(XdgFileError(f"Configuration in {path} is not a mapping"))

        self.data = deep_merge(self.data, document)
        self.sources.append(path)

        if self.first_only:
            return MergeAction.STOP
        return MergeAction.CONTINUE
