"""xdg-layout: XDG base directories with layered lookup and merging.

This library resolves the XDG Base Directory layout from the environment:
- XDG_CONFIG_HOME / XDG_CONFIG_DIRS (typically ~/.config, /etc/xdg)
- XDG_DATA_HOME / XDG_DATA_DIRS (typically ~/.local/share, /usr/local/share:/usr/share)
- XDG_CACHE_HOME (typically ~/.cache)
- XDG_RUNTIME_DIR (no default)

On top of that layout it finds the effective file for a relative name, lists
every match across the layered directories, and merges the matches in either
precedence order through a caller-supplied callback.

Bad environment values never raise. They are left empty and recorded as
diagnostics on the resolved layout for the application to act on.

Public API:
    resolve, get_layout: Build the layout from an environment snapshot
    ResolvedLayout, Diagnostic, FileClass: Data model
    BaseDirectories: Per-file-class find/merge/open on a layout
    find_all, find_first: Layered lookup
    merge_forward, merge_backward: Layered merge driving a callback
    MergeAction, Fail: Outcomes a merge callback can return
    YamlLayers, deep_merge: YAML merge callback and its merge rule
    is_absolute: Absolute-path predicate
    XdgError, LookupIOError, XdgFileError: Exception types

Example:
    ```python
    from xdg_layout import BaseDirectories, MergeAction

    dirs = BaseDirectories.from_environment()
    for diagnostic in dirs.diagnostics:
        print(f"warning: {diagnostic}")

    # Effective file only
    path = dirs.find_config_file("myapp/settings.yaml")

    # Layered YAML settings, config home wins
    settings = dirs.load_config("myapp/settings.yaml")

    # Custom traversal, most specific first
    def first_readable(path):
        if path.stat().st_size:
            print(path)
            return MergeAction.STOP

    dirs.merge_config_files("myapp/plugins.conf", first_readable)
    ```
"""

from .basedirs import BaseDirectories
from .exceptions import LookupIOError
from .exceptions import XdgError
from .exceptions import XdgFileError
from .finder import find_all
from .finder import find_first
from .merger import merge_backward
from .merger import merge_forward
from .models import Diagnostic
from .models import Fail
from .models import FileClass
from .models import MergeAction
from .models import ResolvedLayout
from .paths import is_absolute
from .resolver import get_layout
from .resolver import resolve
from .utils import YamlLayers
from .utils import deep_merge

__version__ = "0.1.0"

__all__ = [
    "BaseDirectories",
    "Diagnostic",
    "Fail",
    "FileClass",
    "MergeAction",
    "ResolvedLayout",
    "YamlLayers",
    "deep_merge",
    "find_all",
    "find_first",
    "get_layout",
    "is_absolute",
    "merge_backward",
    "merge_forward",
    "resolve",
    "XdgError",
    "LookupIOError",
    "XdgFileError",
]
