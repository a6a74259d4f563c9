"""Per-file-class access to a resolved base-directory layout."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import IO
from typing import Any

import yaml

from .exceptions import XdgFileError
from .finder import find_all
from .finder import find_first
from .merger import merge_backward
from .merger import merge_forward
from .models import Diagnostic
from .models import Fail
from .models import FileClass
from .models import MergeCallback
from .models import ResolvedLayout
from .resolver import resolve
from .utils import YamlLayers
from .utils import deep_merge

logger = logging.getLogger(__name__)

Suffix = str | os.PathLike[str]


class BaseDirectories:
    """Find, merge and open files of each XDG file class.

    The layout is injected, so several independent layouts can coexist (one
    per test, for instance). Lookups read the layout and never change it.

    Read precedence for config and data files (highest first):
    1. The class's home directory (XDG_CONFIG_HOME / XDG_DATA_HOME)
    2. The class's search directories, in the order given

    Cache and runtime files only have their home directory.

    Args:
        layout: Resolved base directories
    """

    def __init__(self, layout: ResolvedLayout):
        self.layout = layout

    @classmethod
    def from_environment(cls, env: Mapping[str, str] | None = None) -> "BaseDirectories":
        """Resolve a fresh layout from env (default: os.environ)."""
        return cls(resolve(env))

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return self.layout.diagnostics

    def home(self, file_class: FileClass) -> Path | None:
        """Get the write location for a file class (None if unresolved)."""
        home_map = {
            FileClass.CONFIG: self.layout.config_home,
            FileClass.DATA: self.layout.data_home,
            FileClass.CACHE: self.layout.cache_home,
            FileClass.RUNTIME: self.layout.runtime_dir,
        }
        return home_map[file_class]

    def search_dirs(self, file_class: FileClass) -> tuple[Path, ...]:
        """Get the search directories for a file class (empty for cache/runtime)."""
        if file_class is FileClass.CONFIG:
            return self.layout.config_dirs
        if file_class is FileClass.DATA:
            return self.layout.data_dirs
        return ()

    # ===== Find =====

    def find_file(self, file_class: FileClass, suffix: Suffix) -> Path | None:
        """Find the effective file for suffix, or None."""
        return find_first(suffix, self.home(file_class), self.search_dirs(file_class))

    def find_files(self, file_class: FileClass, suffix: Suffix) -> list[Path]:
        """Find all files for suffix, highest precedence first."""
        return find_all(suffix, self.home(file_class), self.search_dirs(file_class))

    def find_config_file(self, suffix: Suffix) -> Path | None:
        return self.find_file(FileClass.CONFIG, suffix)

    def find_config_files(self, suffix: Suffix) -> list[Path]:
        return self.find_files(FileClass.CONFIG, suffix)

    def find_data_file(self, suffix: Suffix) -> Path | None:
        return self.find_file(FileClass.DATA, suffix)

    def find_data_files(self, suffix: Suffix) -> list[Path]:
        return self.find_files(FileClass.DATA, suffix)

    def find_cache_file(self, suffix: Suffix) -> Path | None:
        return self.find_file(FileClass.CACHE, suffix)

    def find_runtime_file(self, suffix: Suffix) -> Path | None:
        return self.find_file(FileClass.RUNTIME, suffix)

    # ===== Merge =====

    def merge_files(
        self, file_class: FileClass, suffix: Suffix, callback: MergeCallback, reverse: bool = False
    ) -> None:
        """Feed every file for suffix to callback.

        Args:
            file_class: Class of file to look up
            suffix: Relative path to look for
            callback: Called with each absolute path
            reverse: Visit lowest precedence first (home last)
        """
        merge = merge_backward if reverse else merge_forward
        merge(suffix, self.home(file_class), self.search_dirs(file_class), callback)

    def merge_config_files(self, suffix: Suffix, callback: MergeCallback) -> None:
        self.merge_files(FileClass.CONFIG, suffix, callback)

    def merge_config_files_reversed(self, suffix: Suffix, callback: MergeCallback) -> None:
        self.merge_files(FileClass.CONFIG, suffix, callback, reverse=True)

    def merge_data_files(self, suffix: Suffix, callback: MergeCallback) -> None:
        self.merge_files(FileClass.DATA, suffix, callback)

    def merge_data_files_reversed(self, suffix: Suffix, callback: MergeCallback) -> None:
        self.merge_files(FileClass.DATA, suffix, callback, reverse=True)

    # ===== Open =====

    def open_file(self, file_class: FileClass, suffix: Suffix, mode: str = "r", encoding: str | None = None) -> IO:
        """Open a file of the given class.

        Read-only modes open the effective file found by find_file. Modes that
        write ("w", "a", "x" or "+") open the file under the class's home
        directory, creating missing parent directories. The runtime directory
        itself is never created.

        Args:
            file_class: Class of file to open
            suffix: Relative path of the file
            mode: Mode passed to open()
            encoding: Encoding passed to open()

        Returns:
            Open file object

        Raises:
            FileNotFoundError: If reading and no directory has the file
            XdgFileError: If the home directory is unresolved or opening fails
        """
        if any(flag in mode for flag in "wax+"):
            path = self._write_target(file_class, suffix)
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise XdgFileError(f"Failed to create directory {path.parent}: {e}") from e
        else:
            path = self.find_file(file_class, suffix)
            if path is None:
                raise FileNotFoundError(f"No {file_class.value} file found for {suffix}")

        try:
            return open(path, mode, encoding=encoding)
        except OSError as e:
            raise XdgFileError(f"Failed to open {path}: {e}") from e

    def open_config_file(self, suffix: Suffix, mode: str = "r", encoding: str | None = None) -> IO:
        return self.open_file(FileClass.CONFIG, suffix, mode, encoding)

    def open_data_file(self, suffix: Suffix, mode: str = "r", encoding: str | None = None) -> IO:
        return self.open_file(FileClass.DATA, suffix, mode, encoding)

    def open_cache_file(self, suffix: Suffix, mode: str = "r", encoding: str | None = None) -> IO:
        return self.open_file(FileClass.CACHE, suffix, mode, encoding)

    def open_runtime_file(self, suffix: Suffix, mode: str = "r", encoding: str | None = None) -> IO:
        return self.open_file(FileClass.RUNTIME, suffix, mode, encoding)

    # ===== YAML Configuration =====

    def load_config(self, suffix: Suffix) -> dict[str, Any]:
        """Get merged YAML configuration from every config layer.

        Merge order (later overrides earlier):
        1. Search directories, last entry first
        2. Config home (highest priority)

        Returns:
            Merged settings dictionary (empty if no file exists)
        """
        layers = YamlLayers()
        self.merge_config_files_reversed(suffix, layers)
        return layers.data

    def save_config(self, suffix: Suffix, data: dict[str, Any]) -> Path:
        """Write YAML configuration to the config home.

        Returns:
            Path written

        Raises:
            XdgFileError: If the config home is unresolved or the write fails
        """
        # Serialize before opening so a bad value never truncates the existing file
        try:
            text = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
        except Exception as e:
            raise XdgFileError(f"Failed to serialize configuration for {suffix}: {e}") from e

        with self.open_config_file(suffix, "w") as f:
            f.write(text)
        path = Path(f.name)
        logger.info(f"Saved configuration to {path}")
        return path

    def update_config(self, suffix: Suffix, updates: dict[str, Any]) -> Path:
        """Deep merge updates into the config-home file only.

        Search directories are read-only and are neither read nor written.

        Returns:
            Path written
        """
        path = self._write_target(FileClass.CONFIG, suffix)
        layers = YamlLayers()
        if path.is_file():
            outcome = layers(path)
            if isinstance(outcome, Fail):
                raise outcome.error
        return self.save_config(suffix, deep_merge(layers.data, updates))

    # ===== Private Helpers =====

    def _write_target(self, file_class: FileClass, suffix: Suffix) -> Path:
        if os.path.isabs(suffix):
            raise ValueError(f"File suffix must be relative: {suffix}")

        base = self.home(file_class)
        if base is None:
            raise XdgFileError(f"No {file_class.value} base directory resolved")
        if file_class is FileClass.RUNTIME and not base.is_dir():
            raise XdgFileError(f"Runtime directory {base} does not exist")
        return base / suffix
