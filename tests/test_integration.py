"""Integration tests for realistic layouts."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest
from xdg_layout import BaseDirectories
from xdg_layout import MergeAction


class TestXdgIntegration:
    """Integration tests for realistic lookup scenarios."""

    @pytest.fixture
    def root(self):
        """Create a temporary filesystem root."""
        with TemporaryDirectory() as tmpdir:
            yield Path(tmpdir)

    @pytest.fixture
    def dirs(self, root):
        """Desktop-like layout with a vendor config dir ahead of /etc/xdg."""
        env = {
            "HOME": str(root / "home" / "u"),
            "XDG_CONFIG_DIRS": f"{root / 'etc' / 'xdg' / 'vendor'}:{root / 'etc' / 'xdg'}",
            "XDG_DATA_DIRS": f"{root / 'usr' / 'local' / 'share'}:{root / 'usr' / 'share'}",
            "XDG_RUNTIME_DIR": str(root / "run" / "user" / "1000"),
        }
        return BaseDirectories.from_environment(env)

    def test_realistic_layered_settings(self, dirs, root, write_file):
        """Test distribution defaults, vendor overrides and user overrides."""
        # 1. Distribution ships defaults
        write_file(
            root / "etc" / "xdg" / "editor" / "settings.yaml",
            "theme: light\nfont:\n  family: mono\n  size: 10\nplugins: [spell]\n",
        )
        assert dirs.load_config("editor/settings.yaml")["theme"] == "light"

        # 2. Vendor image overrides the theme
        write_file(root / "etc" / "xdg" / "vendor" / "editor" / "settings.yaml", "theme: corporate\n")
        assert dirs.load_config("editor/settings.yaml")["theme"] == "corporate"

        # 3. User bumps the font size
        dirs.update_config("editor/settings.yaml", {"font": {"size": 14}})

        settings = dirs.load_config("editor/settings.yaml")
        assert settings == {
            "theme": "corporate",  # Vendor
            "font": {"family": "mono", "size": 14},  # Distribution + user
            "plugins": ["spell"],  # Distribution
        }

    def test_realistic_data_override(self, dirs, root, write_file):
        """Test a user-installed data file shadows system copies."""
        write_file(root / "usr" / "share" / "editor" / "syntax" / "py.lang", "system")
        write_file(root / "usr" / "local" / "share" / "editor" / "syntax" / "py.lang", "local")

        with dirs.open_data_file("editor/syntax/py.lang") as f:
            assert f.read() == "local"

        with dirs.open_data_file("editor/syntax/py.lang", "w") as f:
            f.write("user")

        with dirs.open_data_file("editor/syntax/py.lang") as f:
            assert f.read() == "user"
        assert len(dirs.find_data_files("editor/syntax/py.lang")) == 3

    def test_first_usable_file(self, dirs, root, write_file):
        """Test forward merge picking the first non-empty file."""
        write_file(root / "home" / "u" / ".config" / "editor" / "keys", "")
        write_file(root / "etc" / "xdg" / "editor" / "keys", "ctrl-s save")
        picked = []

        def first_non_empty(path):
            if path.read_text():
                picked.append(path)
                return MergeAction.STOP

        dirs.merge_config_files("editor/keys", first_non_empty)
        assert picked == [root / "etc" / "xdg" / "editor" / "keys"]

    def test_cache_and_runtime_roundtrip(self, dirs, root):
        """Test cache writes create directories and runtime writes need the dir."""
        with dirs.open_cache_file("editor/index", "w") as f:
            f.write("cached")
        assert dirs.find_cache_file("editor/index") == root / "home" / "u" / ".cache" / "editor" / "index"

        (root / "run" / "user" / "1000").mkdir(parents=True)
        with dirs.open_runtime_file("editor.pid", "w") as f:
            f.write("4242")
        assert dirs.find_runtime_file("editor.pid") is not None

    def test_degraded_environment(self, root, write_file):
        """Test a broken environment still allows system lookups."""
        write_file(root / "etc" / "editor.yaml", "theme: dark\n")
        dirs = BaseDirectories.from_environment(
            {"HOME": "home/u", "XDG_CONFIG_DIRS": f"relative:{root / 'etc'}"}
        )

        messages = [str(d) for d in dirs.diagnostics]
        assert messages[0] == "home invalid or unset"
        assert "ignoring XDG_CONFIG_DIRS path element: relative" in messages

        assert dirs.load_config("editor.yaml") == {"theme": "dark"}
