"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages,
and makes the sample domain under tests/ importable.
"""

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local modelmapper package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

_tests_dir = Path(__file__).parent
if str(_tests_dir) not in sys.path:
    sys.path.insert(1, str(_tests_dir))

# Force reimport of modelmapper modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("modelmapper"):
        del sys.modules[module_name]


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the global config at an empty temp dir and clear MODELMAPPER__ env vars."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(
        "modelmapper.config.loader.GLOBAL_CONFIG_PATH", home / ".config" / "modelmapper" / "config.yaml"
    )
    for key in list(os.environ):
        if key.startswith("MODELMAPPER__"):
            monkeypatch.delenv(key)
    yield home
