"""Tests for CLI utilities.

Covers:
- find_project_root() function
- resolve_modules() function
- load_declarations() function
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
import pytest

from modelmapper.cli.utils import find_project_root, load_declarations, resolve_modules


class TestFindProjectRoot:
    """Tests for find_project_root function."""

    def test_finds_root_by_pyproject(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("")
        nested = tmp_path / "src" / "app"
        nested.mkdir(parents=True)

        assert find_project_root(nested) == tmp_path

    def test_finds_root_by_config_dir(self, tmp_path: Path) -> None:
        """The nearest marker wins."""
        (tmp_path / "pyproject.toml").write_text("")
        inner = tmp_path / "inner"
        (inner / ".modelmapper").mkdir(parents=True)
        deep = inner / "a" / "b"
        deep.mkdir(parents=True)

        assert find_project_root(deep) == inner

    def test_falls_back_to_start(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        start = tmp_path / "loose"
        start.mkdir()
        monkeypatch.setattr("modelmapper.cli.utils._PROJECT_MARKERS", (".no-such-marker",))

        assert find_project_root(start) == start.resolve()


class TestResolveModules:
    def test_arguments_win(self) -> None:
        assert resolve_modules(["a.b"], ["c.d"]) == ["a.b"]

    def test_configured_used_when_no_arguments(self) -> None:
        assert resolve_modules([], ["c.d"]) == ["c.d"]

    def test_neither_is_usage_error(self) -> None:
        with pytest.raises(click.UsageError, match="No modules given"):
            resolve_modules([], [])


class TestLoadDeclarations:
    def test_discovers_targets(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "path", list(sys.path))

        declarations = load_declarations(["sample_domain.contracts"], tmp_path)

        assert [d.name for d in declarations] == ["Contracts"]
        assert sys.path[0] == str(tmp_path)

    def test_project_root_modules_importable(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        # Given
        monkeypatch.setattr(sys, "path", list(sys.path))
        (tmp_path / "mm_local_targets.py").write_text(
            "from modelmapper import model_generation_target\n"
            "\n"
            "class Thing:\n"
            "    name: str\n"
            "\n"
            "@model_generation_target(Thing)\n"
            "class Targets:\n"
            "    pass\n"
        )
        monkeypatch.delitem(sys.modules, "mm_local_targets", raising=False)

        # When
        declarations = load_declarations(["mm_local_targets"], tmp_path)

        # Then
        assert [d.namespace for d in declarations] == ["mm_local_targets"]

    def test_import_failure_is_click_exception(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(sys, "path", list(sys.path))

        with pytest.raises(click.ClickException, match="Could not import"):
            load_declarations(["sample_domain.absent"], tmp_path)
