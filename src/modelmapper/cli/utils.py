"""CLI utilities."""

import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

import click

from modelmapper.config.loader import PROJECT_CONFIG_DIR
from modelmapper.core.errors import ModelMapperError
from modelmapper.core.progress import get_console
from modelmapper.frontend.runtime import discover_declarations, import_modules
from modelmapper.symbols import TargetDeclaration
from modelmapper.validation.rules import Diagnostic, Severity

_PROJECT_MARKERS = (PROJECT_CONFIG_DIR, "pyproject.toml")


def find_project_root(start_path: Path | None = None) -> Path:
    """Find the project root from the given path.

    Walks up the directory tree looking for a .modelmapper directory or a
    pyproject.toml. Falls back to the starting directory when neither is
    found.
    """
    if start_path is None:
        start_path = Path.cwd()

    start = start_path.resolve()
    current = start
    while True:
        if any((current / marker).exists() for marker in _PROJECT_MARKERS):
            return current
        if current == current.parent:
            return start
        current = current.parent


def resolve_modules(modules: Sequence[str], configured: Sequence[str]) -> list[str]:
    """Modules named on the command line, else the configured ones."""
    names = list(modules) or list(configured)
    if not names:
        raise click.UsageError(
            "No modules given. Pass MODULE arguments or set 'modules' in "
            f"{PROJECT_CONFIG_DIR}/config.yaml."
        )
    return names


def load_declarations(modules: Iterable[str], project_root: Path) -> list[TargetDeclaration]:
    """Import modules (project root first on sys.path) and discover their targets.

    Raises:
        click.ClickException: If a module fails to import or holds an invalid target.
    """
    root = str(project_root)
    if root not in sys.path:
        sys.path.insert(0, root)
    try:
        return discover_declarations(import_modules(modules))
    except ModelMapperError as e:
        raise click.ClickException(str(e)) from e


def print_diagnostics(diagnostics: Sequence[Diagnostic]) -> None:
    console = get_console()
    for diagnostic in diagnostics:
        color = "red" if diagnostic.severity is Severity.ERROR else "yellow"
        console.print(
            f"  [{color}]{diagnostic.id}[/{color}] {diagnostic.location}: {diagnostic.message}",
            highlight=False,
        )
