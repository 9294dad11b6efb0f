"""mmg check command - validate generation targets without generating."""

import json
import sys
from pathlib import Path

import click

from modelmapper.cli.utils import (
    find_project_root,
    load_declarations,
    print_diagnostics,
    resolve_modules,
)
from modelmapper.config.loader import load_config
from modelmapper.core.errors import ModelMapperError
from modelmapper.core.progress import pluralize, status
from modelmapper.validation.analyzers import run_analyzers


@click.command()
@click.argument("modules", nargs=-1)
@click.option(
    "--project-root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Project root (default: nearest directory with .modelmapper/ or pyproject.toml)",
)
@click.option("--json", "as_json", is_flag=True, help="Output diagnostics as JSON")
def check_command(modules: tuple[str, ...], project_root: Path | None, as_json: bool) -> None:
    """Report diagnostics for the generation targets in MODULES.

    Exits with status 1 if any error is reported.
    """
    root = project_root or find_project_root()
    try:
        config = load_config(root)
    except ModelMapperError as e:
        raise click.ClickException(str(e)) from e

    declarations = load_declarations(resolve_modules(modules, config.generation.modules), root)
    diagnostics = run_analyzers(declarations)
    errors = sum(1 for d in diagnostics if d.is_error)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "targets": len(declarations),
                    "diagnostics": [d.to_dict() for d in diagnostics],
                }
            )
        )
    elif not diagnostics:
        status(f"{pluralize(len(declarations), 'target')} checked, no problems", style="success")
    else:
        warnings = len(diagnostics) - errors
        status(
            f"{pluralize(errors, 'error')}, {pluralize(warnings, 'warning')}",
            style="error" if errors else "warning",
        )
        print_diagnostics(diagnostics)

    if errors:
        sys.exit(1)
