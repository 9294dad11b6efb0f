"""mmg generate command - synthesize models and mappers."""

import sys
from pathlib import Path

import click

from modelmapper.cli.utils import (
    find_project_root,
    load_declarations,
    print_diagnostics,
    resolve_modules,
)
from modelmapper.config.loader import load_config, resolve_output_dir
from modelmapper.core.errors import ModelMapperError
from modelmapper.core.logging import clear_run_id, configure_logging, get_logger, set_run_id
from modelmapper.core.progress import get_console, pluralize, spinner, status
from modelmapper.emit import write_artifacts
from modelmapper.orchestrator import generate

log = get_logger(__name__)


@click.command()
@click.argument("modules", nargs=-1)
@click.option(
    "-o",
    "--output",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Output directory (default: output.directory from config)",
)
@click.option(
    "--layout",
    type=click.Choice(["files", "bundle"]),
    help="One file per artifact, or one module per target",
)
@click.option("--workers", type=int, help="Targets generated in parallel")
@click.option("--dry-run", is_flag=True, help="Show what would be written without writing")
@click.option(
    "--project-root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Project root (default: nearest directory with .modelmapper/ or pyproject.toml)",
)
@click.pass_context
def generate_command(
    ctx: click.Context,
    modules: tuple[str, ...],
    output_dir: Path | None,
    layout: str | None,
    workers: int | None,
    dry_run: bool,
    project_root: Path | None,
) -> None:
    """Generate models and mappers for the targets declared in MODULES.

    MODULES are dotted module names importable from the project root. When
    none are given, the modules listed in .modelmapper/config.yaml are used.
    """
    root = project_root or find_project_root()

    overrides: dict[str, dict[str, object]] = {}
    if layout is not None:
        overrides.setdefault("output", {})["layout"] = layout
    if workers is not None:
        overrides.setdefault("generation", {})["max_workers"] = workers
    try:
        config = load_config(root, **overrides)
    except ModelMapperError as e:
        raise click.ClickException(str(e)) from e

    if not (ctx.obj or {}).get("verbose"):
        configure_logging(config=config.logging)

    run_id = set_run_id()
    try:
        names = resolve_modules(modules, config.generation.modules)
        declarations = load_declarations(names, root)
        if not declarations:
            status(f"No generation targets found in {', '.join(names)}", style="warning")
            return

        with spinner(f"Generating {pluralize(len(declarations), 'target')}"):
            result = generate(
                declarations,
                max_workers=config.generation.max_workers,
                file_extension=config.generation.file_extension,
            )

        if result.diagnostics:
            print_diagnostics(result.diagnostics)
        if result.aborted:
            status("Destination modules collide; nothing was generated", style="error")
            sys.exit(1)

        destination = output_dir or resolve_output_dir(root, config)
        written = write_artifacts(
            result.sources,
            destination,
            layout=config.output.layout,
            header=config.generation.header,
            dry_run=dry_run,
        )
    finally:
        clear_run_id()

    console = get_console()
    changed = [w for w in written if w.action != "unchanged"]
    verb = "Would write" if dry_run else "Wrote"
    for artifact in changed:
        console.print(f"  [dim]{artifact.action}[/dim] {artifact.path}", highlight=False)
    status(
        f"{verb} {pluralize(len(changed), 'file')} to {destination} "
        f"({len(written) - len(changed)} unchanged)",
        style="success",
    )
    log.debug("generate_finished", run_id=run_id, files=len(written))

    if result.has_errors:
        sys.exit(1)
