"""mmg init command - create the project configuration."""

from pathlib import Path

import click
import questionary

from modelmapper.config.loader import PROJECT_CONFIG_DIR
from modelmapper.config.user_config import UserConfig, write_user_config
from modelmapper.core.progress import get_console, status


def initialize_project(
    project_root: Path,
    *,
    modules: list[str] | None = None,
    force: bool = False,
    yes: bool = False,
) -> bool:
    """Write .modelmapper/config.yaml under project_root, returning True on success.

    Args:
        project_root: Directory that will hold .modelmapper/
        modules: Modules to record in the config
        force: Overwrite an existing config
        yes: Skip the overwrite confirmation
    """
    config_dir = project_root / PROJECT_CONFIG_DIR
    config_path = config_dir / "config.yaml"
    console = get_console()

    if config_path.exists():
        if not force:
            status(f"Already initialized: {config_path}", style="info")
            status("Use --force to overwrite", style="info")
            return False
        if not yes:
            answer = questionary.select(
                f"Overwrite {config_path}?",
                choices=[
                    questionary.Choice("No, keep my config", value=False),
                    questionary.Choice("Yes, overwrite it", value=True),
                ],
                style=questionary.Style(
                    [
                        ("question", "bold"),
                        ("highlighted", "fg:yellow bold"),
                        ("selected", "fg:yellow"),
                    ]
                ),
            ).ask()
            if not answer:
                console.print("[dim]Cancelled[/dim]")
                return False

    write_user_config(config_path, UserConfig(modules=modules or []))

    gitignore_path = config_dir / ".gitignore"
    if not gitignore_path.exists() or force:
        gitignore_path.write_text("# Keep only the user config\n*\n!.gitignore\n!config.yaml\n")

    status(f"Wrote {config_path}", style="success")
    return True


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("-m", "--module", "modules", multiple=True, help="Module holding targets (repeatable)")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing config")
@click.option("--yes", "-y", is_flag=True, help="Do not ask before overwriting")
def init_command(path: Path, modules: tuple[str, ...], force: bool, yes: bool) -> None:
    """Initialize ModelMapper configuration in PATH (default: current directory)."""
    if not initialize_project(path.resolve(), modules=list(modules), force=force, yes=yes):
        if force:
            raise SystemExit(1)
        return

    status("Next: run 'mmg generate' to generate models and mappers", style="info")
