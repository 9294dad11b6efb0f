"""ModelMapper CLI - mmg command."""

import click

from modelmapper.cli.check import check_command
from modelmapper.cli.generate import generate_command
from modelmapper.cli.init import init_command
from modelmapper.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="mmg")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """ModelMapper - generate model types and mappers for your domain classes."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(init_command, name="init")
cli.add_command(generate_command, name="generate")
cli.add_command(check_command, name="check")


if __name__ == "__main__":
    cli()
