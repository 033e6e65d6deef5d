"""callexpr CLI entry point."""

import logging

import click


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool):
    """callexpr — evaluate call-expression programs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
from callexpr.cli.run_cmd import parse_command, run, tokens  # noqa: E402
from callexpr.cli.functions_cmd import functions  # noqa: E402

cli.add_command(run)
cli.add_command(parse_command)
cli.add_command(tokens)
cli.add_command(functions)
