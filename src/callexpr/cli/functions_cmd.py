"""Function listing CLI command."""

import json

import click

from callexpr.builtins import default_registry
from callexpr.functions import FunctionDefinition


def _signature(func_def: FunctionDefinition) -> str:
    params = []
    for p in func_def.parameters or ():
        params.append(f"{p.name}..." if p.variadic else p.name)
    return f"({', '.join([func_def.name, *params])})"


@click.command()
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the full documentation export as JSON.",
)
def functions(as_json: bool):
    """List the built-in functions."""
    registry = default_registry()

    if as_json:
        click.echo(json.dumps(registry.export_documentation(), indent=2))
        return

    for func_def in registry.list_all():
        click.echo(
            f"{_signature(func_def):<24} "
            f"{click.style(f'{func_def.category.value:<14}', fg='cyan')}"
            f"{func_def.description}"
        )
        for example in func_def.examples:
            click.echo(f"    e.g. {example}")
