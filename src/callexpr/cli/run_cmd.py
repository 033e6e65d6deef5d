"""Program CLI commands — run, parse and tokens."""

import json
from pathlib import Path
from typing import Any, NoReturn

import click
import yaml

from callexpr.codec import encode
from callexpr.config import InterpreterConfig
from callexpr.errors import CallExprError
from callexpr.interpreter import Interpreter
from callexpr.lexer import tokenize
from callexpr.parser import ASTNode, FunctionCall, Literal


def _read_source(source: str) -> str:
    """Return program text; ``-`` reads from stdin."""
    if source == "-":
        return click.get_text_stream("stdin").read()
    return source


def _parse_arg(raw: str) -> Any:
    """Parse one --arg value as JSON, falling back to the raw string."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _load_args_file(path: Path) -> list[Any]:
    """Load host arguments from a YAML (or JSON) list."""
    with open(path) as f:
        data = yaml.safe_load(f)
    if data is None:
        return []
    if not isinstance(data, list):
        raise click.BadParameter(
            f"expected a list of arguments, got {type(data).__name__}",
            param_hint="--args-file",
        )
    return data


def _resolve_config(max_depth: int | None) -> InterpreterConfig:
    try:
        if max_depth is not None:
            return InterpreterConfig(max_depth=max_depth)
        return InterpreterConfig.from_env()
    except ValueError as e:
        raise click.UsageError(str(e))


def _ast_to_dict(node: ASTNode) -> dict[str, Any]:
    if isinstance(node, FunctionCall):
        return {
            "call": node.name,
            "args": [_ast_to_dict(arg) for arg in node.arguments],
        }
    if isinstance(node, Literal):
        return {"literal": node.value}
    raise TypeError(f"Unknown node type: {type(node).__name__}")


def _fail(error: Exception) -> NoReturn:
    click.echo(click.style(f"Error: {error}", fg="red"), err=True)
    raise SystemExit(1)


max_depth_option = click.option(
    "--max-depth",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum call nesting depth (default: $CALLEXPR_MAX_DEPTH or 256).",
)


@click.command()
@click.argument("source")
@click.option(
    "--arg",
    "arg_values",
    multiple=True,
    help="Host argument for getArg, parsed as JSON when possible. Repeatable.",
)
@click.option(
    "--args-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML or JSON file holding a list of host arguments.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the result as JSON.",
)
@max_depth_option
def run(
    source: str,
    arg_values: tuple[str, ...],
    args_file: Path | None,
    as_json: bool,
    max_depth: int | None,
):
    """Evaluate a program. Pass - as SOURCE to read from stdin."""
    interp = Interpreter(_resolve_config(max_depth))

    host_args: list[Any] = []
    if args_file is not None:
        host_args.extend(_load_args_file(args_file))
    host_args.extend(_parse_arg(raw) for raw in arg_values)
    interp.set_args(host_args)

    try:
        result = interp.run(_read_source(source))
        if isinstance(result, str) and not as_json:
            output = result
        else:
            output = encode(result)
    except CallExprError as e:
        _fail(e)

    click.echo(output)


@click.command("parse")
@click.argument("source")
@max_depth_option
def parse_command(source: str, max_depth: int | None):
    """Print the AST of a program as JSON."""
    interp = Interpreter(_resolve_config(max_depth))
    try:
        ast = interp.parse(_read_source(source))
    except CallExprError as e:
        _fail(e)

    click.echo(json.dumps(_ast_to_dict(ast), indent=2, ensure_ascii=False))


@click.command()
@click.argument("source")
def tokens(source: str):
    """Print the tokens of a program, one per line."""
    try:
        token_list = tokenize(_read_source(source))
    except CallExprError as e:
        _fail(e)

    for token in token_list:
        click.echo(f"{token.position:>4}  {token.type.name:<7} {token.value!r}")
