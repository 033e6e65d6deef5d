"""Entry point for ``python -m callexpr``."""

from callexpr.cli.main import cli

if __name__ == "__main__":
    cli()
