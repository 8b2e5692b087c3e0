"""
Command-line interface for elasticdist.

This module provides the main entry point for the elasticdist CLI.
"""

import click
import importlib
import logging
import pkgutil
from pathlib import Path


# Create the main Click group
@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="elasticdist")
@click.option("-v", "--verbose", count=True, help="Log progress (-vv for debug)")
@click.pass_context
def cli(ctx: click.Context, verbose: int) -> None:
    """Elastic distances between time series."""
    ctx.ensure_object(dict)
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG if verbose > 1 else logging.INFO,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )


# Dynamically load all command modules
def register_commands() -> None:
    """Dynamically discover and register all command modules."""
    commands_pkg = Path(__file__).parent / "commands"

    for _, module_name, _ in pkgutil.iter_modules([str(commands_pkg)]):
        module = importlib.import_module(f"elasticdist.cli.commands.{module_name}")

        # Look for register_*_commands functions and call them
        for name, func in module.__dict__.items():
            if name.startswith("register_") and name.endswith("_commands"):
                func(cli)


register_commands()


def main() -> None:
    """Main entry point for the CLI."""
    cli(obj={})
