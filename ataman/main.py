#!/usr/bin/env python3
"""
Main CLI entry point for ataman
"""

import typer

from ataman import __version__
from ataman.commands import config as config_commands

app = typer.Typer(
    help="Compile and inspect the ~/.atamanrc.config leader-key bindings.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-error output"),
):
    """
    ataman - leader-key bindings from ~/.atamanrc.config

    [bold]Examples:[/bold]

    Show the binding tree:
        [cyan]ataman show[/cyan]

    Edit the rc file:
        [cyan]ataman open[/cyan]
    """
    from ataman.utils.logging import setup_logging

    if verbose and quiet:
        typer.echo("Error: --verbose and --quiet are mutually exclusive", err=True)
        raise typer.Exit(1)

    setup_logging(verbose=verbose, quiet=quiet)


@app.command()
def version():
    """Show ataman version"""
    typer.echo(f"ataman version {__version__}")


app.command("reload")(config_commands.reload)
app.command("show")(config_commands.show)
app.command("open")(config_commands.open_rc)
app.command("check")(config_commands.check)
app.command("path")(config_commands.path)


def run():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
