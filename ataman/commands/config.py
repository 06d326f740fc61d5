"""Rc file commands for ataman."""

import typer
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from ataman.utils.output import console, print_json


def _load_or_exit(host):
    """Compile the rc file, reporting failures through the host."""
    from ataman.config.constants import NOTIFICATION_TITLE
    from ataman.exceptions import MalformedConfigError, SourceUnavailableError
    from ataman.keybindings.loader import (
        MALFORMED_CONFIG_MESSAGE,
        SOURCE_UNAVAILABLE_MESSAGE,
        load_config,
        read_rc_file,
    )

    try:
        rc_file, text = read_rc_file()
    except SourceUnavailableError:
        host.notify_error(NOTIFICATION_TITLE, SOURCE_UNAVAILABLE_MESSAGE)
        raise typer.Exit(1)

    try:
        return load_config(text, host.window, basedir=str(rc_file.parent))
    except MalformedConfigError as e:
        host.notify_error(NOTIFICATION_TITLE, f"{MALFORMED_CONFIG_MESSAGE}\n{e}")
        raise typer.Exit(1)


def _render_tree(config) -> Tree:
    from ataman.keybindings import GroupBinding

    def add(node: Tree, bindings) -> None:
        for binding in bindings:
            chord = escape(binding.key_chord.to_key_spec())
            description = escape(binding.description)
            if isinstance(binding, GroupBinding):
                branch = node.add(f"[bold cyan]{escape(binding.key)}[/bold cyan] {description} [dim]({chord})[/dim]")
                add(branch, binding.children)
            else:
                node.add(
                    f"[bold]{escape(binding.key)}[/bold] {description} "
                    f"[dim]({chord}) → {escape(binding.action_id)}[/dim]"
                )

    root = Tree(f"[bold]{escape(config.appearance.title)}[/bold]")
    add(root, config.bindings)
    return root


def reload():
    """Reload the rc file and show what was loaded."""
    from ataman.host import create_cli_host
    from ataman.keybindings import get_config_store, iter_bindings
    from ataman.keybindings import reload as reload_config

    store = get_config_store()
    previous = store.current
    reload_config(create_cli_host())
    if store.current is previous:
        raise typer.Exit(1)

    config = store.current
    total = sum(1 for _ in iter_bindings(config.bindings))

    table = Table(show_header=False, box=None)
    table.add_column("Metric", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("Title", escape(config.appearance.title))
    table.add_row("Top-level bindings", str(len(config.bindings)))
    table.add_row("Total bindings", str(total))

    console.print("[green]Config reloaded[/green]")
    console.print(table)


def show(
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """Show the compiled binding tree."""
    from ataman.host import create_cli_host

    config = _load_or_exit(create_cli_host())

    if json_output:
        print_json(config.to_dict())
        return

    if not config.bindings:
        console.print("[yellow]No bindings defined[/yellow]")
    console.print(_render_tree(config))


def open_rc():
    """Open the rc file, creating it from the template if needed."""
    from ataman.actions import OPEN_CONFIG_ACTION_ID
    from ataman.host import create_cli_host

    host = create_cli_host()
    host.actions.invoke(OPEN_CONFIG_ACTION_ID, host)


def check(
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """Check the rc file for duplicate keys and unknown actions."""
    from ataman.host import create_cli_host
    from ataman.keybindings import SingleBinding, find_duplicate_keys, iter_bindings

    host = create_cli_host()
    config = _load_or_exit(host)

    duplicates = find_duplicate_keys(config.bindings)
    unknown = host.actions.missing(
        binding.action_id
        for _, binding in iter_bindings(config.bindings)
        if isinstance(binding, SingleBinding)
    )

    if json_output:
        print_json(
            {
                "duplicates": [report.to_dict() for report in duplicates],
                "unknownActions": unknown,
                "registeredActions": host.actions.ids(),
            }
        )
        return

    if not duplicates and not unknown:
        console.print("[green]No problems found![/green]")
        return

    for report in duplicates:
        console.print(f"[yellow]{escape(report.to_string())}[/yellow]")
    for action_id in unknown:
        console.print(f"[dim]Action '{escape(action_id)}' is not registered in this host[/dim]")
    if unknown:
        registered = ", ".join(host.actions.ids())
        console.print(f"[dim]Registered actions: {escape(registered)}[/dim]")


def path():
    """Print the rc file location."""
    from ataman.config.rc_file import get_rc_path

    rc_path = get_rc_path()
    if rc_path is None:
        console.print("[red]Could not determine the rc file location[/red]")
        raise typer.Exit(1)
    print(rc_path)
