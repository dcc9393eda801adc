"""Config commands - inspect merged importer settings."""

from __future__ import annotations

import click
from rich.table import Table

from ..console import console
from ..settings import SettingsManager
from ..utils.error_format import escape_markup


@click.group(invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context):
    """Inspect sass-importer settings."""
    if ctx.invoked_subcommand is None:
        click.echo("\n" + ctx.get_help())
        ctx.exit()


@config.command(name="show")
def config_show():
    """Show effective settings (project overrides user)."""
    manager = SettingsManager()
    importer_settings = manager.get_importer_settings()
    logging_settings = manager.get_logging_settings()

    table = Table(title="Effective Settings")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("importer.root", escape_markup(importer_settings.root or "(current directory)"))
    table.add_row("importer.extension", escape_markup(importer_settings.extension))
    table.add_row(
        "importer.include_paths",
        escape_markup(", ".join(importer_settings.include_paths) or "(none)"),
    )
    table.add_row("logging.level", escape_markup(logging_settings.level or "(default)"))
    table.add_row("logging.path", escape_markup(logging_settings.path or "(disabled)"))

    console.print(table)
    console.print(f"[dim]User settings: {escape_markup(manager.user_settings_file)}[/dim]")
    console.print(f"[dim]Project settings: {escape_markup(manager.project_settings_file)}[/dim]")
