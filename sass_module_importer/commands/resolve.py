"""Resolve command - show where an @import specifier lands on disk."""

from __future__ import annotations

import asyncio
import logging

import click

from ..console import error_console
from ..errors import ImportResolutionError
from ..module_resolution import Resolved
from ..utils.error_format import escape_markup
from ..utils.error_format import format_error_chain
from ._importer_options import build_importer
from ._importer_options import importer_options

logger = logging.getLogger(__name__)

EXIT_NO_RESULT = 1
EXIT_FATAL = 2


@click.command()
@click.argument("specifier")
@click.option(
    "--from",
    "previous_file",
    default="stdin",
    help="File containing the @import (default: stdin, i.e. no real file)",
)
@importer_options
@click.option("--verbose", "-v", is_flag=True, help="Show include paths searched")
@click.pass_context
def resolve(ctx: click.Context, specifier, previous_file, root, extension, include_paths, verbose):
    """Resolve SPECIFIER the way the Sass importer would.

    Exits 0 and prints the path when resolved, 1 when nothing matched (the
    compiler would fall back to its own lookup), 2 on a fatal failure.
    """
    importer, options = build_importer(root, extension, include_paths)

    if verbose:
        error_console.print("[dim]Include paths (in order):[/dim]")
        for path in importer.include_paths_for(previous_file, options):
            error_console.print(f"  [dim]{escape_markup(path)}[/dim]")

    try:
        result = asyncio.run(importer.resolve(specifier, previous_file, options))
    except ImportResolutionError as e:
        logger.debug(f"Fatal resolution failure for {specifier}: {e}")
        for line in format_error_chain(e):
            error_console.print(f"[red]Error:[/red] {escape_markup(line)}")
        ctx.exit(EXIT_FATAL)

    if isinstance(result, Resolved):
        click.echo(result.file)
        return

    error_console.print(
        f"[dim]No result for {escape_markup(specifier)}; the compiler would use its default lookup.[/dim]"
    )
    ctx.exit(EXIT_NO_RESULT)
