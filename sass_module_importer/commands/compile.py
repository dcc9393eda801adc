"""Compile command - run libsass with the module importer installed."""

from __future__ import annotations

import logging
from pathlib import Path

import click
import sass

from ..console import console
from ..console import error_console
from ..errors import SassImporterError
from ..utils.error_format import escape_markup
from ..utils.error_format import format_error_chain
from ._importer_options import build_importer
from ._importer_options import importer_options

logger = logging.getLogger(__name__)


@click.command(name="compile")
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@importer_options
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write CSS here instead of stdout")
@click.option(
    "--output-style",
    type=click.Choice(["nested", "expanded", "compact", "compressed"]),
    default="expanded",
    help="CSS output style",
)
@click.pass_context
def compile_cmd(ctx: click.Context, source, root, extension, include_paths, output, output_style):
    """Compile SOURCE with libsass, resolving imports through this importer."""
    importer, options = build_importer(root, extension, include_paths)

    try:
        css = sass.compile(
            filename=source,
            include_paths=list(options.include_paths),
            importers=[(0, importer.for_libsass(options))],
            output_style=output_style,
        )
    except (sass.CompileError, SassImporterError) as e:
        logger.debug(f"Compilation of {source} failed: {e}")
        for line in format_error_chain(e):
            error_console.print(f"[red]Error:[/red] {escape_markup(line)}")
        ctx.exit(1)

    if output:
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(css, encoding="utf-8")
        console.print(f"[green]✓[/green] Wrote {escape_markup(out_path)}")
    else:
        click.echo(css, nl=False)
