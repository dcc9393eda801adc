"""sass-importer CLI - resolve and compile Sass imports from node_modules and include paths."""

import logging

import click

from .commands.compile import compile_cmd
from .commands.config import config as config_group
from .commands.resolve import resolve
from .logging_setup import init_json_logging
from .settings import SettingsManager

logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.version_option(package_name="sass-module-importer")
@click.option("--log-level", default=None, help="Log level for the JSONL log sink (e.g. DEBUG)")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None, help="Write JSONL logs to this file")
@click.pass_context
def cli(ctx, log_level, log_file):
    """sass-importer - resolve Sass @import specifiers to files on disk."""
    logging_settings = SettingsManager().get_logging_settings()
    path = log_file or logging_settings.path
    level = log_level or logging_settings.level

    # The JSONL sink is opt-in: a flag or a settings entry enables it
    if path or level:
        init_json_logging(path, level)
        logger.debug(f"Logging initialized (level={level}, path={path})")

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(resolve)
cli.add_command(compile_cmd)
cli.add_command(config_group)


def main():
    """Entry point for the sass-importer executable."""
    cli()


if __name__ == "__main__":
    main()
