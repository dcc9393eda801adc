"""Shared importer options for CLI commands.

CLI flags override settings files; settings files override built-in defaults.
Include paths given with -I come before include paths from settings.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from ..importer import ImportOptions
from ..importer import Importer
from ..importer import create_importer
from ..settings import SettingsManager


def importer_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach --root, --ext and --include-path options to a command."""
    func = click.option(
        "--include-path",
        "-I",
        "include_paths",
        multiple=True,
        type=click.Path(file_okay=False),
        help="Extra base directory, searched first (repeatable)",
    )(func)
    func = click.option("--ext", "extension", default=None, help="Stylesheet extension (default: .scss)")(func)
    func = click.option(
        "--root",
        type=click.Path(file_okay=False),
        default=None,
        help="Base directory of last resort (default: current directory)",
    )(func)
    return func


def build_importer(
    root: str | None, extension: str | None, include_paths: tuple[str, ...]
) -> tuple[Importer, ImportOptions]:
    """Create an importer and per-call options from flags plus settings."""
    settings = SettingsManager().get_importer_settings()

    importer = create_importer(
        root=Path(root or settings.root or Path.cwd()),
        extension=extension or settings.extension,
    )
    options = ImportOptions(include_paths=[*include_paths, *settings.include_paths])
    return importer, options
