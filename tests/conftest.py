"""Shared fixtures for sass-module-importer tests."""

import json
import logging
import os
from pathlib import Path

import pytest


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """
    Create a small Sass project on disk.

    Creates:
    - proj/src/main.scss            (the importing file)
    - proj/src/foo.scss             (local import target)
    - proj/shared/colors.scss       (include-path target)
    - proj/node_modules/some-lib/   (package with a "sass" entry)
    """
    root = tmp_path / "proj"
    src = root / "src"
    src.mkdir(parents=True)
    (src / "main.scss").write_text('@import "foo";\n')
    (src / "foo.scss").write_text(".foo { color: red; }\n")

    shared = root / "shared"
    shared.mkdir()
    (shared / "colors.scss").write_text("$primary: blue;\n")

    lib = root / "node_modules" / "some-lib"
    (lib / "scss").mkdir(parents=True)
    (lib / "package.json").write_text(json.dumps({"name": "some-lib", "sass": "scss/index.scss"}))
    (lib / "scss" / "index.scss").write_text(".some-lib { color: green; }\n")

    return root


def fake_stat(existing: set[str]):
    """Build an async stat collaborator that only knows about `existing` paths."""

    async def stat(path: str) -> os.stat_result:
        if path not in existing:
            raise FileNotFoundError(path)
        return os.stat_result((0o100644, 0, 0, 1, 0, 0, 0, 0, 0, 0))

    return stat


def fake_module_resolver(
    resolved: dict[tuple[str, str], str] | None = None,
    errors: dict[tuple[str, str], Exception] | None = None,
):
    """Build an async module resolver keyed by (request, basedir).

    Also records every call in `calls` for ordering assertions.
    """
    resolved = resolved or {}
    errors = errors or {}
    calls: list[tuple[str, str]] = []

    async def module_resolver(request: str, basedir: str) -> str | None:
        calls.append((request, basedir))
        key = (request, basedir)
        if key in errors:
            raise errors[key]
        return resolved.get(key)

    module_resolver.calls = calls  # type: ignore[attr-defined]
    return module_resolver


@pytest.fixture
def stat_factory():
    """Factory for fake stat collaborators."""
    return fake_stat


@pytest.fixture
def module_resolver_factory():
    """Factory for fake module resolution collaborators."""
    return fake_module_resolver


@pytest.fixture
def restore_root_logger():
    """Remove handlers added to the root logger during a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
