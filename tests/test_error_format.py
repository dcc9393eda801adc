"""Tests for error message formatting and markup escaping."""

from __future__ import annotations

from io import StringIO

from rich.console import Console

from sass_module_importer.errors import ImportResolutionError
from sass_module_importer.errors import ModuleResolutionError
from sass_module_importer.utils.error_format import escape_markup
from sass_module_importer.utils.error_format import format_error_chain
from sass_module_importer.utils.error_format import format_error_message


class TestFormatErrorMessage:
    def test_includes_type_name(self):
        assert format_error_message(ValueError("invalid input")) == "ValueError: invalid input"

    def test_without_type(self):
        assert format_error_message(ValueError("invalid input"), include_type=False) == "invalid input"

    def test_friendly_fallback_for_empty_message(self):
        assert format_error_message(PermissionError()) == "PermissionError: Permission denied while reading from disk."

    def test_unknown_empty_message(self):
        assert format_error_message(RuntimeError()) == "RuntimeError: (no additional details)"


class TestFormatErrorChain:
    def test_includes_cause(self):
        cause = ModuleResolutionError("Failed to read node_modules/x/package.json")
        try:
            raise ImportResolutionError("x", "stdin") from cause
        except ImportResolutionError as e:
            lines = format_error_chain(e)

        assert lines == [
            "ImportResolutionError: Could not find file: x from parent stdin",
            "ModuleResolutionError: Failed to read node_modules/x/package.json",
        ]


class TestEscapeMarkup:
    def test_preserves_plain_text(self):
        assert escape_markup("Could not find file") == "Could not find file"

    def test_renders_brackets_literally(self):
        buf = StringIO()
        c = Console(file=buf, force_terminal=False, no_color=True)
        c.print(f"[red]Error:[/red] {escape_markup('[/proj/src/main.scss]')}")
        assert "[/proj/src/main.scss]" in buf.getvalue()
