"""CLI entry point for standalone usage: z-contract-lint.

Subcommands:
    z-contract-lint check ./...                  # Lint Go sources under a path
    z-contract-lint create-settings -o s.json    # Generate settings template
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import click

from z_contract_linter.core.logging import setup_logging
from z_contract_linter.exceptions import LinterError

# Settings template
_SETTINGS_TEMPLATE = {
    "one": "",
    "two": [{"name": ""}],
    "three": {"name": ""},
}

_EXIT_ERROR = 2


def _load_settings_file(path: str | None) -> Any:
    if path is None:
        return None
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        click.echo(f"Error: Invalid JSON in {path}: {e}", err=True)
        sys.exit(_EXIT_ERROR)
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"Error: Cannot read settings file {path}: {e}", err=True)
        sys.exit(_EXIT_ERROR)


def _strip_ellipsis(path: str) -> str:
    # Trailing "/..." is accepted for familiarity with go tooling
    return path[:-4] or "." if path.endswith("/...") else path


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """Z-Contract-Lint: enforce Validate/GetResourceMappings on Go structs."""
    setup_logging("DEBUG" if verbose else None)


@main.command("create-settings")
@click.option("-o", "--output", default="settings.json", help="Output file path")
def create_settings(output: str) -> None:
    """Generate a settings template JSON file."""
    Path(output).write_text(json.dumps(_SETTINGS_TEMPLATE, indent=2) + "\n")
    click.echo(f"Settings template written to {output}")


@main.command("check")
@click.argument("paths", nargs=-1)
@click.option("--settings", "settings_file", default=None,
              type=click.Path(exists=True, dir_okay=False),
              help="JSON settings file")
@click.option("--no-tests", is_flag=True, help="Skip *_test.go files")
@click.option("--mapping-import-path", default=None,
              help="Require ResourceMapping to come from this import path")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]),
              default="text", help="Output format")
@click.option("-j", "--jobs", default=1, type=click.IntRange(min=1),
              help="Units analysed in parallel")
def check(
    paths: tuple[str, ...],
    settings_file: str | None,
    no_tests: bool,
    mapping_import_path: str | None,
    output_format: str,
    jobs: int,
) -> None:
    """Check every struct in the Go sources under PATHS (default: current dir)."""
    from z_contract_linter.plugin import new
    from z_contract_linter.runner import LintRunner
    from z_contract_linter.source.loader import load_units

    raw_settings = _load_settings_file(settings_file)
    targets = [_strip_ellipsis(p) for p in paths] or ["."]

    try:
        plugin = new(raw_settings, mapping_import_path=mapping_import_path)
        units = load_units(targets, include_tests=not no_tests)
    except LinterError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(_EXIT_ERROR)

    result = LintRunner(plugin, jobs=jobs).run(units)

    if output_format == "json":
        click.echo(json.dumps([d.to_dict() for d in result.diagnostics], indent=2))
    else:
        for d in result.diagnostics:
            click.echo(f"{d.position}: {d.message} ({d.analyzer})")

    sys.exit(result.exit_code)
