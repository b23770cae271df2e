"""sass-pkg - inspect how package specifiers resolve.

Diagnostic front end for :class:`PackageImporter`. Stylesheet compilers use
the library API directly; this command shows what they would get.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError
from rich.table import Table

from .console import console
from .console import error_console
from .errors import PackageImporterError
from .importer import PackageImporter
from .logging_setup import init_json_logging
from .options import canonical_option_name
from .search_paths import candidate_path
from .search_paths import resolve_package_path
from .settings import SettingsManager
from .specifier import parse_specifier
from .utils.error_format import escape_markup
from .utils.error_format import format_error_message

logger = logging.getLogger(__name__)


def _overrides(ctx: click.Context) -> dict[str, Any]:
    params = ctx.obj["params"]
    overrides: dict[str, Any] = {}
    if params["cwd"] is not None:
        overrides["working_directory"] = params["cwd"]
    if params["strict"] is not None:
        overrides["strict"] = params["strict"]
    if params["prefix"]:
        overrides["prefix"] = params["prefix"]
    if params["search_roots"]:
        overrides["search_roots"] = list(params["search_roots"])
    return overrides


def _build_importer(ctx: click.Context) -> PackageImporter:
    """Importer from settings files plus command-line overrides; exits on invalid options."""
    try:
        return PackageImporter.from_settings(project_dir=ctx.obj["project_dir"], **_overrides(ctx))
    except ValidationError as e:
        error_console.print(f"[red]Error:[/red] {escape_markup(format_error_message(e))}")
        sys.exit(2)


@click.group()
@click.option(
    "--cwd",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project directory (settings and relative search roots). Default: current directory",
)
@click.option("--strict/--no-strict", default=None, help="Fail instead of falling back when a package is missing")
@click.option("--prefix", default=None, help="Specifier prefix (default: ~)")
@click.option(
    "--search-root",
    "search_roots",
    multiple=True,
    help="Directory to search for packages (repeatable, in priority order)",
)
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Write JSONL logs here")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level for --log-file (default: SASS_IMPORTER_LOG_LEVEL or INFO)",
)
@click.pass_context
def cli(ctx: click.Context, cwd, strict, prefix, search_roots, log_file, log_level):
    """Resolve ~package stylesheet imports to file URLs."""
    ctx.ensure_object(dict)
    ctx.obj["params"] = {"cwd": cwd, "strict": strict, "prefix": prefix, "search_roots": search_roots}
    ctx.obj["project_dir"] = cwd

    if log_file is not None:
        init_json_logging(log_file, log_level)


@cli.command()
@click.argument("specifiers", nargs=-1, required=True)
@click.pass_context
def resolve(ctx: click.Context, specifiers: tuple[str, ...]):
    """Print the file URL for each SPECIFIER."""
    importer = _build_importer(ctx)
    failed = False

    for specifier in specifiers:
        try:
            url = importer.find_file_url(specifier)
        except PackageImporterError as e:
            failed = True
            logger.error(f"[importer:resolve] {specifier} failed: {e}")
            error_console.print(f"[red]{escape_markup(specifier)}:[/red] {escape_markup(format_error_message(e))}")
            continue

        if url is None:
            console.print(f"{escape_markup(specifier)}: [dim]not handled[/dim]")
        else:
            console.print(f"{escape_markup(specifier)}: [cyan]{escape_markup(url)}[/cyan]", soft_wrap=True)

    if failed:
        sys.exit(1)


@cli.command()
@click.argument("specifier")
@click.pass_context
def explain(ctx: click.Context, specifier: str):
    """Show each step of resolving SPECIFIER."""
    importer = _build_importer(ctx)
    options = importer.options

    if not importer.handles(specifier):
        prefix = escape_markup(options.prefix)
        console.print(f"[yellow]{escape_markup(specifier)}[/yellow] does not start with {prefix} - not handled")
        return

    parsed = parse_specifier(specifier[len(options.prefix) :])

    table = Table(title=f"Search roots for {escape_markup(parsed.package_name or '(empty)')}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Search root", style="cyan")
    table.add_column("Candidate")
    table.add_column("Status")

    for index, search_root in enumerate(options.search_roots, start=1):
        candidate = candidate_path(search_root, parsed.package_name, options)
        try:
            found = resolve_package_path(search_root, parsed.package_name, options)
            status = "[green]found[/green]" if found else "[dim]missing[/dim]"
        except PackageImporterError as e:
            status = f"[red]{escape_markup(format_error_message(e))}[/red]"
        table.add_row(str(index), escape_markup(search_root), escape_markup(candidate), status)

    console.print(table)

    try:
        resolution = importer.resolve(specifier)
    except PackageImporterError as e:
        error_console.print(f"[red]Error:[/red] {escape_markup(format_error_message(e))}")
        sys.exit(1)

    if resolution is None:
        return

    summary = Table(show_header=False, box=None)
    summary.add_column("Field", style="bold")
    summary.add_column("Value")
    summary.add_row("Package", escape_markup(resolution.package.package_name))
    summary.add_row("Directory", escape_markup(resolution.package.package_directory))
    if not resolution.package.exists:
        summary.add_row("", "[yellow]not found, using first search root[/yellow]")
    summary.add_row("Sub-path", escape_markup(resolution.package.sub_path or "-"))
    summary.add_row("Origin", resolution.origin)
    if resolution.manifest_key:
        summary.add_row("Manifest key", escape_markup(resolution.manifest_key))
    summary.add_row("URL", f"[cyan]{escape_markup(resolution.url)}[/cyan]")
    console.print(summary)


@cli.group(invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context):
    """Show or change importer settings."""
    if ctx.invoked_subcommand is not None:
        return

    options = _build_importer(ctx).options
    table = Table(title="Effective importer options")
    table.add_column("Option", style="cyan")
    table.add_column("Value")
    for name, value in options.model_dump().items():
        if isinstance(value, tuple):
            value = ", ".join(value)
        table.add_row(name, escape_markup("-" if value is None else value))
    console.print(table)


@config.command(name="set")
@click.argument("key")
@click.argument("values", nargs=-1, required=True)
@click.option("--local", "scope", flag_value="local", help="Write to settings.local.yaml")
@click.option("--project", "scope", flag_value="project", default=True, help="Write to settings.yaml (default)")
@click.pass_context
def config_set(ctx: click.Context, key: str, values: tuple[str, ...], scope: str):
    """Set KEY to VALUES in project or local settings.

    List options (search_roots, allowed_extensions, manifest_keys) take
    several values; strict takes true/false.
    """
    manager = SettingsManager(project_dir=ctx.obj["project_dir"])

    value: Any
    name = canonical_option_name(key)
    if name == "strict":
        value = values[0].lower() in {"1", "true", "yes", "on"}
    elif name in {"search_roots", "allowed_extensions", "manifest_keys"}:
        value = list(values)
    else:
        value = values[0]

    try:
        manager.set_option(key, value, scope=scope)
    except ValueError as e:
        error_console.print(f"[red]Error:[/red] {escape_markup(format_error_message(e, include_type=False))}")
        sys.exit(2)

    console.print(f"[green]✓[/green] Set {escape_markup(key)} in {scope} settings")


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
