"""Resolve command: declare dependencies for all module descriptors of a build."""

from __future__ import annotations

from pathlib import Path

import click
from rich.table import Table

from ..build import DEFAULT_BUILD_FILE
from ..console import console
from ..resolution.diagnostics import Severity
from ..runner import BuildResolver
from ..utils.error_format import escape_markup


@click.command("resolve")
@click.option(
    "--build",
    "build_file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_BUILD_FILE,
    show_default=True,
    help="Build description file",
)
@click.option("--project", "-p", default=None, help="Only resolve this project")
@click.option(
    "--analyse-only/--no-analyse-only", default=None, help="Parse descriptors without declaring dependencies"
)
@click.option(
    "--warn-missing-versions/--no-warn-missing-versions",
    default=None,
    help="Warn about mapped modules without a version",
)
def resolve_cmd(build_file: Path, project: str | None, analyse_only, warn_missing_versions):
    """Resolve 'requires' directives into dependency declarations."""
    from ._common import load_inputs

    build, settings = load_inputs(
        build_file, analyse_only=analyse_only, warn_for_missing_versions=warn_missing_versions
    )
    result = BuildResolver(build, settings).resolve(project)

    if settings.analyse_only:
        console.print("[dim]Analyse-only mode: no dependencies declared[/dim]")

    table = Table(title="Declared Dependencies", show_header=True, header_style="bold cyan")
    table.add_column("Project", style="green")
    table.add_column("Configuration", style="yellow")
    table.add_column("Dependency", style="magenta")
    table.add_column("Because")

    for variant in result.variants:
        for edge in variant.edges:
            target = f"{edge.target} ({edge.capability})" if edge.capability else edge.target
            table.add_row(
                escape_markup(variant.project),
                edge.configuration,
                escape_markup(target),
                escape_markup(edge.because),
            )

    if table.row_count:
        console.print(table)
    else:
        console.print("[dim]No dependencies declared[/dim]")

    for diagnostic in result.diagnostics:
        style = "yellow" if diagnostic.severity is Severity.WARNING else "dim"
        console.print(f"[{style}]{escape_markup(diagnostic.message)}[/{style}]")
