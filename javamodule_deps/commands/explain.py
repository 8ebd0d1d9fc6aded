"""Explain command: show how a single module name is resolved."""

from __future__ import annotations

from pathlib import Path

import click
from rich.panel import Panel

from ..build import DEFAULT_BUILD_FILE
from ..console import console
from ..model.module_info import MAIN_SOURCE_SET
from ..resolution.results import ExternalCoordinate
from ..resolution.results import PlatformSupplied
from ..resolution.results import ProjectReference
from ..resolution.results import ProjectReferenceWithCapability
from ..resolution.results import Resolution
from ..runner import BuildResolver
from ..utils.error_format import escape_markup


def describe(resolution: Resolution) -> tuple[str, str]:
    """Strategy name and target description for a resolution."""
    if isinstance(resolution, PlatformSupplied):
        return "platform", "supplied by the Java platform"
    if isinstance(resolution, ProjectReference):
        return "project", resolution.project_path
    if isinstance(resolution, ProjectReferenceWithCapability):
        return "project capability", f"{resolution.project_path} ({resolution.capability})"
    if isinstance(resolution, ExternalCoordinate):
        return "external", resolution.coordinate.notation
    return "unresolved", "no mapping known"


@click.command("explain")
@click.argument("module_name")
@click.option(
    "--build",
    "build_file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_BUILD_FILE,
    show_default=True,
    help="Build description file",
)
@click.option("--project", "-p", required=True, help="Project whose descriptor requires the module")
@click.option("--source-set", "-s", default=MAIN_SOURCE_SET, show_default=True, help="Source set of the project")
def explain_cmd(module_name: str, build_file: Path, project: str, source_set: str):
    """Show which strategy resolves MODULE_NAME for a project's source set."""
    from ._common import load_inputs

    build, settings = load_inputs(build_file)
    resolver = BuildResolver(build, settings)
    project_spec = build.project(project)
    module_info = build.module_info(resolver.cache, project_spec, source_set)
    own_prefix = module_info.module_name_prefix(project, source_set)

    resolution = resolver.engine.resolve(module_name, own_prefix, resolver.catalog, module_info.file_path)
    strategy, target = describe(resolution)
    sources = resolver.registry.sources_for(module_name)

    prefix_display = "<unknown>" if own_prefix is None else repr(own_prefix)
    panel_content = f"""[bold]Module:[/bold] {escape_markup(module_name)}
[bold]Requested by:[/bold] {escape_markup(project)} ({escape_markup(source_set)})
[bold]Own prefix:[/bold] {escape_markup(prefix_display)}
[bold]Strategy:[/bold] {strategy}
[bold]Target:[/bold] {escape_markup(target)}"""
    if sources:
        panel_content += f"\n[bold]Registry sources:[/bold] {escape_markup(', '.join(sources))}"

    console.print(Panel(panel_content, title=f"Module: {escape_markup(module_name)}", border_style="cyan"))
    for diagnostic in resolver.diagnostics.records:
        console.print(f"[yellow]{escape_markup(diagnostic.message)}[/yellow]")
