"""javamodule-deps CLI - derive dependency declarations from Java module descriptors."""

import logging

import click

from .commands.explain import explain_cmd
from .commands.resolve import resolve_cmd
from .console import console
from .errors import JavaModuleDependenciesError
from .logging_setup import init_logging
from .utils.error_format import escape_markup
from .utils.error_format import format_error_message

logger = logging.getLogger(__name__)


class _ErrorHandlingGroup(click.Group):
    """Render configuration errors as one line instead of a traceback."""

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except JavaModuleDependenciesError as e:
            logger.debug("Command failed", exc_info=True)
            console.print(f"[red]Error:[/red] {escape_markup(format_error_message(e, include_type=False))}")
            ctx.exit(1)


@click.group(cls=_ErrorHandlingGroup, invoke_without_command=True)
@click.option("--log-level", default=None, help="Log level (default: $JAVAMODULE_DEPS_LOG_LEVEL or INFO)")
@click.option("--log-file", default=None, help="Also write JSONL log records to this file")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, log_file: str | None):
    """Derive dependency declarations from module-info.java 'requires' directives."""
    init_logging(level=log_level, jsonl_path=log_file)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit()


cli.add_command(resolve_cmd)
cli.add_command(explain_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
