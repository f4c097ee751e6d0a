"""Command-line interface for envinject.

Typical container entrypoint::

    ENTRYPOINT ["envinject", "--root", ".next", "--"]
    CMD ["node", "server.js"]
"""

import os
import sys
import click
from click.core import ParameterSource
from colorama import Fore, Style

from envinject_cli.version import get_version
from envinject_cli.config import InjectorConfig, DEFAULT_ROOT, CONFIG_FILE
from envinject_cli.core.errors import ConfigError, InjectorError
from envinject_cli.core.handoff import exec_command, EXIT_NOT_FOUND
from envinject_cli.core.injector import PlaceholderInjector, mapping_lookup
from envinject_cli.output.reporter import ConsoleReporter
from envinject_cli.utils.console import (
    _rich_error, _rich_info, _get_console, set_quiet
)

TITLE = f"{Fore.CYAN}{Style.BRIGHT}"
ERROR = f"{Fore.RED}{Style.BRIGHT}"
RESET = Style.RESET_ALL


def _explicit(ctx, name, value):
    """Return value only if it was given on the command line."""
    if ctx.get_parameter_source(name) == ParameterSource.DEFAULT:
        return None
    return value


def print_version(ctx, param, value):
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return

    console = _get_console()
    if console:
        from rich.text import Text
        from rich.panel import Panel
        version_text = Text()
        version_text.append("envinject", style="bold cyan")
        version_text.append(f" version {get_version()}", style="white")
        console.print(Panel(version_text, border_style="cyan", padding=(0, 1)))
    else:
        click.echo(f"{TITLE}envinject{RESET} version {get_version()}")

    ctx.exit()


@click.command(
    help="Inject runtime environment values into built static assets, then run COMMAND.",
    context_settings={"allow_interspersed_args": False},
)
@click.option('--version', is_flag=True, callback=print_version,
              expose_value=False, is_eager=True, help="Show version and exit.")
@click.option('--root', '-r', default=None,
              help=f"Build output directory to scan [default: {DEFAULT_ROOT}]")
@click.option('--token', '-t', 'tokens', multiple=True,
              help="Token to inject (repeatable); replaces the default token list")
@click.option('--ext', '-e', 'extensions', multiple=True,
              help="Artifact extension to scan (repeatable) [default: .js .css .html]")
@click.option('--strict/--no-strict', default=False,
              help="Fail when a declared token has no runtime value")
@click.option('--dry-run', is_flag=True,
              help="Report replacements without writing files or starting COMMAND")
@click.option('--workers', '-w', type=click.IntRange(min=1), default=None,
              help="Threads used to rewrite files for each token")
@click.option('--config', '-c', 'config_path', type=click.Path(dir_okay=False), default=None,
              help=f"YAML config file [default: ./{CONFIG_FILE} if present]")
@click.option('--quiet', '-q', is_flag=True,
              help="Only print warnings and errors")
@click.argument('command', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx, root, tokens, extensions, strict, dry_run, workers, config_path, quiet, command):
    """Main entry point for the envinject CLI."""
    ctx.ensure_object(dict)

    try:
        config = InjectorConfig.from_sources(
            config_path=config_path,
            root=root,
            tokens=list(tokens) or None,
            extensions=list(extensions) or None,
            strict=_explicit(ctx, 'strict', strict),
            dry_run=dry_run or None,
            workers=workers,
            quiet=quiet or None,
        )
    except ConfigError as e:
        _rich_error(f"Configuration error: {e}", symbol="error")
        sys.exit(1)

    set_quiet(config.quiet)

    injector = PlaceholderInjector(
        root=config.root,
        tokens=config.tokens,
        lookup=mapping_lookup(os.environ),
        extensions=config.extensions,
        strict=config.strict,
        dry_run=config.dry_run,
        workers=config.workers,
        reporter=ConsoleReporter(),
    )

    try:
        injector.run()
    except InjectorError:
        # Reporter has already printed the failure
        sys.exit(1)

    if not command:
        return

    if config.dry_run:
        _rich_info(f"Dry run: not starting {' '.join(command)}")
        return

    _rich_info(f"Starting {' '.join(command)}", symbol="running")
    status = exec_command(command, exec_fn=ctx.obj.get('exec_fn'))
    if status != 0:
        reason = "Command not found" if status == EXIT_NOT_FOUND else "Cannot execute command"
        _rich_error(f"{reason}: {command[0]}", symbol="error")
        sys.exit(status)


def main():
    """Main entry point for the CLI."""
    try:
        cli(obj={})
    except Exception as e:
        click.echo(f"{ERROR}Error: {e}{RESET}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
