"""Command-line interface for bundle-hooks."""

import sys

import click
from colorama import Fore, Style, init

from bundle_cli.artifacts import derive_artifact_set
from bundle_cli.config import DEFAULT_CONFIG_FILE, BuildConfig, parse_import_args
from bundle_cli.core import DEFAULT_HOST, DEFAULT_PORT, BuildContext, DevServer, report_result
from bundle_cli.errors import BuildError
from bundle_cli.utils.console import _create_files_table, _get_console, _rich_error, _rich_success
from bundle_cli.version import get_version

# Initialize colorama for the top-level error line
init(autoreset=True)

ERROR = f"{Fore.RED}{Style.BRIGHT}"
RESET = Style.RESET_ALL


def print_version(ctx, param, value):
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"bundle-hooks {get_version()}")
    ctx.exit()


def _parse_port(value, default=DEFAULT_PORT):
    """Port number from the command line, or ``default`` when it is not a valid port."""
    try:
        port = int(value)
    except (TypeError, ValueError):
        return default
    return port if 0 < port < 65536 else default


def _load_config(config_path, extern, imports, no_typecheck=False):
    """Load build.yml and apply command-line overrides before anything is built."""
    overrides = {}
    if no_typecheck:
        overrides['check_types'] = False
    config = BuildConfig.from_build_yml(config_path, **overrides)
    if extern:
        config.extern = True
        config.imports = {**config.imports, **parse_import_args(imports)}
    return config


def _exit_on_failure(result):
    report_result(result)
    if not result.success:
        sys.exit(1)


@click.group(help="bundle-hooks: build and serve web projects with esbuild")
@click.option('--version', is_flag=True, callback=print_version,
              expose_value=False, is_eager=True, help="Show version and exit.")
@click.pass_context
def cli(ctx):
    """Main entry point for the bundle-hooks CLI."""
    ctx.ensure_object(dict)


@cli.command(help="Build the project once")
@click.argument('imports', nargs=-1)
@click.option('--extern', is_flag=True, help="Load IMPORTS (key|name|src) from script tags instead of bundling them")
@click.option('--config', 'config_path', default=DEFAULT_CONFIG_FILE, show_default=True, help="Build configuration file")
@click.option('--dry-run', is_flag=True, help="List the expected output files without building")
@click.option('--no-typecheck', is_flag=True, help="Skip the TypeScript type check")
def build(imports, extern, config_path, dry_run, no_typecheck):
    try:
        config = _load_config(config_path, extern, imports, no_typecheck)
        if dry_run:
            rows = [(file.dst_path, file.src_path) for file in derive_artifact_set(config)]
            _get_console().print(_create_files_table(rows, title="Expected output", value_header="Source"))
            return
        result = BuildContext(config).rebuild()
    except BuildError as e:
        _rich_error(str(e), symbol="error")
        sys.exit(1)

    _exit_on_failure(result)
    _rich_success("Build complete", symbol="success")


@cli.command(help="Serve the output directory and rebuild on change")
@click.argument('imports', nargs=-1)
@click.option('--host', default=DEFAULT_HOST, show_default=True, help="Host to bind")
@click.option('--port', default=str(DEFAULT_PORT), show_default=True, help="Port to bind")
@click.option('--extern', is_flag=True, help="Load IMPORTS (key|name|src) from script tags instead of bundling them")
@click.option('--config', 'config_path', default=DEFAULT_CONFIG_FILE, show_default=True, help="Build configuration file")
@click.option('--no-typecheck', is_flag=True, help="Skip the TypeScript type check")
def serve(imports, host, port, extern, config_path, no_typecheck):
    try:
        config = _load_config(config_path, extern, imports, no_typecheck)
        context = BuildContext(config)
    except BuildError as e:
        _rich_error(str(e), symbol="error")
        sys.exit(1)

    DevServer(context, host=host or DEFAULT_HOST, port=_parse_port(port)).serve_forever()


def main():
    """Main entry point for the CLI."""
    try:
        cli(obj={})
    except Exception as e:
        click.echo(f"{ERROR}Error: {e}{RESET}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
