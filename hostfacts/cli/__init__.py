"""
hostfacts CLI - Command line interface.

Prints host facts as JSON or YAML for consumption by templating tools.
"""
import json
import sys
from pathlib import Path
from typing import Any, Dict, NoReturn

import click
import yaml
from loguru import logger
from rich.console import Console
from rich.markup import escape

from hostfacts import __version__
from hostfacts.collectors import (
    filesystem_for,
    gather_host_facts,
    get_kernel_info,
    get_os_release,
)
from hostfacts.config import load_config
from hostfacts.core.exceptions import ConfigError, HostFactsError
from hostfacts.utils.logger import setup_logger

err_console = Console(stderr=True)

FORMATS = ("json", "yaml")

format_option = click.option(
    "--format", "-f", "fmt",
    type=click.Choice(FORMATS),
    default="json",
    show_default=True,
    help="Output format",
)


def render(data: Dict[str, Any], fmt: str) -> str:
    """Serialize facts for stdout."""
    if fmt == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=True).rstrip("\n")
    return json.dumps(data, indent=2, sort_keys=True)


def _fail(error: HostFactsError) -> NoReturn:
    logger.debug(f"Fact collection failed: {error}")
    err_console.print(f"[red]Error: {escape(error.message)}[/red]", soft_wrap=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="hostfacts")
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Read facts below this directory instead of /",
)
@click.option(
    "--config", "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ~/.hostfacts/config.yaml)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug output")
@click.pass_context
def cli(ctx, root, config_file, verbose):
    """Gather kernel and os-release facts about this host."""
    try:
        config = load_config(config_file)
    except ConfigError as e:
        err_console.print(f"[red]Config error: {escape(e.message)}[/red]", soft_wrap=True)
        sys.exit(1)

    if root is not None:
        config.general.root = root

    setup_logger(verbose=verbose, config=config.logging)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["fs"] = filesystem_for(config)


@cli.command()
@format_option
@click.pass_context
def data(ctx, fmt):
    """Show all facts."""
    try:
        facts = gather_host_facts(ctx.obj["fs"], ctx.obj["config"])
    except HostFactsError as e:
        _fail(e)
    click.echo(render(facts.to_dict(), fmt))


@cli.command()
@format_option
@click.pass_context
def kernel(ctx, fmt):
    """Show kernel version, type and release."""
    config = ctx.obj["config"]
    try:
        info = get_kernel_info(ctx.obj["fs"], config.kernel.paths)
    except HostFactsError as e:
        _fail(e)
    click.echo(render(info, fmt))


@cli.command("os-release")
@format_option
@click.option("--strict", is_flag=True, help="Fail on lines without '='")
@click.pass_context
def os_release(ctx, fmt, strict):
    """Show the parsed os-release file."""
    config = ctx.obj["config"]
    strict = strict or config.os_release.strict
    try:
        info = get_os_release(ctx.obj["fs"], config.os_release.candidates, strict=strict)
    except HostFactsError as e:
        _fail(e)
    click.echo(render(info, fmt))


def main():
    """Entry point for the hostfacts CLI."""
    cli()


if __name__ == "__main__":
    main()
