"""CLI entry point for bookshare."""

from __future__ import annotations

import logging
import sys

import click
from dotenv import load_dotenv
from rich.logging import RichHandler
from rich.markup import escape
import yaml

from bookshare.client import BookshareClient
from bookshare.config import Settings
from bookshare.console import (
    console,
    endpoint_table,
    err_console,
    parameter_table,
    reference_link,
)
from bookshare.endpoints import default_registry
from bookshare.errors import ParameterError, RegistryError

load_dotenv()


def _setup_logging(verbose: int) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    logging.getLogger("urllib3").setLevel(max(level, logging.INFO))


@click.group()
@click.version_option(version="0.1.0", prog_name="bookshare")
@click.option("-v", "--verbose", count=True, help="-v for INFO, -vv for DEBUG logging")
def cli(verbose: int):
    """Call the Bookshare API v2 by operation name."""
    _setup_logging(verbose)


@cli.command()
@click.option("--topic", default=None, help="Only list operations in this API section")
@click.option("--synthetic", is_flag=True, help="Include composite operations")
@click.option("--yaml", "as_yaml", is_flag=True, help="Dump the catalog as YAML")
def endpoints(topic: str | None, synthetic: bool, as_yaml: bool):
    """List the known API operations."""
    registry = default_registry()
    descriptors = registry.endpoints(synthetic=synthetic, topic=topic)

    if as_yaml:
        data = [d.model_dump(mode="json", exclude_defaults=True) for d in descriptors]
        click.echo(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), nl=False)
        return

    if not descriptors:
        console.print(f"[yellow]No operations in topic {topic!r}[/yellow]")
        console.print(f"  Topics: {', '.join(registry.topics())}")
        return
    console.print(endpoint_table(descriptors))
    if synthetic:
        console.print("  * composite operation (not a single API call)")


@cli.command()
@click.argument("name")
def describe(name: str):
    """Show the calling contract of one operation."""
    registry = default_registry()
    try:
        d = registry.lookup(name)
    except RegistryError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        sys.exit(2)

    console.print(f"[bold]{d.name}[/bold]  {d.summary}")
    console.print(f"  {d.method} /v2{d.path}" if d.path else "  GET <url>")
    console.print(f"  Topic: {d.topic}")
    console.print(f"  Role: {d.role}")
    console.print(f"  Response: {d.response}")
    if d.synthetic:
        console.print("  Composite operation")
    if link := reference_link(d):
        console.print(f"  Reference: {link}")
    if d.required or d.optional:
        console.print()
        console.print(parameter_table(d))


@cli.command()
@click.argument("name")
@click.argument("params", nargs=-1)
@click.option("--token", default=None, help="OAuth2 bearer token (default: $BOOKSHARE_TOKEN)")
@click.option("--base-url", default=None, help="API base URL (default: $BOOKSHARE_BASE_URL)")
@click.option("--user", default=None, help="Default userIdentifier (default: $BOOKSHARE_USER)")
@click.option("--timeout", type=float, default=None, help="Read timeout in seconds")
@click.option("--lenient", is_flag=True, help="Pass undeclared parameters through")
def call(
    name: str,
    params: tuple[str, ...],
    token: str | None,
    base_url: str | None,
    user: str | None,
    timeout: float | None,
    lenient: bool,
):
    """Call an operation: bookshare call NAME key=value [key=value ...]

    Repeat a key to pass several values to a multi-valued parameter.
    """
    args = _parse_params(params)
    settings = Settings.from_env(
        token=token,
        base_url=base_url,
        user=user,
        timeout=timeout,
        strict_params=False if lenient else None,
    )
    client = BookshareClient(settings)

    try:
        result = client.invoke_endpoint(name, **args)
    except (RegistryError, ParameterError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        sys.exit(2)

    if result.is_error:
        status = f" (HTTP {result.status})" if result.status else ""
        console.print(f"[red]{type(result.exception).__name__}{status}: {escape(result.error_message)}[/red]")
        sys.exit(1)
    console.print_json(result.value.model_dump_json(exclude_defaults=True))


def _parse_params(params: tuple[str, ...]) -> dict[str, str | list[str]]:
    """Parse key=value pairs; a repeated key collects its values into a list."""
    args: dict[str, str | list[str]] = {}
    for item in params:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {item!r}", param_hint="PARAMS")
        if key in args:
            existing = args[key]
            args[key] = [*existing, value] if isinstance(existing, list) else [existing, value]
        else:
            args[key] = value
    return args


if __name__ == "__main__":
    cli()
