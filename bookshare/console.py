"""Shared console and rendering utilities for CLI commands."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.table import Table

from bookshare.formats.descriptor import EndpointDescriptor

console = Console()
err_console = Console(stderr=True)

REFERENCE_URL = "https://apidocs.bookshare.org/reference/index.html"


def truncate(s: str, max_len: int) -> str:
    """Truncate a string to max_len, adding '...' if needed."""
    if len(s) <= max_len:
        return s
    return s[: max_len - 3] + "..."


def reference_link(descriptor: EndpointDescriptor) -> str:
    if not descriptor.reference_id:
        return ""
    return f"{REFERENCE_URL}#{descriptor.reference_id}"


def endpoint_table(descriptors: Iterable[EndpointDescriptor], title: str = "Endpoints") -> Table:
    table = Table(title=title)
    table.add_column("Name", style="cyan")
    table.add_column("Method")
    table.add_column("Path")
    table.add_column("Role")
    table.add_column("Topic")
    table.add_column("Summary")
    for d in descriptors:
        name = f"{d.name} *" if d.synthetic else d.name
        table.add_row(name, d.method, d.path or "-", d.role, d.topic, truncate(d.summary, 50))
    return table


def parameter_table(descriptor: EndpointDescriptor) -> Table:
    aliases: dict[str, list[str]] = {}
    for alias, target in descriptor.aliases.items():
        aliases.setdefault(target, []).append(alias)

    table = Table(title="Parameters")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Required", justify="center")
    table.add_column("Multi", justify="center")
    table.add_column("Default")
    table.add_column("Aliases")
    for p in (*descriptor.required, *descriptor.optional):
        default = descriptor.defaults.get(p.name)
        table.add_row(
            p.name,
            p.type,
            "yes" if p in descriptor.required else "",
            "yes" if p.multi else "",
            "" if default is None else str(default),
            ", ".join(aliases.get(p.name, [])),
        )
    return table
