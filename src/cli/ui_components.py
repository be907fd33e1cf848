"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas en múltiples comandos.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import FieldLabelMappingGroup, Merchant, MerchantTag


def print_banner(console: Console) -> None:
    title = Text("merchant-client", style="bold cyan")
    subtitle = Text("Merchants • Label mappings • Tags", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_merchants_table(merchants: Sequence[Merchant]) -> Table:
    table = Table(title=f"Merchants ({len(merchants)})")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Legal rep.", style="white")
    table.add_column("District", style="magenta")
    table.add_column("Valid time", style="green")
    table.add_column("Updated", style="dim")
    for merchant in merchants:
        table.add_row(
            str(merchant.id),
            merchant.title,
            merchant.legal_representative,
            merchant.business_district,
            merchant.valid_time,
            merchant.updated.isoformat(timespec="seconds") if merchant.updated else "-",
        )
    return table


def build_mapping_groups_table(groups: Sequence[FieldLabelMappingGroup]) -> Table:
    """Una fila por regla, agrupadas visualmente por campo."""

    table = Table(title="Field label mappings")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Placeholder", style="yellow")
    table.add_column("Display text", style="white")
    table.add_column("Label", style="magenta")
    for group in groups:
        for index, mapping in enumerate(group.mappings):
            table.add_row(
                group.field if index == 0 else "",
                mapping.placeholder,
                mapping.display_text,
                str(mapping.label_id),
            )
        table.add_section()
    return table


def build_tags_table(tags: Sequence[MerchantTag]) -> Table:
    table = Table(title=f"Merchant tags ({len(tags)})")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Category", style="magenta")
    table.add_column("Color", style="dim")
    table.add_column("System", style="green")
    for tag in tags:
        table.add_row(str(tag.id), tag.title, tag.category, tag.hex_color, "yes" if tag.is_system else "no")
    return table
