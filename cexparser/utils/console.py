"""
Console Output Manager.
Renders parsed CEX content as rich tables and panels.
"""
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from cexparser.parsing.accessors import RelationSetRecord
from cexparser.parsing.store import BlockStore

console = Console()


def labels_table(store: BlockStore, title: str = "Blocks") -> Table:
    """
    Builds a table of labels and their occurrence counts.

    Args:
        store: Parsed blocks.
        title: Table title.
    """
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Label", style="cyan")
    table.add_column("Blocks", style="white", justify="right")
    table.add_column("Lines", style="dim white", justify="right")
    for label, bodies in store.items():
        lines = sum(body.count("\n") + 1 for body in bodies)
        table.add_row(label, str(len(bodies)), str(lines))
    return table


def relation_set_panel(record: RelationSetRecord) -> Panel:
    """One relation set as a panel titled with its label and urn."""
    body = escape(record.data) if record.data else "[dim](no data)[/dim]"
    return Panel(
        body,
        title=f"[bold white]{escape(record.label)}[/bold white]",
        subtitle=f"[dim]{escape(record.urn)}[/dim]",
        border_style="white",
        box=box.ROUNDED,
    )
