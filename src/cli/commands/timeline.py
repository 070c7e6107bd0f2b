"""Mood tracking CLI command."""

from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from cli.commands.analysis import MOOD_STYLE
from cli.utils import get_components
from journal.mood import compute_mood_stats, dominant_mood, mood_history, mood_insights

console = Console()


@click.command()
@click.option("-d", "--days", type=int, default=None, help="Lookback days (defaults to config)")
def mood(days: Optional[int]):
    """Show mood timeline, stats and insights from journal entries."""
    c = get_components()
    if days is None:
        days = c["config_model"].analysis.history_days
    analyzer = c["analyzer"]

    timeline = mood_history(c["storage"].load_records(), days=days, analyzer=analyzer)
    if not timeline:
        console.print("[yellow]No entries found. Add journal entries to track mood.[/]")
        return

    table = Table(show_header=True, title=f"Mood - last {days} days")
    table.add_column("Date", style="dim")
    table.add_column("Mood")
    table.add_column("Score", justify="right")
    table.add_column("Entry")

    for item in timeline:
        style = MOOD_STYLE.get(item["mood"], "dim")
        table.add_row(
            item["date"],
            f"[{style}]██[/] {item['mood']}",
            f"{item['score']:.2f}",
            str(item["title"])[:35],
        )
    console.print(table)

    labels = analyzer.lexicon.labels
    stats = compute_mood_stats(timeline, labels=labels)
    console.print(
        f"\n[bold]Average:[/] {stats.average_mood:.2f}  |  "
        f"Entries: {len(timeline)}  |  Streak: {stats.streak}  |  "
        f"Dominant: {dominant_mood(stats.distribution) or '-'}"
    )

    for insight in mood_insights(timeline, labels=labels):
        console.print(f"[cyan]{insight['title']}:[/] {insight['description']}")
