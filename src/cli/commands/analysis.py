"""Text and entry analysis CLI commands."""

import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

import click
import frontmatter
from rich.console import Console
from rich.table import Table

from cli.utils import get_components, resolve_journal_path
from journal.analyzer import AnalysisResult
from journal.analyzer import analyze as run_analysis
from journal.lexicon import PROFILES
from journal.mood import merge_analysis

console = Console()

MOOD_STYLE = {
    "joy": "yellow",
    "positive": "green",
    "sadness": "blue",
    "anger": "red",
    "negative": "red",
    "fear": "magenta",
    "neutral": "dim",
}

profile_option = click.option(
    "-p",
    "--profile",
    type=click.Choice(sorted(PROFILES)),
    default=None,
    help="Lexicon profile (defaults to config)",
)


def render_result(result: AnalysisResult, title: str = "Analysis") -> Table:
    style = MOOD_STYLE.get(str(result.mood), "dim")
    table = Table(show_header=False, title=title)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Mood", f"[{style}]{result.mood}[/]")
    table.add_row("Score", f"{result.score:.2f}")
    table.add_row("Topics", ", ".join(result.topics))
    table.add_row("Keywords", ", ".join(result.keywords) or "[dim]-[/]")
    return table


@click.command()
@click.argument("text", required=False)
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read text from a file (frontmatter is ignored)",
)
@profile_option
@click.option("--json", "as_json", is_flag=True, help="Print result as JSON")
def analyze(text: Optional[str], file_path: Optional[Path], profile: Optional[str], as_json: bool):
    """Analyze mood, topics and keywords of TEXT, a file, or stdin."""
    if file_path:
        text = frontmatter.load(file_path).content
    elif text is None:
        stdin = click.get_text_stream("stdin")
        if stdin.isatty():
            console.print("[yellow]No text provided.[/]")
            sys.exit(1)
        text = stdin.read()

    c = get_components(profile=profile)
    result = asyncio.run(run_analysis(text, c["analyzer"]))

    if as_json:
        click.echo(json.dumps(result.to_dict()))
        return
    console.print(render_result(result))


@click.command()
@click.argument("entry")
@profile_option
def annotate(entry: str, profile: Optional[str]):
    """Analyze a journal ENTRY and store the result in its frontmatter."""
    c = get_components(profile=profile)
    path = resolve_journal_path(c["paths"]["journal_dir"], entry)
    if not path:
        console.print(f"[red]Entry not found:[/] {entry}")
        sys.exit(1)

    post = c["storage"].read(path)
    result = asyncio.run(run_analysis(post.content, c["analyzer"]))
    merged = merge_analysis({}, result)
    c["storage"].update(
        path, metadata={"mood": merged["mood"], "ai_analysis": merged["ai_analysis"]}
    )

    console.print(render_result(result, title=path.name))
    console.print(f"[green]Annotated:[/] {path.name}")
