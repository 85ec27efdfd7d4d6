"""CLI entry point for agencyos."""

import logging
from datetime import datetime
from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import load_config, load_directory

console = Console()


@click.group()
@click.option("--config", "-c", "config_path", default=None, help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx, config_path, verbose):
    """Agency OS - journal mentions, framework chunking and copy drafting."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


def _get_config(ctx) -> dict:
    return load_config(ctx.obj.get("config_path"))


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--directory", "-d", "directory_path", required=True,
              type=click.Path(exists=True, dir_okay=False), help="YAML file of clients/projects/content")
def extract(file, directory_path):
    """Extract @mentions and #tags from a note."""
    from .journal.mentions import extract_mentions

    directory = load_directory(directory_path)
    text = file.read_text(encoding="utf-8", errors="replace")
    result = extract_mentions(
        text,
        directory["clients"] or [],
        projects=directory["projects"],
        content=directory["content"],
    )

    table = Table(title="Extraction")
    table.add_column("Kind", style="cyan")
    table.add_column("Values")
    table.add_row("Clients", ", ".join(result.mentioned_clients) or "-")
    table.add_row("Projects", ", ".join(result.mentioned_projects) or "-")
    table.add_row("Content", ", ".join(result.mentioned_content) or "-")
    table.add_row("Tags", ", ".join(f"#{t}" for t in result.tags) or "-")
    console.print(table)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--safe/--raw", default=True, help="HTML-escape the surrounding text (default: safe)")
@click.pass_context
def highlight(ctx, file, safe):
    """Print a note as HTML with mentions and tags highlighted."""
    from .journal.mentions import render_highlights

    config = _get_config(ctx)
    classes = config.get("highlight", {})
    text = file.read_text(encoding="utf-8", errors="replace")
    html = render_highlights(
        text,
        escape=safe,
        mention_class=classes.get("mention_class", "mention"),
        tag_class=classes.get("tag_class", "tag"),
    )
    click.echo(html)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--max-size", default=None, type=int, help="Maximum characters per chunk")
@click.option("--overlap", default=None, type=int, help="Characters shared between chunks")
@click.pass_context
def chunk(ctx, file, max_size, overlap):
    """Show how a framework document would be chunked."""
    from .frameworks.chunker import chunk_text
    from .parsers import parse_document

    config = _get_config(ctx)
    chunk_cfg = config.get("chunking", {})
    doc = parse_document(file)
    chunks = chunk_text(
        doc["content"],
        max_chunk_size=max_size or chunk_cfg.get("max_chunk_size", 1000),
        overlap=overlap if overlap is not None else chunk_cfg.get("overlap", 100),
    )

    if not chunks:
        console.print("[yellow]Document is empty.[/]")
        return

    table = Table(title=f"Chunks of {doc['name']}")
    table.add_column("#", style="dim", width=3)
    table.add_column("Chars", justify="right", style="green")
    table.add_column("Preview", max_width=60)
    for c in chunks:
        table.add_row(str(c.index), str(len(c.text)), c.text[:80].replace("\n", " "))
    console.print(table)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--now", "now_text", default=None, help="Reference time (ISO-8601), default: now")
def journal(file, now_text):
    """Group journal entries (YAML/JSON list with created_at) by recency."""
    from .journal.grouping import group_by_recency, parse_instant

    entries = yaml.safe_load(file.read_text(encoding="utf-8")) or []
    if not isinstance(entries, list):
        console.print("[red]Expected a list of entries.[/]")
        return
    for entry in entries:
        if not isinstance(entry, dict):
            console.print(f"[red]Invalid entry: expected a mapping with created_at, got {escape(repr(entry))}[/]")
            return

    try:
        now = parse_instant(now_text) if now_text else datetime.now().astimezone()
        groups = group_by_recency(entries, now)
    except (KeyError, ValueError) as e:
        console.print(f"[red]Invalid entry: {escape(str(e))}[/]")
        return

    if not groups:
        console.print("[yellow]No entries.[/]")
        return

    for group in groups:
        console.print(f"\n[bold]🕐 {group.label}[/] ({len(group.entries)})")
        for entry in group.entries:
            preview = str(entry.get("content", "")).replace("\n", " ")[:80]
            console.print(f"  • {preview}")


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--id", "framework_id", default=None, help="Framework ID (default: frontmatter id or file stem)")
@click.pass_context
def index(ctx, file, framework_id):
    """Chunk and embed a framework document."""
    from .embeddings.index import FrameworkIndex
    from .parsers import parse_document

    config = _get_config(ctx)
    doc = parse_document(file)
    meta = doc["metadata"]
    framework_id = framework_id or str(meta.get("id") or file.stem)

    console.print(f"[blue]Indexing framework '{doc['name']}' ({framework_id})...[/]")
    count = FrameworkIndex(config).index_framework(
        framework_id,
        doc["content"],
        name=doc["name"],
        category=meta.get("category"),
    )
    console.print(f"[green]✓ Stored {count} chunk(s)[/]")


@cli.command()
@click.argument("query")
@click.option("--n", "-n", default=None, type=int, help="Number of chunks to retrieve")
@click.option("--threshold", "-t", default=None, type=float, help="Minimum similarity")
@click.pass_context
def search(ctx, query, n, threshold):
    """Similarity search over indexed framework chunks."""
    from .embeddings.index import FrameworkIndex

    config = _get_config(ctx)
    search_cfg = config.get("search", {})
    console.print(f"[blue]Searching frameworks for: '{query}'[/]\n")

    matches = FrameworkIndex(config).search(
        query,
        threshold=threshold if threshold is not None else search_cfg.get("threshold", 0.7),
        limit=n or search_cfg.get("limit", 5),
    )
    if not matches:
        console.print("[yellow]No matching framework chunks. Have you run 'agencyos index'?[/]")
        return

    table = Table(title="Framework Chunks")
    table.add_column("#", style="dim", width=3)
    table.add_column("Framework", style="cyan")
    table.add_column("Score", justify="right", style="green")
    table.add_column("Preview", max_width=60)
    for i, m in enumerate(matches, 1):
        table.add_row(str(i), m.name or m.framework_id, f"{m.similarity:.3f}", m.content[:80].replace("\n", " "))
    console.print(table)


@cli.command()
@click.argument("request")
@click.option("--purpose", type=click.Choice(["research", "content_generation", "all"]),
              default="content_generation", help="Which framework categories to draw on")
@click.option("--client", "client_path", default=None, type=click.Path(exists=True, dir_okay=False),
              help="YAML file with client details for placeholders")
@click.pass_context
def draft(ctx, request, purpose, client_path):
    """Draft copy with Claude, grounded in relevant frameworks."""
    from rich.markdown import Markdown
    from rich.panel import Panel

    from .copywriter import draft_copy
    from .models import ClientContext

    config = _get_config(ctx)
    client = None
    if client_path:
        with open(client_path) as f:
            client = ClientContext.from_dict(yaml.safe_load(f) or {})

    console.print("[blue]Retrieving frameworks and drafting...[/]\n")
    try:
        result = draft_copy(request, config, purpose=purpose, client=client)
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        return

    console.print(Panel(Markdown(result["copy"]), title="Draft", border_style="green"))
    if result["framework_ids"]:
        console.print("\n[bold]📚 Frameworks used:[/]")
        for fid in result["framework_ids"]:
            console.print(f"  • {fid}")


if __name__ == "__main__":
    cli()
