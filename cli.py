#!/usr/bin/env python3
"""
VibeShare - Main CLI Entry Point

Browse, search and add prompt entries from the terminal.
"""

import sys
import argparse
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.prompt import Prompt, Confirm
from rich import box

import config
from catalog import (
    EnrichmentError,
    EntryDraft,
    ValidationError,
    get_service,
)

console = Console()


def format_date(ms: int) -> str:
    return datetime.fromtimestamp(ms / 1000).strftime("%Y-%m-%d")


def read_prompt_source(source: str) -> str:
    """Prompt text from a file path, or stdin for '-'."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def list_entries(query: str = ""):
    """List entries, optionally filtered"""
    service = get_service()
    entries = service.list_entries()
    if service.last_warning:
        console.print(f"[yellow]{service.last_warning}. Showing seed entries.[/yellow]")

    entries = service.search_entries(entries, query)
    if not entries:
        console.print("[dim]No entries match.[/dim]")
        return []

    table = Table(title=f"Library ({len(entries)} entries)", box=box.ROUNDED)
    table.add_column("ID", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Tags")
    table.add_column("Author")
    table.add_column("Rating", justify="right", style="green")
    table.add_column("Created", style="dim")

    for entry in entries:
        tags = ", ".join(entry.tags[:3])
        if len(entry.tags) > 3:
            tags += f" +{len(entry.tags) - 3}"
        table.add_row(
            entry.id[:12],
            entry.title,
            tags,
            entry.author.name,
            f"{entry.ai_rating}/10" if entry.ai_rating else "-",
            format_date(entry.created_at),
        )

    console.print(table)
    return entries


def show_entry(entry_id: str) -> bool:
    """Show full entry detail"""
    entry = get_service().get_entry(entry_id)
    if not entry:
        console.print(f"[red]Entry '{entry_id}' not found[/red]")
        return False

    header = f"[bold]{entry.title}[/bold]\n"
    header += f"{entry.author.name} ({entry.author.role.value}) · "
    header += f"Updated {format_date(entry.updated_at)} · v{entry.version}.0 · {entry.likes} likes"
    if entry.ai_rating:
        header += f" · Complexity: {entry.ai_rating}/10"
    console.print(Panel.fit(header, title=entry.id))

    if entry.tags:
        console.print("[cyan]" + "  ".join(f"#{t}" for t in entry.tags) + "[/cyan]")
    if entry.display_summary:
        console.print(f"\n{entry.display_summary}")

    console.print(Panel(entry.prompt, title="Prompt", box=box.ROUNDED))

    if entry.builder_url:
        console.print(f"Builder: [link]{entry.builder_url}[/link]")
    if entry.deployed_url:
        console.print(f"Deployed: [link]{entry.deployed_url}[/link]")
    return True


def enrich_prompt(source: str) -> bool:
    """Print AI suggested metadata for a prompt"""
    prompt = read_prompt_source(source)
    try:
        result = get_service().enrich(prompt)
    except EnrichmentError as e:
        console.print(f"[red]{e}[/red]")
        return False

    console.print(Panel.fit(
        f"[bold]{result.title}[/bold]\n{result.summary}\n"
        f"Tags: {', '.join(result.tags)}\n"
        f"Complexity: {result.complexity_score}/10",
        title="AI Analysis"
    ))
    return True


def create_entry(prompt_source: str = None, use_ai: bool = False) -> bool:
    """Interactive entry creation"""
    service = get_service()

    if prompt_source:
        prompt = read_prompt_source(prompt_source)
    else:
        console.print("[dim]Paste your prompt. Enter an empty line when done.[/dim]")
        lines = []
        while True:
            line = console.input()
            if not line:
                break
            lines.append(line)
        prompt = "\n".join(lines)

    draft = EntryDraft(prompt=prompt)

    if use_ai and prompt.strip():
        console.print("[dim]Running Magic Fill...[/dim]")
        if service.enrich_draft(draft):
            console.print("[green]Fields pre-filled from AI analysis.[/green]")
        else:
            console.print(f"[yellow]{draft.analysis_error}[/yellow]")

    draft.title = Prompt.ask("Title", default=draft.title or None) or ""
    draft.description = Prompt.ask("Description", default=draft.description or "")
    draft.builder_url = Prompt.ask("Builder URL", default="")
    draft.deployed_url = Prompt.ask("Deployed URL", default="")

    if draft.tags:
        console.print(f"Tags: {', '.join(draft.tags)}")
    extra = Prompt.ask("Additional tags (comma separated)", default="")
    for tag in extra.split(","):
        draft.add_tag(tag)

    if not Confirm.ask("Save entry?", default=True):
        console.print("[dim]Discarded.[/dim]")
        return False

    try:
        entry = service.create_entry(draft.to_input(), config.MOCK_USER)
    except ValidationError as e:
        console.print(f"[red]{e}[/red]")
        return False

    console.print(f"[green]Saved entry {entry.id}[/green]")
    return True


def cli():
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description="VibeShare - internal catalog of vibe coding prompts",
    )
    sub = parser.add_subparsers(dest="command")

    list_p = sub.add_parser("list", help="List entries")
    list_p.add_argument("-q", "--query", default="", help="Filter by title, tag or author")

    show_p = sub.add_parser("show", help="Show one entry")
    show_p.add_argument("entry_id")

    create_p = sub.add_parser("create", help="Create an entry interactively")
    create_p.add_argument("--prompt-file", help="Read prompt text from a file ('-' for stdin)")
    create_p.add_argument("--enrich", action="store_true", help="Pre-fill fields with AI analysis")

    enrich_p = sub.add_parser("enrich", help="Analyze a prompt with AI")
    enrich_p.add_argument("source", help="Prompt file path, or '-' for stdin")

    sub.add_parser("serve", help="Run the web API")

    args = parser.parse_args()

    if args.command == "show":
        ok = show_entry(args.entry_id)
    elif args.command == "create":
        ok = create_entry(args.prompt_file, use_ai=args.enrich)
    elif args.command == "enrich":
        ok = enrich_prompt(args.source)
    elif args.command == "serve":
        from app import main as serve
        console.print(f"[dim]Serving API at http://localhost:{config.WEB_PORT}[/dim]")
        serve()
        ok = True
    else:
        list_entries(getattr(args, "query", ""))
        ok = True

    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    cli()
