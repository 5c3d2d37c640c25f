"""CLI interface for RagBot."""

import json
import os

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from ....common.exception_handler import format_exception_json
from ....composition.container import Container, build_container
from ....config.logging import configure_logging
from ....config.settings import get_settings

app = typer.Typer(
    name="ragbot",
    help="RagBot - answer questions from your own documents",
    add_completion=False,
)

console = Console()

# Determine if we're in debug mode (shows full stack traces)
DEBUG_MODE = os.getenv("DEBUG", "false").lower() == "true"


def handle_cli_error(exc: Exception) -> None:
    """Display an error: full JSON in debug mode, a short message otherwise.

    Args:
        exc: The exception to handle.
    """
    error_data = format_exception_json(exc, include_trace=DEBUG_MODE)

    if DEBUG_MODE:
        console.print(
            Panel(
                json.dumps(error_data, indent=2, default=str),
                title="[bold red]Error Details[/]",
                border_style="red",
            )
        )
    else:
        error_code = error_data["error"].get("code", "UNKNOWN")
        console.print(f"\n[red]Error [{error_code}]:[/] {error_data['error']['message']}")
        console.print(f"[dim]Type: {error_data['error']['type']}[/]")
        console.print("[dim]Set DEBUG=true for full details[/]")


def get_container() -> Container:
    """Build services from environment settings."""
    settings = get_settings()
    configure_logging(settings)
    return build_container(settings)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface to bind"),
    port: int = typer.Option(8000, help="Port to listen on"),
    reload: bool = typer.Option(False, help="Reload on code changes (development)"),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    uvicorn.run(
        "ragbot.adapters.inbound.api.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question to answer from the documents"),
) -> None:
    """Ask a single question and get an answer."""
    container = get_container()

    try:
        with console.status("[bold green]Thinking...[/]"):
            answer = container.chat_service.ask(question)
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    console.print(Markdown(answer.text))

    if answer.sources:
        console.print("\n[dim]Sources:[/]")
        for match in answer.sources:
            console.print(f"  [dim]{match.segment.citation} (score {match.score:.2f})[/]")


@app.command()
def ingest() -> None:
    """Build the knowledge base once and show what was indexed."""
    container = get_container()
    knowledge_base = container.knowledge_base

    try:
        with console.status(f"[bold green]Indexing {knowledge_base.documents_dir}...[/]"):
            knowledge_base.ensure_ready()
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    stats = knowledge_base.stats()
    table = Table(title="Knowledge Base")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    for key, value in stats.items():
        table.add_row(key, str(value))
    console.print(table)


@app.command("notes-check")
def notes_check() -> None:
    """Verify connectivity to the notes service."""
    container = get_container()
    result = container.notes.check_connection()

    if result.get("success"):
        console.print(f"[green]Connected to {result['base_id']}/{result['table_name']}[/]")
    else:
        console.print(f"[red]Notes service check failed:[/] {result.get('error')}")
    console.print(
        f"[dim]Token: {result['token_prefix']} ({result['token_length']} chars)[/]"
    )
    if not result.get("success"):
        raise typer.Exit(1)


@app.command()
def intent(
    text: str = typer.Argument(..., help="Chat message to classify"),
) -> None:
    """Show which intent a message is routed to."""
    container = get_container()
    decision = container.intent_router.route(text)
    console.print(f"Intent: [bold]{decision.intent.value}[/]")
    if decision.link:
        console.print(f"Link: {decision.link}")


if __name__ == "__main__":
    app()
