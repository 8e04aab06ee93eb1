"""Social video analysis CLI."""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from socialvideo.lib.config_manager import config
from socialvideo.lib.logging_config import setup_logging
from socialvideo.services.analysis import AnalysisContext, AnalysisError, analyze_video
from socialvideo.services.youtube import format_duration

app = typer.Typer(help="Aggregate YouTube metadata and captions for analysis")
console = Console()


@app.command()
def analyze(
    video_url: str = typer.Argument(..., help="YouTube video URL"),
    include_transcript: bool = typer.Option(
        True, "--transcript/--no-transcript", help="Fetch caption text"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON payload"),
):
    """Analyze a single video and print the result."""
    setup_logging(config.get("SERVICE_NAME"), config.get("LOG_LEVEL"))

    context = AnalysisContext(
        video_url=video_url,
        api_key=config.get("YOUTUBE_API_KEY"),
        include_transcript=include_transcript,
    )

    try:
        with console.status("[bold yellow]Fetching from YouTube..."):
            result = analyze_video(context)
    except AnalysisError as e:
        console.print(f"[bold red]Error:[/bold red] {e.message}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(result.model_dump(), indent=2))
        return

    metadata = result.metadata
    table = Table(title=metadata.title)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Video ID", result.video_id)
    table.add_row("Channel", metadata.channel.name)
    table.add_row("Published", metadata.publish_date)
    table.add_row("Duration", format_duration(metadata.duration_seconds))
    table.add_row("Views", f"{metadata.views:,}")
    table.add_row("Likes", f"{metadata.likes:,}")
    table.add_row("Comments", f"{metadata.comments:,}")
    table.add_row(
        "Transcript",
        f"{result.transcript.type} ({len(result.transcript.text)} chars)"
        if result.transcript.available
        else "none",
    )
    console.print(table)

    for limitation in result.limitations:
        console.print(f"[dim]- {limitation}[/dim]")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Port (default: API_PORT)"),
):
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "socialvideo.api.main:app",
        host=host or config.get("API_HOST"),
        port=port or config.get("API_PORT"),
    )


if __name__ == "__main__":
    app()
