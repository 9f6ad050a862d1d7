"""Result output: terminal rendering and saving to files."""

import json
from pathlib import Path
from typing import Literal

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from jd_extractor.models import ExtractionResult


console = Console()


def display_execution_time(elapsed_seconds: float) -> None:
    """Show elapsed time in a compact panel."""
    if elapsed_seconds < 60:
        time_str = f"{elapsed_seconds:.2f} s"
    else:
        minutes = int(elapsed_seconds // 60)
        seconds = elapsed_seconds % 60
        time_str = f"{minutes} min {seconds:.1f} s"

    console.print()
    console.print(Panel(
        f"[bold cyan]⏱️  Execution time:[/bold cyan] [bold white]{time_str}[/bold white]",
        border_style="dim cyan",
        padding=(0, 2),
    ))


def display_result(result: ExtractionResult, show_events: bool = False) -> None:
    """Print the extracted job description and where it came from."""
    source = result.strategy.value
    if result.selector:
        source += f" ({result.selector})"

    console.print(Panel(
        result.text,
        title=f"Job description: {result.length} chars",
        subtitle=f"strategy: {source}",
        border_style="green",
    ))

    if show_events:
        display_events(result)


def display_events(result: ExtractionResult) -> None:
    """Print the diagnostic events of an extraction as a table."""
    table = Table(title=f"Extraction events: {len(result.events)}")

    table.add_column("Strategy", style="cyan")
    table.add_column("Outcome", style="magenta")
    table.add_column("Selector", style="blue", max_width=40)
    table.add_column("Length", style="yellow", justify="right")
    table.add_column("Reason", style="red")

    for event in result.events:
        table.add_row(
            event.strategy.value,
            event.outcome.value,
            event.selector or "—",
            str(event.length) if event.length is not None else "—",
            event.reason or "—",
        )

    console.print(table)


def save_result(
    result: ExtractionResult,
    output_path: str,
    format: Literal["text", "json"] = "text",
) -> Path:
    """
    Save an extraction result to a file.

    Args:
        result: Extraction result
        output_path: File path; a suffix is added if missing
        format: "text" writes the description only, "json" adds metadata and events

    Returns:
        Path of the saved file
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if format == "json":
        if not path.suffix:
            path = path.with_suffix(".json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump(result.to_dict(), f, ensure_ascii=False, indent=2)
    elif format == "text":
        if not path.suffix:
            path = path.with_suffix(".txt")
        path.write_text(result.text, encoding="utf-8")
    else:
        raise ValueError(f"Unsupported format: {format}")

    console.print(f"[green]Saved to {path}[/green]")
    return path
