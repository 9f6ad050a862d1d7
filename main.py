"""Command line interface for the job description extractor."""

import asyncio
import logging
import time
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from jd_extractor.config import settings
from jd_extractor.exceptions import ExtractionError
from jd_extractor.extraction import JobDescriptionExtractor
from jd_extractor.fetching import AsyncHttpClient
from jd_extractor.models import ExtractionResult
from jd_extractor.output import display_execution_time, display_result, save_result

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(message)s",
    handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
)

app = typer.Typer(
    name="jd-extract",
    help="📄 Extract job description text from job posting pages",
    add_completion=False,
)
console = Console()

FORMATS = ("text", "json")


def _configure(verbose: bool, format: str) -> None:
    if format not in FORMATS:
        raise typer.BadParameter(f"format must be one of: {', '.join(FORMATS)}")
    if verbose:
        logging.getLogger("jd_extractor").setLevel(logging.DEBUG)


def _finish(result: ExtractionResult, output: Optional[str], format: str, verbose: bool) -> None:
    display_result(result, show_events=verbose)
    if output:
        save_result(result, output, format)


@app.command()
def extract(
    url: str = typer.Argument(
        ...,
        help="Job posting URL",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Save the result to a file",
    ),
    format: str = typer.Option(
        "text",
        "--format",
        "-f",
        help="Output file format (text/json)",
    ),
    structured: bool = typer.Option(
        settings.use_structured_data,
        "--structured/--no-structured",
        "-s",
        help="Try schema.org JobPosting description before the heuristics",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logs and extraction events",
    ),
):
    """🔗 Fetch a job posting URL and extract its description."""
    _configure(verbose, format)
    start_time = time.perf_counter()

    console.print(f"[bold blue]🔗 URL:[/bold blue] {url}")
    console.print()

    try:
        with console.status("[bold green]Fetching and extracting..."):
            result = asyncio.run(_extract_url(url, structured))
    except ExtractionError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(code=1)

    _finish(result, output, format, verbose)
    display_execution_time(time.perf_counter() - start_time)


async def _extract_url(url: str, structured: bool) -> ExtractionResult:
    """Fetch and extract with a client scoped to this call."""
    extractor = JobDescriptionExtractor(
        min_content_length=settings.min_content_length,
        use_structured_data=structured,
    )
    async with AsyncHttpClient() as client:
        return await extractor.extract(url, client=client)


@app.command()
def parse(
    path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Local HTML file",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Save the result to a file",
    ),
    format: str = typer.Option(
        "text",
        "--format",
        "-f",
        help="Output file format (text/json)",
    ),
    structured: bool = typer.Option(
        settings.use_structured_data,
        "--structured/--no-structured",
        "-s",
        help="Try schema.org JobPosting description before the heuristics",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logs and extraction events",
    ),
):
    """📄 Extract the job description from a saved HTML file."""
    _configure(verbose, format)

    extractor = JobDescriptionExtractor(
        min_content_length=settings.min_content_length,
        use_structured_data=structured,
    )
    html = path.read_text(encoding="utf-8", errors="replace")

    try:
        result = extractor.extract_from_html(html)
    except ExtractionError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(code=1)

    _finish(result, output, format, verbose)


if __name__ == "__main__":
    app()
