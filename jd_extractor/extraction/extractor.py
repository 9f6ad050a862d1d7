"""Job description extractor: ordered fallback chain over one HTML page.

Strategy order:
0. schema.org JobPosting description (only with use_structured_data)
1. Main content regions (<main>, role="main", content wrappers)
2. Job board / ATS selectors (job-description classes, data-* attributes)
3. Every div/section/article/main in document order
4. Best-scoring body paragraph
5. Whole body text, if long enough

The first candidate accepted along this order is returned. Candidates
are never merged. If nothing qualifies, NoContentFoundError is raised.
"""

import asyncio
import logging
from typing import Callable, Optional

from jd_extractor.constants import MIN_CONTENT_LENGTH
from jd_extractor.exceptions import NoContentFoundError
from jd_extractor.fetching import AsyncHttpClient
from jd_extractor.models import (
    EventOutcome,
    ExtractionEvent,
    ExtractionResult,
    ExtractionStrategy,
)

from .cleaning import parse_html, sanitize
from .strategies import HEURISTIC_CHAIN, STRATEGY_CHAIN, StrategyContext, collect_json_ld

logger = logging.getLogger(__name__)


class JobDescriptionExtractor:
    """
    Turns an arbitrary job posting page into job description text.

    The extractor holds configuration only. Every call builds its own
    document tree and event list, so one instance can serve concurrent
    calls.
    """

    def __init__(
        self,
        min_content_length: int = MIN_CONTENT_LENGTH,
        use_structured_data: bool = False,
        on_event: Optional[Callable[[ExtractionEvent], None]] = None,
    ):
        """
        Initialize extractor.

        Args:
            min_content_length: Candidates must be strictly longer than this
            use_structured_data: Try schema.org JobPosting description first
            on_event: Called with every diagnostic event as it happens
        """
        self.min_content_length = min_content_length
        self.use_structured_data = use_structured_data
        self.on_event = on_event

    @property
    def chain(self):
        return STRATEGY_CHAIN if self.use_structured_data else HEURISTIC_CHAIN

    def extract_from_html(self, html: str) -> ExtractionResult:
        """
        Extract job description text from an HTML document.

        Raises:
            NoContentFoundError: If every strategy is exhausted
        """
        events: list[ExtractionEvent] = []

        def emit(event: ExtractionEvent) -> None:
            events.append(event)
            if self.on_event:
                self.on_event(event)

        soup = parse_html(html or "")
        context = StrategyContext(min_length=self.min_content_length, emit=emit)
        if self.use_structured_data:
            context.json_ld_blocks = collect_json_ld(soup)
        sanitize(soup)

        for strategy, run in self.chain:
            emit(ExtractionEvent(strategy=strategy, outcome=EventOutcome.ATTEMPT))
            candidate = run(soup, context)
            if candidate is not None:
                where = f" {candidate.selector!r}" if candidate.selector else ""
                logger.debug(f"{strategy.value} matched{where} ({candidate.length} chars)")
                return ExtractionResult(
                    text=candidate.text,
                    strategy=candidate.strategy,
                    selector=candidate.selector,
                    events=events,
                )
            emit(ExtractionEvent(strategy=strategy, outcome=EventOutcome.EXHAUSTED))
            logger.debug(f"{strategy.value} found nothing")

        logger.debug("No job description content found")
        raise NoContentFoundError()

    async def extract(self, url: str, client: Optional[AsyncHttpClient] = None) -> ExtractionResult:
        """
        Fetch a job posting URL and extract its job description.

        Args:
            url: Absolute URL of the job posting
            client: HTTP client to use; a temporary one is created if omitted

        Raises:
            FetchError: On network failure or non-2xx status
            NoContentFoundError: If no strategy produced content
        """
        if client is None:
            async with AsyncHttpClient() as own_client:
                page = await own_client.fetch_page(url)
        else:
            page = await client.fetch_page(url)

        logger.debug(f"Extracting job description from {page.url}")
        return self.extract_from_html(page.html)


async def extract_job_description(url: str, **kwargs) -> str:
    """Fetch url and return its job description text.

    Keyword arguments are passed to JobDescriptionExtractor.
    """
    result = await JobDescriptionExtractor(**kwargs).extract(url)
    return result.text


def extract_job_description_sync(url: str, **kwargs) -> str:
    """Synchronous variant of extract_job_description (no running event loop)."""
    return asyncio.run(extract_job_description(url, **kwargs))
