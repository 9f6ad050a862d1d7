"""Job description extraction strategies.

Each strategy is a plain function ``(soup, context) -> ContentCandidate | None``.
``STRATEGY_CHAIN`` lists them in priority order; the extractor walks it and
stops at the first candidate a strategy returns.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from bs4 import BeautifulSoup

from jd_extractor.constants import (
    BLOCK_CONTAINER_TAGS,
    JOB_DESCRIPTION_SELECTORS,
    MAIN_CONTENT_SELECTORS,
    MIN_CONTENT_LENGTH,
)
from jd_extractor.models import (
    ContentCandidate,
    EventOutcome,
    ExtractionEvent,
    ExtractionStrategy,
)

from .cleaning import body_text, clean_text, element_text, split_paragraphs
from .predicate import TOO_SHORT, keyword_score, rejection_reason

logger = logging.getLogger(__name__)


@dataclass
class StrategyContext:
    """Per-call state shared by the strategies of one extraction."""

    min_length: int = MIN_CONTENT_LENGTH
    json_ld_blocks: list[str] = field(default_factory=list)
    emit: Callable[[ExtractionEvent], None] = lambda event: None

    def reject(
        self, strategy: ExtractionStrategy, text: str, reason: str, selector: Optional[str] = None
    ) -> None:
        self.emit(ExtractionEvent(
            strategy=strategy,
            outcome=EventOutcome.REJECTED,
            selector=selector,
            length=len(text),
            reason=reason,
        ))

    def accept(self, candidate: ContentCandidate) -> ContentCandidate:
        self.emit(ExtractionEvent(
            strategy=candidate.strategy,
            outcome=EventOutcome.ACCEPTED,
            selector=candidate.selector,
            length=candidate.length,
        ))
        return candidate


Strategy = Callable[[BeautifulSoup, StrategyContext], Optional[ContentCandidate]]


def _first_accepted(
    strategy: ExtractionStrategy,
    texts: Iterable[tuple[Optional[str], str]],
    context: StrategyContext,
) -> Optional[ContentCandidate]:
    """Return the first (selector, text) pair that passes the predicate."""
    for selector, text in texts:
        if not text:
            continue
        reason = rejection_reason(text, context.min_length)
        if reason:
            context.reject(strategy, text, reason, selector)
            continue
        return context.accept(ContentCandidate(
            text=text,
            strategy=strategy,
            selector=selector,
            score=keyword_score(text),
        ))
    return None


def _selector_texts(soup: BeautifulSoup, selectors: Iterable[str]) -> Iterable[tuple[str, str]]:
    """Cleaned text of every element matching each selector, selector by selector."""
    for selector in selectors:
        for element in soup.select(selector):
            yield selector, element_text(element)


# =============================================================================
# Structured data (opt-in)
# =============================================================================


def _job_postings(data) -> list[dict]:
    """JobPosting objects from a JSON-LD payload (plain, list or @graph)."""
    if isinstance(data, list):
        items = data
    elif isinstance(data, dict):
        items = data.get("@graph") if isinstance(data.get("@graph"), list) else [data]
    else:
        return []

    postings = []
    for item in items:
        if not isinstance(item, dict):
            continue
        types = item.get("@type")
        if types == "JobPosting" or (isinstance(types, list) and "JobPosting" in types):
            postings.append(item)
    return postings


def collect_json_ld(soup: BeautifulSoup) -> list[str]:
    """Raw JSON-LD payloads. Must run before script elements are removed."""
    return [
        str(script.string)
        for script in soup.find_all("script", attrs={"type": "application/ld+json"})
        if script.string
    ]


def structured_data(soup: BeautifulSoup, context: StrategyContext) -> Optional[ContentCandidate]:
    """Description of the first schema.org JobPosting that passes the predicate."""

    def texts():
        for payload in context.json_ld_blocks:
            try:
                data = json.loads(payload)
            except (json.JSONDecodeError, TypeError):
                logger.debug("Skipping invalid JSON-LD block")
                continue
            for posting in _job_postings(data):
                description = posting.get("description")
                if isinstance(description, str) and description.strip():
                    # description is usually HTML
                    text = clean_text(BeautifulSoup(description, "lxml").get_text("\n"))
                    yield "JobPosting.description", text

    return _first_accepted(ExtractionStrategy.STRUCTURED_DATA, texts(), context)


# =============================================================================
# Heuristic tiers
# =============================================================================


def main_content(soup: BeautifulSoup, context: StrategyContext) -> Optional[ContentCandidate]:
    """Tier 1: primary content containers."""
    return _first_accepted(
        ExtractionStrategy.MAIN_CONTENT,
        _selector_texts(soup, MAIN_CONTENT_SELECTORS),
        context,
    )


def job_selectors(soup: BeautifulSoup, context: StrategyContext) -> Optional[ContentCandidate]:
    """Tier 2: class/id/data-* conventions used by job boards."""
    return _first_accepted(
        ExtractionStrategy.JOB_SELECTORS,
        _selector_texts(soup, JOB_DESCRIPTION_SELECTORS),
        context,
    )


def element_scan(soup: BeautifulSoup, context: StrategyContext) -> Optional[ContentCandidate]:
    """Tier 3: every block container in document order."""
    texts = (
        (element.name, element_text(element))
        for element in soup.find_all(BLOCK_CONTAINER_TAGS)
    )
    return _first_accepted(ExtractionStrategy.ELEMENT_SCAN, texts, context)


def best_paragraph(soup: BeautifulSoup, context: StrategyContext) -> Optional[ContentCandidate]:
    """
    Tier 4: highest-scoring body paragraph.

    Paragraphs are split on blank lines and must pass the predicate.
    Score is the number of distinct keywords. A later paragraph replaces
    the current best only with a strictly greater score, so the earliest
    paragraph wins ties.
    """
    strategy = ExtractionStrategy.BEST_PARAGRAPH
    best: Optional[ContentCandidate] = None
    best_score = 0

    for paragraph in split_paragraphs(body_text(soup)):
        reason = rejection_reason(paragraph, context.min_length)
        if reason:
            context.reject(strategy, paragraph, reason)
            continue
        score = keyword_score(paragraph)
        if score > best_score:
            best_score = score
            best = ContentCandidate(text=paragraph, strategy=strategy, score=score)

    if best is None:
        return None
    logger.debug(f"Best paragraph scored {best.score} ({best.length} chars)")
    return context.accept(best)


def raw_body(soup: BeautifulSoup, context: StrategyContext) -> Optional[ContentCandidate]:
    """Tier 5: whole body text, if it clears the length floor. No keyword check."""
    strategy = ExtractionStrategy.RAW_BODY
    text = clean_text(body_text(soup))
    if len(text) <= context.min_length:
        context.reject(strategy, text, TOO_SHORT)
        return None
    return context.accept(ContentCandidate(text=text, strategy=strategy, score=keyword_score(text)))


HEURISTIC_CHAIN: tuple[tuple[ExtractionStrategy, Strategy], ...] = (
    (ExtractionStrategy.MAIN_CONTENT, main_content),
    (ExtractionStrategy.JOB_SELECTORS, job_selectors),
    (ExtractionStrategy.ELEMENT_SCAN, element_scan),
    (ExtractionStrategy.BEST_PARAGRAPH, best_paragraph),
    (ExtractionStrategy.RAW_BODY, raw_body),
)

STRATEGY_CHAIN: tuple[tuple[ExtractionStrategy, Strategy], ...] = (
    (ExtractionStrategy.STRUCTURED_DATA, structured_data),
) + HEURISTIC_CHAIN
