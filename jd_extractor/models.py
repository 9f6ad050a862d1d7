"""Data models for pages, candidates and extraction results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ExtractionStrategy(Enum):
    """Strategy that produced a candidate, in priority order."""
    STRUCTURED_DATA = "structured_data"  # schema.org JobPosting description (opt-in)
    MAIN_CONTENT = "main_content"        # <main>, role="main", content wrappers
    JOB_SELECTORS = "job_selectors"      # ATS / job board class, id and data-* conventions
    ELEMENT_SCAN = "element_scan"        # every div/section/article/main in document order
    BEST_PARAGRAPH = "best_paragraph"    # highest keyword score among body paragraphs
    RAW_BODY = "raw_body"                # whole body text, last resort


class EventOutcome(Enum):
    """What happened to a strategy or candidate."""
    ATTEMPT = "attempt"
    REJECTED = "rejected"
    ACCEPTED = "accepted"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class RawPage:
    """Fetched HTML document. Lives only for one extraction call."""

    url: str
    status_code: int
    html: str
    reason: str = ""


@dataclass
class ContentCandidate:
    """A cleaned text block considered as the job description."""

    text: str
    strategy: ExtractionStrategy
    selector: Optional[str] = None
    score: int = 0

    @property
    def length(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class ExtractionEvent:
    """Structured diagnostic record emitted while walking the strategy chain."""

    strategy: ExtractionStrategy
    outcome: EventOutcome
    selector: Optional[str] = None
    length: Optional[int] = None
    reason: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "strategy": self.strategy.value,
            "outcome": self.outcome.value,
            "selector": self.selector,
            "length": self.length,
            "reason": self.reason,
        }


@dataclass
class ExtractionResult:
    """Final job description text plus where it came from."""

    text: str
    strategy: ExtractionStrategy
    selector: Optional[str] = None
    events: list[ExtractionEvent] = field(default_factory=list)

    @property
    def length(self) -> int:
        return len(self.text)

    def attempted_strategies(self) -> list[ExtractionStrategy]:
        """Strategies that were started, in the order they ran."""
        return [e.strategy for e in self.events if e.outcome is EventOutcome.ATTEMPT]

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "strategy": self.strategy.value,
            "selector": self.selector,
            "length": self.length,
            "events": [e.to_dict() for e in self.events],
        }
