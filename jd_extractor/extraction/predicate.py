"""Acceptance predicate applied to every candidate text block."""

from typing import Optional

from jd_extractor.constants import BOILERPLATE_MARKERS, JOB_KEYWORDS, MIN_CONTENT_LENGTH

# Rejection reasons, reported in diagnostic events
NO_KEYWORDS = "no_keywords"
TOO_SHORT = "too_short"
BOILERPLATE = "boilerplate"


def matched_keywords(text: str) -> list[str]:
    """Distinct job keywords present in text, in keyword-list order."""
    lowered = text.lower()
    return [kw for kw in JOB_KEYWORDS if kw in lowered]


def keyword_score(text: str) -> int:
    """Number of distinct job keywords present in text."""
    return len(matched_keywords(text))


def rejection_reason(text: str, min_length: int = MIN_CONTENT_LENGTH) -> Optional[str]:
    """
    Check a candidate against the acceptance rules.

    Returns:
        None if the text is accepted, otherwise the first failed rule:
        NO_KEYWORDS, TOO_SHORT or BOILERPLATE.
    """
    lowered = text.lower()
    if not any(kw in lowered for kw in JOB_KEYWORDS):
        return NO_KEYWORDS
    if len(text) <= min_length:
        return TOO_SHORT
    if any(marker in lowered for marker in BOILERPLATE_MARKERS):
        return BOILERPLATE
    return None


def is_job_content(text: str, min_length: int = MIN_CONTENT_LENGTH) -> bool:
    """True if text mentions a job keyword, is long enough and is not boilerplate."""
    return rejection_reason(text, min_length) is None
