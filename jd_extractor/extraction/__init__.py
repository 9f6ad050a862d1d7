"""Job description extraction module."""

from .extractor import (
    JobDescriptionExtractor,
    extract_job_description,
    extract_job_description_sync,
)
from .predicate import is_job_content, keyword_score

__all__ = [
    "JobDescriptionExtractor",
    "extract_job_description",
    "extract_job_description_sync",
    "is_job_content",
    "keyword_score",
]
