"""Job description extraction for interview preparation."""

from jd_extractor.exceptions import ExtractionError, FetchError, NoContentFoundError
from jd_extractor.extraction import (
    JobDescriptionExtractor,
    extract_job_description,
    extract_job_description_sync,
    is_job_content,
)
from jd_extractor.models import ExtractionResult, ExtractionStrategy

__all__ = [
    "ExtractionError",
    "ExtractionResult",
    "ExtractionStrategy",
    "FetchError",
    "JobDescriptionExtractor",
    "NoContentFoundError",
    "extract_job_description",
    "extract_job_description_sync",
    "is_job_content",
]
