"""Global constants for the application.

Centralizes thresholds, keyword lists and selector lists used by the
job description extractor. All sequences are tuples: they are ordered
configuration, and the order is significant.
"""

# =============================================================================
# Content thresholds
# =============================================================================

MIN_CONTENT_LENGTH = 200  # Candidate text must be strictly longer than this (chars)


# =============================================================================
# Keywords
# =============================================================================

# Lowercase phrases that indicate job description content.
# Matched as substrings against the lowercased candidate text.
JOB_KEYWORDS = (
    "responsibilities",
    "requirements",
    "qualifications",
    "experience",
    "skills",
    "job description",
    "about the role",
    "what you'll do",
    "who you are",
    "duties",
    "we are looking for",
)

# Markers of consent banners and legal footers. A candidate containing any
# of them is rejected even when it otherwise qualifies.
BOILERPLATE_MARKERS = (
    "cookie",
    "privacy policy",
)


# =============================================================================
# Selectors
# =============================================================================

# Tier 1: primary content containers
MAIN_CONTENT_SELECTORS = (
    "main",
    '[role="main"]',
    "#main-content",
    ".main-content",
    "#content",
    ".content",
    "article",
)

# Tier 2: attribute/class/id conventions used by job boards and ATS pages
JOB_DESCRIPTION_SELECTORS = (
    '[data-automation-id*="job"]',
    '[data-testid*="job"]',
    '[data-qa*="job"]',
    '[class*="job-description"]',
    '[id*="job-description"]',
    '[class*="jobDescription"]',
    '[id*="jobDescription"]',
    '[class*="job-details"]',
    '[class*="posting"]',
    '[itemprop="description"]',
    '[class*="description"]',
    '[id*="description"]',
)

# Tier 3: block-level containers enumerated in document order
BLOCK_CONTAINER_TAGS = ("div", "section", "article", "main")

# Elements removed before any text extraction
NON_CONTENT_TAGS = ("script", "style")


# =============================================================================
# HTTP
# =============================================================================

# Servers may reject requests with a default or empty user agent
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
DEFAULT_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
DEFAULT_ACCEPT_LANGUAGE = "en-US,en;q=0.9"
