"""Pytest configuration and fixtures for extractor tests."""

import json

import pytest


# A realistic job description: several keywords, well over 200 characters
JOB_TEXT = (
    "About the role: We are looking for a backend engineer to design and operate "
    "our payment APIs. Responsibilities include building services in Python, "
    "reviewing code and mentoring colleagues. Requirements: five years of "
    "experience with distributed systems and strong communication skills."
)

# One keyword ("skills"), over 200 characters
ONE_KEYWORD_PARAGRAPH = (
    "Our team builds the payment platform that thousands of merchants rely on "
    "every day. We ship small changes often, review each other's work carefully "
    "and keep our services simple to operate. Most of the work involves Python, "
    "PostgreSQL and a little Go, with plenty of room for ownership and new skills."
)

# Three keywords ("responsibilities", "requirements", "experience"), over 200 characters
THREE_KEYWORD_PARAGRAPH = (
    "Responsibilities: design, build and run backend services for the payment "
    "platform, take part in on-call rotations and improve our deployment tooling. "
    "Requirements: solid experience with Python and relational databases, comfort "
    "with code review, and a habit of writing clear documentation for the team."
)

# No keywords at all
FILLER = "Lorem ipsum dolor sit amet. " * 40


def filler(length: int) -> str:
    """Keyword-free text of exactly `length` characters (no trailing whitespace)."""
    text = FILLER[:length]
    assert len(text) == length and text == text.strip()
    return text


@pytest.fixture
def job_text():
    return JOB_TEXT


@pytest.fixture
def html_with_main_content():
    """Job description inside <main>, cookie banner outside it."""
    return f"""
    <!DOCTYPE html>
    <html>
    <head><title>Backend Engineer</title></head>
    <body>
        <nav>Home Jobs Blog</nav>
        <main><p>{JOB_TEXT}</p></main>
        <div class="banner">We use cookie files to improve your experience on this site.</div>
    </body>
    </html>
    """


@pytest.fixture
def html_with_cookie_in_main():
    """<main> qualifies except for a cookie notice; an ATS container holds the clean text."""
    return f"""
    <html>
    <body>
        <main>
            <p>{JOB_TEXT}</p>
            <p>This site uses cookie storage. Read our privacy policy.</p>
        </main>
        <div class="job-description"><p>{JOB_TEXT}</p></div>
    </body>
    </html>
    """


@pytest.fixture
def html_with_paragraphs_only():
    """No containers at all: paragraphs separated by blank lines directly in <body>."""
    return f"""<html><body>
<p>{ONE_KEYWORD_PARAGRAPH}</p>

<p>{THREE_KEYWORD_PARAGRAPH}</p>

<p>Apply now!</p>
</body></html>"""


@pytest.fixture
def html_with_script_and_style():
    """Job keywords repeated inside <script> and <style>, real text inside <main>."""
    script_body = "var requirements = 'requirements responsibilities qualifications';\n" * 6
    style_body = ".requirements { color: red; } .experience { margin: 0; }\n" * 6
    return f"""
    <html>
    <head><style>{style_body}</style></head>
    <body>
        <main><p>{JOB_TEXT}</p><script>{script_body}</script></main>
        <style>{style_body}</style>
    </body>
    </html>
    """


@pytest.fixture
def html_with_json_ld():
    """schema.org JobPosting whose description differs from the visible <main> text."""
    posting = {
        "@context": "https://schema.org",
        "@type": "JobPosting",
        "title": "Backend Engineer",
        "description": f"<p>{THREE_KEYWORD_PARAGRAPH}</p>",
        "hiringOrganization": {"@type": "Organization", "name": "Example Corp"},
    }
    return f"""
    <html>
    <head>
        <script type="application/ld+json">{json.dumps(posting)}</script>
    </head>
    <body>
        <main><p>{JOB_TEXT}</p></main>
    </body>
    </html>
    """
