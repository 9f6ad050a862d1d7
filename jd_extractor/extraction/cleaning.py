"""Markup sanitizing and text normalization."""

import re

from bs4 import BeautifulSoup, Tag

from jd_extractor.constants import NON_CONTENT_TAGS

_HORIZONTAL_WS = re.compile(r"[^\S\n]+")
_NEWLINE_RUN = re.compile(r"\s*\n\s*")
_BLANK_LINE = re.compile(r"\n[^\S\n]*\n\s*")


def parse_html(html: str) -> BeautifulSoup:
    """Parse HTML into a fresh tree. Every extraction call gets its own."""
    return BeautifulSoup(html, "lxml")


def sanitize(soup: BeautifulSoup) -> BeautifulSoup:
    """Remove script and style elements, including their text, in place."""
    for tag in soup.find_all(NON_CONTENT_TAGS):
        tag.decompose()
    return soup


def clean_text(text: str) -> str:
    """
    Normalize whitespace.

    Runs of spaces/tabs become one space, runs of newlines (and the
    whitespace around them) become one newline, ends are trimmed.
    Newlines are kept, so the result is not a single line: where
    single-line collapsing would leave a space, this leaves a newline.
    Lengths are the same either way.
    """
    if not text:
        return ""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _HORIZONTAL_WS.sub(" ", text)
    text = _NEWLINE_RUN.sub("\n", text)
    return text.strip()


def element_text(element: Tag) -> str:
    """Cleaned text of an element."""
    return clean_text(element.get_text())


def body_text(soup: BeautifulSoup) -> str:
    """Raw (uncleaned) text of <body>, or the whole document without one."""
    body = soup.body
    return (body or soup).get_text()


def split_paragraphs(text: str) -> list[str]:
    """Split raw text on blank lines and clean each non-empty paragraph."""
    paragraphs = []
    for chunk in _BLANK_LINE.split(text):
        cleaned = clean_text(chunk)
        if cleaned:
            paragraphs.append(cleaned)
    return paragraphs
