"""
Input Sanitization Utilities

Strips markup from submitted admin values before they are stored. Values are
stored as plain text; templates escape them on output.
"""

import bleach
from html import unescape
from typing import Optional
import re


# Percent-encoded octets left behind in pasted values
PERCENT_OCTETS = re.compile(r'%[a-fA-F0-9]{2}')

# Script and style elements are dropped with their contents
SCRIPT_STYLE_ELEMENTS = re.compile(r'<(script|style)[^>]*?>.*?</\1\s*>', re.IGNORECASE | re.DOTALL)


def strip_all_tags(text: str) -> str:
    """
    Remove every tag, dropping script and style contents entirely.

    bleach escapes the text it keeps; the result is unescaped back to plain
    text so it is not encoded twice when rendered.
    """
    text = SCRIPT_STYLE_ELEMENTS.sub('', text)
    return unescape(bleach.clean(text, tags=[], strip=True))


def sanitize_text_field(text: Optional[str]) -> str:
    """
    Strip all HTML tags and return a single line of plain text.
    Used for submitted option values such as gating tags.

    Args:
        text: The submitted value

    Returns:
        Plain text with tags, octets and redundant whitespace removed
    """
    if text is None:
        return ""

    cleaned = strip_all_tags(text)
    cleaned = PERCENT_OCTETS.sub('', cleaned)

    # Collapse line breaks, tabs and runs of spaces
    cleaned = re.sub(r'\s+', ' ', cleaned).strip()

    return cleaned


def filter_nohtml(text: Optional[str]) -> str:
    """
    Strip all HTML tags but keep line breaks.
    Sanitizer for free-text customizer messages.

    Args:
        text: The message text

    Returns:
        Message text with every tag stripped
    """
    if text is None:
        return ""

    return strip_all_tags(text)
