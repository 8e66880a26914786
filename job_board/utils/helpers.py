"""Helper utilities for the job board client."""

import re

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def is_valid_email(value: str) -> bool:
    """True if value looks like a single well-formed email address."""
    if not value:
        return False
    return bool(EMAIL_PATTERN.match(value.strip()))


def html_to_text(html_text: str) -> str:
    """Strip tags and collapse whitespace. Used to detect rich-text fields that are visually empty."""
    if not html_text:
        return ""
    text = re.sub(r"<[^>]+>", " ", html_text)
    text = text.replace("&nbsp;", " ")
    return re.sub(r"\s+", " ", text).strip()


def is_blank_html(html_text: str) -> bool:
    """Rich-text editors submit "<p><br></p>" for an empty field; treat that as blank."""
    return not html_to_text(html_text)


def strip_unsafe_html(html_text: str) -> str:
    """
    Remove active content from API-provided HTML before rendering it:
    script/style/iframe/object/embed blocks, inline on* handlers and javascript: URLs.
    This narrows the XSS surface of trusted rich-text fields; it is not a full sanitizer.
    """
    if not html_text:
        return ""

    text = html_text
    for tag in ("script", "style", "iframe", "object", "embed", "noscript"):
        text = re.sub(rf"<{tag}[^>]*>[\s\S]*?</{tag}\s*>", "", text, flags=re.IGNORECASE)
        text = re.sub(rf"<{tag}[^>]*/?>", "", text, flags=re.IGNORECASE)

    # Inline event handlers: onclick="...", onerror='...', <img/onload=foo>
    text = re.sub(r"[\s/]+on[a-z]+\s*=\s*(\"[^\"]*\"|'[^']*'|[^\s>]+)", "", text, flags=re.IGNORECASE)
    # javascript: URLs in href/src, quoted or not
    text = re.sub(
        r"(href|src)\s*=\s*([\"'])\s*javascript:[^\"']*\2",
        r'\1="#"',
        text,
        flags=re.IGNORECASE,
    )
    text = re.sub(r"(href|src)\s*=\s*javascript:[^\s>]*", r'\1="#"', text, flags=re.IGNORECASE)
    return text
