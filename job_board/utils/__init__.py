"""Utility exports."""

from .format import format_money, format_salary
from .helpers import html_to_text, is_blank_html, is_valid_email, strip_unsafe_html
from .logger import get_logger

__all__ = [
    "get_logger",
    "format_money",
    "format_salary",
    "html_to_text",
    "is_blank_html",
    "is_valid_email",
    "strip_unsafe_html",
]
