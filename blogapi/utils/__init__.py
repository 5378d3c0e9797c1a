"""Utility helper functions."""

from blogapi.utils.helpers import get_summary, host, today_str, utc_now
from blogapi.utils.pagination import PageRequest, normalize_pagination
from blogapi.utils.reading_time import (
    blog_reading_text,
    calculate_reading_time,
    calculate_word_count,
)

__all__ = [
    "PageRequest",
    "blog_reading_text",
    "calculate_reading_time",
    "calculate_word_count",
    "get_summary",
    "host",
    "normalize_pagination",
    "today_str",
    "utc_now",
]
