"""Reading time estimation for blog posts."""

from math import ceil

from blogapi.configs import WORDS_PER_MINUTE


def calculate_word_count(text: str | None) -> int:
    """
    Count words in text.

    A word is any maximal run of non-whitespace characters.

    Args:
        text: Text to count, may be empty or None

    Returns:
        int: Word count
    """
    if not text:
        return 0
    return len(text.split())


def calculate_reading_time(text: str | None) -> int:
    """
    Estimate reading time in whole minutes, rounded up.

    Args:
        text: Text to estimate, may be empty or None

    Returns:
        int: Reading time in minutes (minimum 1)
    """
    word_count = calculate_word_count(text)
    return max(1, ceil(word_count / WORDS_PER_MINUTE))


def blog_reading_text(description: str | None, body: str | None) -> str:
    """Join description and body the way reading time is measured for a blog."""
    return f"{description or ''} {body or ''}"
