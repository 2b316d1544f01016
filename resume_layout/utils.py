"""Utilities Module

Helper functions for résumé rendering.
"""
import os
import re
from typing import Iterable, Optional


def format_year_range(start: int, end: Optional[int] = None) -> str:
    """
    Format a history entry's date range.

    Args:
        start: Start year
        end: End year, or None for an ongoing entry

    Returns:
        Date range string

    Examples:
        >>> format_year_range(2019, 2022)
        '2019 - 2022'
        >>> format_year_range(2019, None)
        '2019 - Present'
    """
    if end is None:
        return f"{start} - Present"
    return f"{start} - {end}"


def join_present(parts: Iterable[Optional[str]], separator: str) -> str:
    """
    Join the non-empty parts of a line, skipping blanks and None.

    Args:
        parts: Candidate strings (e.g. email, phone, address)
        separator: Text placed between parts

    Returns:
        Joined string, empty if no part has content
    """
    return separator.join(part.strip() for part in parts if part and part.strip())


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted string (e.g., "45.3 KB")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def clean_filename(filename: str) -> str:
    """
    Clean a name for use as the exported PDF's file name.

    Args:
        filename: Original name (usually the person's name)

    Returns:
        Cleaned filename without extension
    """
    # Remove path components
    filename = os.path.basename(filename)

    # Remove extension (names like "Dr. Jane Doe" keep their dots)
    name = filename[:-4] if filename.lower().endswith('.pdf') else filename

    # Replace invalid characters
    name = re.sub(r'[^\w\s-]', '', name)

    # Replace spaces with underscores
    name = re.sub(r'\s+', '_', name.strip())

    # Limit length
    if len(name) > 50:
        name = name[:50]

    return name or 'resume'
