"""
Target filename construction.

Titles and makers are used verbatim: nothing is escaped, so a path
separator coming back from a catalog ends up in the name as-is.
"""

from .models import Work

ARCHIVE_EXTENSION = ".zip"


def build_filename(work: Work) -> str:
    """Return ``[maker] title.zip`` for a work."""
    return "[" + work.maker + "] " + work.title + ARCHIVE_EXTENSION
