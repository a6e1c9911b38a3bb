"""
Identifier Matcher
Classifies archive filenames by catalog and extracts the content identifier.

    d_123456.zip        -> FANZA  (d_123456)
    RJ123456 foo.zip    -> DLsite (RJ123456)
"""

import logging

from .filename import ARCHIVE_EXTENSION
from .models import Catalog, CatalogMatch, FileCandidate

logger = logging.getLogger(__name__)

IDENTIFIER_LENGTH = 8


class IdentifierMatcher:
    """Prefix/suffix based filename classifier."""

    # Checked in order, first hit wins
    PREFIXES = (
        ("d_", Catalog.FANZA),
        ("RJ", Catalog.DLSITE),
    )

    def __init__(self, extension: str = ARCHIVE_EXTENSION, identifier_length: int = IDENTIFIER_LENGTH):
        self.extension = extension
        self.identifier_length = identifier_length

    def match(self, name: str) -> CatalogMatch | None:
        """Classify a base name, or return None if it is not a candidate."""
        if not name.endswith(self.extension):
            return None
        # The identifier must not overlap the extension
        if len(name) < self.identifier_length + len(self.extension):
            return None

        for prefix, catalog in self.PREFIXES:
            if name.startswith(prefix):
                return CatalogMatch(catalog=catalog, identifier=name[:self.identifier_length])
        return None

    def match_candidate(self, candidate: FileCandidate) -> CatalogMatch | None:
        """Like match(), but directories are never candidates."""
        if candidate.is_dir:
            return None
        result = self.match(candidate.name)
        if result is None:
            logger.debug(f"Skipping {candidate.path}")
        return result


_default_matcher = IdentifierMatcher()


def match_filename(name: str) -> CatalogMatch | None:
    """Classify a filename with the default matcher."""
    return _default_matcher.match(name)
