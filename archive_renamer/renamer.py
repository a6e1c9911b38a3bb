#!/usr/bin/env python3
"""
Archive Renamer
Renames doujin archives to "[maker] title.zip" using catalog metadata.

Features:
- FANZA (DMM affiliate API, page-scrape fallback) and DLsite lookups
- Shallow or recursive directory walks
- Dry-run by default, prints the planned rename for every archive
"""

import logging
import os
from pathlib import Path

from .dlsite_client import DLsiteClient
from .exceptions import IncompleteMetadataError, RenameError
from .fanza_client import FanzaClient
from .matcher import IdentifierMatcher
from .models import Catalog, CatalogCredentials, CatalogMatch, FileCandidate, RenameResult, Work
from .walker import Walker, WalkDepth

logger = logging.getLogger(__name__)


class ArchiveRenamer:
    """
    Walks paths and renames every matching archive.

    Usage:
        renamer = ArchiveRenamer(credentials, execute=True)
        results = renamer.run(["/downloads"])

    Files are handled strictly one at a time. Any lookup or rename error
    propagates to the caller and ends the run.
    """

    def __init__(
        self,
        credentials: CatalogCredentials,
        walker: Walker | None = None,
        execute: bool = False,
        require_complete_metadata: bool = True,
        fanza_client: FanzaClient | None = None,
        dlsite_client: DLsiteClient | None = None,
        matcher: IdentifierMatcher | None = None
    ):
        """
        Args:
            credentials: DMM API credentials for FANZA lookups
            walker: Traversal policy (shallow if None)
            execute: Perform renames; otherwise only print them
            require_complete_metadata: Fail on an empty title or maker
            fanza_client: FANZA client (created if None)
            dlsite_client: DLsite client (created if None)
            matcher: Filename classifier (default rules if None)
        """
        self.credentials = credentials
        self.walker = walker or Walker(WalkDepth.SHALLOW)
        self.execute = execute
        self.require_complete_metadata = require_complete_metadata
        self.fanza = fanza_client or FanzaClient()
        self.dlsite = dlsite_client or DLsiteClient()
        self.matcher = matcher or IdentifierMatcher()

    def lookup(self, match: CatalogMatch) -> Work:
        """Resolve a matched identifier against its catalog."""
        if match.catalog == Catalog.FANZA:
            work = self.fanza.lookup(match.identifier, self.credentials)
        else:
            work = self.dlsite.lookup(match.identifier)

        if self.require_complete_metadata and not work.is_complete:
            raise IncompleteMetadataError(match.identifier, work.title, work.maker)
        return work

    def process_candidate(self, candidate: FileCandidate) -> RenameResult | None:
        """
        Match, look up and (optionally) rename a single entry.

        Returns:
            RenameResult, or None if the entry is not a catalog archive
        """
        match = self.matcher.match_candidate(candidate)
        if match is None:
            return None

        work = self.lookup(match)
        new_name = work.filename
        new_path = candidate.path.parent / new_name
        print(f"{candidate.path} -> {new_name}")

        result = RenameResult(
            original_path=candidate.path,
            new_name=new_name,
            new_path=new_path,
            catalog=match.catalog,
            identifier=match.identifier,
        )
        if self.execute:
            try:
                os.rename(candidate.path, new_path)
            except OSError as e:
                raise RenameError(str(candidate.path), str(new_path), str(e)) from e
            logger.info(f"Renamed: {candidate.name} -> {new_name}")
            result.renamed = True
        return result

    def rename_path(self, path: str | Path) -> list[RenameResult]:
        """
        Process one command-line path.

        A path that does not exist is logged and skipped.
        """
        path = Path(os.path.normpath(path))
        if not path.exists():
            logger.warning(f"{path} does not exist")
            return []

        results: list[RenameResult] = []

        def visit(candidate: FileCandidate) -> None:
            result = self.process_candidate(candidate)
            if result is not None:
                results.append(result)

        self.walker.walk(path, visit)
        return results

    def run(self, paths: list[str | Path]) -> list[RenameResult]:
        """Process every path in order."""
        results: list[RenameResult] = []
        for path in paths:
            results.extend(self.rename_path(path))

        action = "Renamed" if self.execute else "Resolved"
        logger.info(f"{action} {len(results)} archive(s)")
        return results
