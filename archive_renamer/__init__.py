"""
Archive Renamer
Renames FANZA / DLsite archives using catalog metadata
"""
__version__ = "1.0.0"

from .models import (
    Catalog,
    CatalogCredentials,
    CatalogMatch,
    FileCandidate,
    RenameResult,
    Work,
)
from .filename import build_filename
from .matcher import IdentifierMatcher, match_filename
from .walker import Walker, WalkDepth
from .fanza_client import FanzaClient
from .dlsite_client import DLsiteClient
from .renamer import ArchiveRenamer

# Exceptions
from .exceptions import (
    ArchiveRenamerError,
    ConfigurationError,
    CredentialsError,
    WalkError,
    RenameError,
    CatalogRequestError,
    CatalogParseError,
    PatternMismatchError,
    IncompleteMetadataError,
)

__all__ = [
    # Version
    "__version__",
    # Models
    "Catalog",
    "CatalogCredentials",
    "CatalogMatch",
    "FileCandidate",
    "RenameResult",
    "Work",
    # Components
    "build_filename",
    "IdentifierMatcher",
    "match_filename",
    "Walker",
    "WalkDepth",
    "FanzaClient",
    "DLsiteClient",
    "ArchiveRenamer",
    # Exceptions
    "ArchiveRenamerError",
    "ConfigurationError",
    "CredentialsError",
    "WalkError",
    "RenameError",
    "CatalogRequestError",
    "CatalogParseError",
    "PatternMismatchError",
    "IncompleteMetadataError",
]
