"""
Data types shared by the matcher, the catalog clients and the renamer.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class Catalog(str, Enum):
    """Catalog an archive belongs to."""
    FANZA = "fanza"
    DLSITE = "dlsite"


@dataclass(frozen=True)
class CatalogMatch:
    """Result of classifying a filename."""
    catalog: Catalog
    identifier: str


@dataclass
class Work:
    """Resolved title/maker pair for a single identifier."""
    title: str
    maker: str

    @property
    def filename(self) -> str:
        from .filename import build_filename
        return build_filename(self)

    @property
    def is_complete(self) -> bool:
        return bool(self.title) and bool(self.maker)


class CatalogCredentials(BaseModel):
    """DMM affiliate API credentials, read from settings.json."""

    model_config = ConfigDict(frozen=True)

    api_id: str
    affiliate_id: str


@dataclass
class FileCandidate:
    """A visited filesystem entry."""
    path: Path
    name: str
    is_dir: bool


@dataclass
class RenameResult:
    """Outcome for one resolved archive."""
    original_path: Path
    new_name: str
    new_path: Path
    catalog: Catalog
    identifier: str
    renamed: bool = False
