"""
Custom exception classes for Archive Renamer
Every failure surfaces as one of these and aborts the run
"""


class ArchiveRenamerError(Exception):
    """Base exception for all Archive Renamer errors"""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def to_dict(self):
        """Convert exception to dictionary for structured logging"""
        result = {"error": self.__class__.__name__, "message": self.message}
        if self.details:
            result["details"] = self.details
        return result


class ConfigurationError(ArchiveRenamerError):
    """Raised when configuration is invalid"""

    def __init__(self, config_key: str, reason: str | None = None):
        message = f"Invalid configuration: {config_key}"
        details = reason or "Please check your ARCHIVE_RENAMER_* environment variables and .env file"
        super().__init__(message, details)
        self.config_key = config_key


class CredentialsError(ArchiveRenamerError):
    """Raised when the credentials file is missing or malformed"""

    def __init__(self, path: str, reason: str | None = None):
        message = f"Invalid credentials file: {path}"
        details = reason or 'Expected a JSON object with "api_id" and "affiliate_id"'
        super().__init__(message, details)
        self.path = path


class WalkError(ArchiveRenamerError):
    """Raised when a directory cannot be listed"""

    def __init__(self, path: str, reason: str | None = None):
        message = f"Cannot walk: {path}"
        details = reason or "Please check that the path is readable"
        super().__init__(message, details)
        self.path = path


class RenameError(ArchiveRenamerError):
    """Raised when the filesystem rename fails"""

    def __init__(self, source: str, target: str, reason: str | None = None):
        message = f"Rename failed: {source} -> {target}"
        details = reason or "Please check file/directory permissions"
        super().__init__(message, details)
        self.source = source
        self.target = target


class CatalogRequestError(ArchiveRenamerError):
    """Raised when a catalog HTTP request fails"""

    def __init__(self, url: str, reason: str | None = None):
        message = f"Catalog request failed: {url}"
        details = reason or "Network error or catalog unavailable"
        super().__init__(message, details)
        self.url = url


class CatalogParseError(ArchiveRenamerError):
    """Raised when a catalog response cannot be interpreted"""

    def __init__(self, identifier: str, reason: str | None = None):
        message = f"Could not parse catalog response for: {identifier}"
        details = reason or "The catalog page structure may have changed"
        super().__init__(message, details)
        self.identifier = identifier


class PatternMismatchError(CatalogParseError):
    """Raised when the FANZA page title does not match the expected pattern"""

    def __init__(self, identifier: str, page_title: str):
        super().__init__(identifier, f"Error during pattern match: {page_title!r}")
        self.page_title = page_title


class IncompleteMetadataError(CatalogParseError):
    """Raised when a lookup yields an empty title or maker"""

    def __init__(self, identifier: str, title: str, maker: str):
        super().__init__(identifier, f"Empty field in lookup result (title={title!r}, maker={maker!r})")
        self.title = title
        self.maker = maker
