"""Canonical brand assignment for free-text catalog titles."""


class BrandCanonError(Exception):
    """Base class for brand_canon errors."""


class SourceDataError(BrandCanonError):
    """Raised when a required input collection is missing or unreadable."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path
