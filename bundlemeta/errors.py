"""Exceptions raised while reading bundle manifests.

Every error derives from :class:`BundleMetaError` and also from the builtin
exception a caller would naturally catch for that failure (``ValueError``,
``OSError``, ``RuntimeError``), so callers can use either.
"""

from typing import Optional


class BundleMetaError(Exception):
    """Base class for all bundlemeta errors."""


class InvalidBundleReferenceError(BundleMetaError, ValueError):
    """Raised when the caller passes no bundle location at all."""


class ResourceAccessError(BundleMetaError, OSError):
    """Raised when a bundle or its manifest cannot be found, mounted or read.

    Attributes:
        location: Resolved location of the resource that failed, if known.
    """

    def __init__(self, message: str, *, location: Optional[str] = None):
        super().__init__(message)
        self.location = location


class ManifestParseError(BundleMetaError, ValueError):
    """Raised for malformed manifest text. The parser does not recover.

    Attributes:
        line_number: 1-based line where the problem was found, if known.
    """

    def __init__(self, message: str, *, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class IncompleteDescriptorError(BundleMetaError, RuntimeError):
    """Raised when a descriptor is built without its required fields."""
