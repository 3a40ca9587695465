"""
Exceptions raised by the Folio content pipeline.
"""


class FolioError(Exception):
    """Base class for all Folio errors."""


class MalformedRecord(FolioError):
    """A single content record could not be parsed or is missing required fields."""

    def __init__(self, message, source=None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class MissingStore(FolioError):
    """A backing directory or catalog file does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Content store not found: {path}")


class PostNotFound(FolioError, LookupError):
    """No file-backed post matches the requested slug."""

    def __init__(self, slug):
        self.slug = slug
        super().__init__(f"Post not found: {slug}")
