"""
Domain errors raised by the presentation core.

Every error carries an ErrorKind so the application layer can turn it into
an Err result without inspecting message strings.
"""

from typing import Optional

from presentation_service.domain_core.result import ErrorKind


class DomainError(Exception):
    """Base class for presentation domain errors."""

    kind: ErrorKind = ErrorKind.STORAGE_ERROR

    def __init__(self, message: str, kind: Optional[ErrorKind] = None):
        self.message = message
        if kind is not None:
            self.kind = kind
        super().__init__(self.message)


class ValidationError(DomainError):
    """Raised when input fails shape, length or presence constraints."""

    kind = ErrorKind.VALIDATION_ERROR


class DuplicateTitleError(DomainError):
    """Raised when a presentation with the same title already exists."""

    kind = ErrorKind.DUPLICATE_TITLE

    def __init__(self, title: str):
        self.title = title
        super().__init__("The presentation with the given title already exists.")


class NotFoundError(DomainError):
    """Raised when the referenced presentation does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, title: str):
        self.title = title
        super().__init__("The presentation with the given title was not found")


class SlideIndexError(DomainError):
    """Raised when a slide index is malformed or outside the current bounds."""

    kind = ErrorKind.INDEX_OUT_OF_RANGE

    def __init__(self, index):
        self.index = index
        super().__init__("The slide with the given index was not found")


class StorageError(DomainError):
    """Raised when the document store is unreachable or rejects an operation."""

    kind = ErrorKind.STORAGE_ERROR

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Storage error during {operation}: {reason}")
