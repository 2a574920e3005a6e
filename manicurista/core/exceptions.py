"""
Custom exceptions for the application.
Centralized error taxonomy shared by services and controllers.
"""

from typing import Optional


class ValidationError(ValueError):
    """
    Exception raised when a request or draft fails validation.
    No mutation is applied when this is raised.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class NotFoundError(LookupError):
    """Exception raised when an entity id does not exist."""

    def __init__(self, resource: str, entity_id):
        super().__init__(f"{resource} {entity_id} not found")
        self.resource = resource
        self.entity_id = entity_id


class ImportFormatError(ValueError):
    """
    Exception raised when a bulk import yields no usable rows
    or the uploaded file cannot be read.
    """

    pass


class TextGenerationError(RuntimeError):
    """
    Exception raised by the text-generation collaborator on any remote failure.
    Services convert it into a localized fallback message.
    """

    pass
