"""Application Exceptions."""

from variants.application.common.exceptions.base import ApplicationError
from variants.application.common.exceptions.collaborator import (
    CollaboratorError,
    ImageTransformError,
    ObjectStoreError,
)
from variants.application.common.exceptions.request import InvalidImageRequestError

__all__ = [
    "ApplicationError",
    "CollaboratorError",
    "ImageTransformError",
    "InvalidImageRequestError",
    "ObjectStoreError",
]
