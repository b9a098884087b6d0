"""도메인 예외."""

from variants.domain.exceptions.base import DomainError
from variants.domain.exceptions.edit import MalformedKeyError, UnsupportedFormatError

__all__ = [
    "DomainError",
    "MalformedKeyError",
    "UnsupportedFormatError",
]
