"""Domain Services."""

from variants.domain.services.cache_key import derive_processed_key
from variants.domain.services.edit_parser import EditDescriptorParser

__all__ = ["EditDescriptorParser", "derive_processed_key"]
