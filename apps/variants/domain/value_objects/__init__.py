"""Domain Value Objects."""

from variants.domain.value_objects.edit_descriptor import EditDescriptor
from variants.domain.value_objects.header_bag import HeaderBag
from variants.domain.value_objects.transform_spec import (
    FitMode,
    ReformatSpec,
    ResizeSpec,
    TransformSpec,
)

__all__ = [
    "EditDescriptor",
    "FitMode",
    "HeaderBag",
    "ReformatSpec",
    "ResizeSpec",
    "TransformSpec",
]
