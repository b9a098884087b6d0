"""Image Transform Engine Adapters."""

from variants.infrastructure.imaging.pillow_transformer import PillowImageTransformer

__all__ = ["PillowImageTransformer"]
