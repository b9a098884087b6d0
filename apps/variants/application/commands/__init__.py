"""Application Commands."""

from variants.application.commands.resolve_variant import ResolveVariantCommand

__all__ = ["ResolveVariantCommand"]
