"""HTTP Controllers."""

from variants.presentation.http.controllers.health import router as health_router
from variants.presentation.http.controllers.variant import router as variant_router

__all__ = ["health_router", "variant_router"]
