"""CloudFront edge presentation."""

from variants.presentation.edge.origin_request import OriginRequestHandler, handler

__all__ = ["OriginRequestHandler", "handler"]
