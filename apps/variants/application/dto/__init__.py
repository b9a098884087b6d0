"""Application DTOs."""

from variants.application.dto.origin_decision import DecisionKind, OriginDecision

__all__ = ["DecisionKind", "OriginDecision"]
