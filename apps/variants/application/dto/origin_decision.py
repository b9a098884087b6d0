"""Origin Decision DTO."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DecisionKind(str, Enum):
    CACHE_HIT = "cache_hit"
    FALLBACK = "fallback"
    TRANSFORMED = "transformed"


@dataclass(frozen=True, slots=True)
class OriginDecision:
    """Orchestrator 결과.

    - CACHE_HIT: 이미 저장된 파생 이미지를 오리진으로 사용
    - FALLBACK: 원본 이미지를 오리진으로 사용
    - TRANSFORMED: 방금 변환/저장한 바이트를 직접 반환
    """

    kind: DecisionKind
    served_key: str
    content_type: str | None = None
    payload: bytes | None = None

    @classmethod
    def cache_hit(cls, served_key: str) -> "OriginDecision":
        return cls(kind=DecisionKind.CACHE_HIT, served_key=served_key)

    @classmethod
    def fallback(cls, served_key: str) -> "OriginDecision":
        return cls(kind=DecisionKind.FALLBACK, served_key=served_key)

    @classmethod
    def transformed(cls, served_key: str, content_type: str, payload: bytes) -> "OriginDecision":
        return cls(
            kind=DecisionKind.TRANSFORMED,
            served_key=served_key,
            content_type=content_type,
            payload=payload,
        )

    @property
    def has_payload(self) -> bool:
        return self.kind is DecisionKind.TRANSFORMED
