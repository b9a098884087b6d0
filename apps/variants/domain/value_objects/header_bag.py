"""Header Bag Value Object.

요청 헤더를 소문자 이름 기준으로 조회하는 불변 컨테이너.
일반 매핑(FastAPI/Starlette)과 CloudFront 이벤트 형식을 모두 지원합니다.

CloudFront 형식::

    {"accept": [{"key": "Accept", "value": "image/webp,*/*"}]}
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class HeaderBag(Mapping[str, str]):
    """헤더 이름(소문자) → 첫 번째 값."""

    _values: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "HeaderBag":
        return cls({})

    @classmethod
    def from_mapping(cls, headers: Mapping[str, str] | None) -> "HeaderBag":
        if not headers:
            return cls.empty()
        values: dict[str, str] = {}
        for name, value in headers.items():
            values.setdefault(name.lower(), value if isinstance(value, str) else str(value))
        return cls(values)

    @classmethod
    def from_cloudfront(cls, headers: Mapping[str, Any] | None) -> "HeaderBag":
        if not headers:
            return cls.empty()
        values: dict[str, str] = {}
        for name, entries in headers.items():
            if not isinstance(entries, list) or not entries:
                continue
            first = entries[0]
            if isinstance(first, Mapping) and first.get("value") is not None:
                values.setdefault(name.lower(), str(first["value"]))
        return cls(values)

    def get(self, name: str, default: str = "") -> str:  # type: ignore[override]
        return self._values.get(name.lower(), default)

    def __getitem__(self, name: str) -> str:
        return self._values[name.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)
