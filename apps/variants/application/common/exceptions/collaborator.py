"""외부 협력자(Object Store, Transform Engine) 실패.

"Not found"는 예외가 아니라 정상 분기이므로 여기에 포함되지 않습니다.
"""

from variants.application.common.exceptions.base import ApplicationError


class CollaboratorError(ApplicationError):
    """외부 협력자 호출 실패."""


class ObjectStoreError(CollaboratorError):
    """Object Store 호출 실패 (not found 제외)."""

    def __init__(self, operation: str, key: str, reason: str) -> None:
        self.operation = operation
        self.key = key
        super().__init__(f"Object store {operation} failed for {key}: {reason}")


class ImageTransformError(CollaboratorError):
    """이미지 변환 실패 (코덱 오류 등)."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Image transform failed: {reason}")
