"""요청 검증 관련 예외."""

from variants.application.common.exceptions.base import ApplicationError


class InvalidImageRequestError(ApplicationError):
    """이미지 해시 또는 확장자가 없는 요청."""

    def __init__(self, url_path: str) -> None:
        self.url_path = url_path
        super().__init__(f"Invalid request without image hash or extension {url_path}")
