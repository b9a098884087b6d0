"""Edit request constants.

URL/쿼리 규약과 캐시 키 규약은 CDN에 이미 캐시된 객체와 호환되어야 하므로 변경 금지.
"""

DIMENSIONS_PARAM = "d"
QUALITY_PARAM = "q"
FORMAT_PARAM = "f"

HASH_SEPARATOR = "!_!"
KEY_PARAM_SEPARATOR = "_"

AUTO_WEBP_HEADER = "x-cvt-auto-convert-to-webp"
ACCEPT_HEADER = "accept"

WEBP = "webp"
WEBP_CONTENT_TYPE = "image/webp"

SUPPORTED_IMAGE_FORMATS: tuple[str, ...] = ("jpg", "jpeg", "png", WEBP, "tiff", "heif", "raw")

# 저장/Content-Type 경계에서만 적용되는 별칭
FORMAT_ALIASES = {"jpg": "jpeg"}
