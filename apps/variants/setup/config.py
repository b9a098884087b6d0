"""
Runtime Settings (FastAPI Official Pattern)

환경변수 기반 동적 설정 - 배포 환경별로 변경됨
Reference: https://fastapi.tiangolo.com/advanced/settings/
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict

from variants.application.ports import CachePolicy
from variants.infrastructure.storage import ObjectStoreConfig

ONE_YEAR_SECONDS = 365 * 24 * 60 * 60


class Settings(BaseSettings):
    """Runtime configuration for the Variants service."""

    app_name: str = "Image Variants API"
    environment: str = "dev"

    # S3 버킷 선택: s3_bucket > lower_bucket (lower_tier) > buckets_by_region[aws_region]
    lower_tier: bool = Field(
        True,
        description="Use the lower (staging) bucket instead of the production one",
    )
    aws_region: str = Field(
        "us-east-1",
        validation_alias=AliasChoices("VARIANT_AWS_REGION", "AWS_REGION"),
    )
    s3_bucket: str | None = Field(
        None,
        description="Explicit bucket override",
    )
    lower_bucket: str = "staging-image-variants"
    lower_region: str = "us-east-1"
    buckets_by_region: dict[str, str] = Field(default_factory=dict)
    s3_endpoint_url: str | None = Field(
        None,
        description="Custom S3 endpoint (MinIO, LocalStack)",
    )

    cdn_domain: HttpUrl | None = Field(
        None,
        description="Redirect target domain; defaults to the bucket domain",
    )

    # 파생 이미지 캐시 메타데이터
    cache_control: str = "no-transform, max-age=31536000, s-maxage=2592000, immutable"
    expires_seconds: int = Field(ONE_YEAR_SECONDS, ge=60)
    retention_tagging: str = "x-cvt-retention=30"

    # OpenTelemetry
    otel_enabled: bool = False
    otel_exporter_otlp_endpoint: str = "http://localhost:4317"
    otel_sampling_rate: float = Field(1.0, ge=0.0, le=1.0)

    model_config = SettingsConfigDict(
        env_prefix="VARIANT_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
        populate_by_name=True,
    )

    def object_store_config(self) -> ObjectStoreConfig:
        """버킷/리전 선택 정책을 적용한 Object Store 설정."""
        if self.s3_bucket:
            return ObjectStoreConfig(
                bucket=self.s3_bucket,
                region=self.aws_region,
                endpoint_url=self.s3_endpoint_url,
            )
        if self.lower_tier:
            return ObjectStoreConfig(
                bucket=self.lower_bucket,
                region=self.lower_region,
                endpoint_url=self.s3_endpoint_url,
            )
        return ObjectStoreConfig(
            bucket=self.buckets_by_region.get(self.aws_region, ""),
            region=self.aws_region,
            endpoint_url=self.s3_endpoint_url,
        )

    def cache_policy(self) -> CachePolicy:
        return CachePolicy(
            cache_control=self.cache_control,
            expires_seconds=self.expires_seconds,
            tagging=self.retention_tagging,
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached Settings instance (FastAPI pattern)."""
    return Settings()
