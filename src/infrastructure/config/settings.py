"""Application Settings"""
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    アプリケーション設定

    12-Factor App の Config 原則に従い、
    すべての設定は環境変数から取得する。
    """

    # Service
    service_name: str = "user-exhibitions"
    environment: str = "development"
    log_level: str = "INFO"

    # AWS
    aws_region: str = "us-east-1"

    # DynamoDB
    public_table: str = "PublicExhibitions"
    private_table: str = "PrivateExhibitions"
    dynamodb_endpoint_url: str | None = None  # DynamoDB Local 用

    # botocore
    max_attempts: int = 3
    connect_timeout: float = 5.0
    read_timeout: float = 10.0

    class Config:
        env_prefix = "EXHIBITIONS_"
        env_file = ".env"
        case_sensitive = False

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache()
def get_settings() -> Settings:
    """設定のシングルトンインスタンスを取得"""
    return Settings()
