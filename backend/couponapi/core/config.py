from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "Coupon API"
    DEBUG: bool = False
    APP_DATABASE_DSN: str = "sqlite:////tmp/coupons.db"

    # Mount point of the coupon router
    API_PREFIX: str = "/api/v1"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def version(self) -> str:
        try:
            return package_version("coupon-api")
        except PackageNotFoundError:
            return "0.0.0"


settings = Settings()
