from pydantic import Field, AliasChoices
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Read env from process + optionally from .env
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    # App
    ENV: str = Field(default="dev", validation_alias=AliasChoices("ENV", "env"))
    APP_NAME: str = Field(default="agromart_ussd", validation_alias=AliasChoices("APP_NAME", "app_name"))
    LOG_LEVEL: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL", "log_level"))
    LOG_JSON: bool = Field(default=False, validation_alias=AliasChoices("LOG_JSON", "log_json"))
    HOST: str = Field(default="0.0.0.0", validation_alias=AliasChoices("HOST", "host"))
    PORT: int = Field(default=4001, validation_alias=AliasChoices("PORT", "USSD_PORT", "port", "ussd_port"))

    # USSD
    USSD_SERVICE_CODE: str = Field(default="*123#", validation_alias=AliasChoices("USSD_SERVICE_CODE", "ussd_service_code"))

    # Sessions
    SESSION_BACKEND: str = Field(default="memory", validation_alias=AliasChoices("SESSION_BACKEND", "session_backend"))
    REDIS_URL: str = Field(
        default="redis://localhost:6379/0",
        validation_alias=AliasChoices("REDIS_URL", "redis_url"),
    )
    SESSION_TTL_SECONDS: int = Field(default=3600, validation_alias=AliasChoices("SESSION_TTL_SECONDS", "session_ttl_seconds"))

    # KYC submission (empty URL = log only)
    KYC_SUBMIT_URL: str = Field(default="", validation_alias=AliasChoices("KYC_SUBMIT_URL", "kyc_submit_url"))
    KYC_SUBMIT_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        validation_alias=AliasChoices("KYC_SUBMIT_TIMEOUT_SECONDS", "kyc_submit_timeout_seconds"),
    )


settings = Settings()
