from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClassifierConfig(BaseSettings):
    """Remote detection/transcription/speech/chat service configuration."""

    base_url: str = "https://voxguard.ai/api"
    api_key: SecretStr = Field(default=SecretStr(""))
    api_key_header: str = "x-api-key"
    timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Upper bound for one remote call; sessions never stay busy longer.",
    )

    model_config = SettingsConfigDict(
        env_prefix="VOXGUARD_CLASSIFIER_",
        env_file=".env",
        secrets_dir=".secrets",
        case_sensitive=False,
        extra="ignore",
    )


class SpeechConfig(BaseSettings):
    """Raw PCM layout returned by the speech synthesis endpoint."""

    sample_rate: int = Field(default=24000, ge=8000)
    channels: int = Field(default=1, ge=1, le=2)
    sample_width: int = Field(default=2, ge=1, le=4)

    model_config = SettingsConfigDict(
        env_prefix="VOXGUARD_SPEECH_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


class Settings(BaseSettings):
    """Application settings"""

    app_name: str = "VoxGuard"
    app_version: str = "1.0.4"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    log_file: str = "logs/app.log"
    session_log_file: str = "logs/sessions.log"

    # Remote service
    classifier: ClassifierConfig = Field(default_factory=ClassifierConfig)

    # Speech output
    speech: SpeechConfig = Field(default_factory=SpeechConfig)

    # CORS
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_prefix="VOXGUARD_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
