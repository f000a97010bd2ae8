from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="JALWA_",
    )

    app_name: str = "Jalwa Assistant"
    environment: str = "local"
    log_level: str = "INFO"

    catalog_path: str | None = None
    reply_delay_ms: int = 800
    fuzzy_threshold: float = 0.5
    chef_name: str = "Mayur Naik"
    max_utterance_length: int = 1000
    max_sessions: int = 1000

    rate_limit_enabled: bool = True
    chat_rate_limit: str = "30/minute"
    voice_rate_limit: str = "10/minute"

    retry_max_attempts: int = 4
    retry_backoff_initial: float = 0.5
    retry_backoff_max: float = 8.0

    # Speech-to-text settings
    openai_api_key: str | None = None
    whisper_model: str = "whisper-1"
    voice_language: str = "en"


settings = Settings()
