from enum import Enum
import functools

from pydantic_settings import BaseSettings, SettingsConfigDict


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ASKAI_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    env: Env = Env.local

    # None lets the SDK pick up OPENAI_API_KEY / OPENAI_BASE_URL itself.
    openai_api_key: str | None = None
    openai_base_url: str | None = None
    request_timeout: float = 60 * 2

    chat_model: str = "gpt-4o-mini"
    options_chat_model: str = "gpt-4o"
    options_temperature: float = 0.4
    options_max_tokens: int = 1024
    image_model: str = "dall-e-2"

    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "INFO"


@functools.cache
def get_config() -> Config:
    return Config()
