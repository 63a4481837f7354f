"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Collaborators receive Settings at construction; nothing reads os.environ directly

Design Decisions:
    - Defaults for every non-secret setting: the app boots with only WEBHOOK_SECRET,
      ANTHROPIC_API_KEY and SMS_RESPONSE_URL set
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Webhook
    webhook_secret: str = "change-me"
    port: int = 3000

    # Anthropic
    anthropic_api_key: str = "sk-ant-placeholder"
    anthropic_max_retries: int = 3
    anthropic_timeout_seconds: int = 120
    anthropic_base_delay_ms: int = 1000
    anthropic_max_delay_ms: int = 60_000

    # Agent
    agent_model: str = "claude-sonnet-4-5"
    agent_max_turns: int = Field(10, ge=1)
    agent_max_tokens: int = 2048
    agent_run_retries: int = Field(2, ge=0)
    # TODO: pick the newest pinned megathread of the subreddit instead of a fixed URL
    latest_megathread_url: str = (
        "https://www.reddit.com/r/asheville/comments/1qrmyqn/"
        "jan_2026_snow_storm_megathread/"
    )

    # Thread fetch
    user_agent: str = "Disaster Comms Agent/1.0"
    http_timeout_seconds: float = 30.0

    # SMS relay
    sms_response_url: str = ""
    sms_max_length: int = Field(125, ge=1, le=150)
    sms_max_messages: int = Field(9, ge=1, le=9)
    sms_pacing_ms: int = Field(500, ge=0)

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
