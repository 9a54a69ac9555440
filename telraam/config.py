"""
Configuration management using Pydantic Settings
"""
from pydantic import SecretStr
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Client settings loaded from environment variables"""

    # API token from https://telraam.net/en/admin/mijn-eigen-telraam/tokens, override via TELRAAM_TOKEN
    telraam_token: Optional[SecretStr] = None

    # Telraam API
    base_url: str = "https://telraam-api.net"
    api_version: str = "v1"
    timeout: float = 30.0  # seconds, passed straight to httpx

    # Application
    log_level: str = "WARNING"

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def token(self) -> Optional[str]:
        """Plain token value, or None when not configured"""
        if self.telraam_token is None:
            return None
        return self.telraam_token.get_secret_value()


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    return settings


def reset_settings() -> Settings:
    """Reload settings from the environment (used by tests)"""
    global settings
    settings = Settings()
    return settings
