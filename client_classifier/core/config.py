"""
Configuration settings using Pydantic
Loads environment variables from .env file
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings"""

    # Server configuration
    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=8000, description="Server port")
    DEBUG: bool = Field(default=False, description="Debug mode")

    # Classification configuration
    ENABLE_CLIENT_HINTS: bool = Field(default=True, description="Use Sec-CH-UA headers when present")
    ACCEPT_CH: str = Field(
        default="Sec-CH-UA, Sec-CH-UA-Mobile, Sec-CH-UA-Platform",
        description="Client hints requested from browsers via Accept-CH"
    )
    MAX_USER_AGENT_LENGTH: int = Field(default=1024, description="User-Agent values are truncated to this length")

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = Field(default=True, description="Enable slowapi rate limits")
    RATE_LIMIT_DETECT: str = Field(default="60/minute", description="Limit for header-based detection")
    RATE_LIMIT_CLASSIFY: str = Field(default="30/minute", description="Limit for explicit classification")

    @property
    def SERVER_URL(self) -> str:
        """Get the server URL"""
        return f"http://{self.HOST if self.HOST != '0.0.0.0' else 'localhost'}:{self.PORT}"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields in .env file


# Global settings instance
settings = Settings()
