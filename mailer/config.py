"""
Configuration Management

Pydantic-settings based configuration for the send-email Lambda.
All settings are read from environment variables (Lambda configuration).
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Variables are unprefixed and case-insensitive, matching the names
    configured on the function: EMAIL_BUCKET, SIGN, LOGO, AWS_REGION.
    """
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # Template Configuration
    sign: str = Field(
        default="",
        description="Signature text rendered under the email body",
    )
    logo: str = Field(
        default="",
        description="Logo image URL rendered in the signature block",
    )
    
    # S3 Configuration
    email_bucket: str | None = Field(
        default=None,
        description="S3 bucket holding email attachments",
    )
    s3_endpoint_url: str | None = Field(
        default=None,
        description="S3 endpoint URL (for local development)",
    )
    
    # SES Configuration
    ses_configuration_set: str | None = Field(
        default=None,
        description="SES configuration set for tracking",
    )
    ses_endpoint_url: str | None = Field(
        default=None,
        description="SES endpoint URL (for local development)",
    )
    
    # AWS Configuration
    aws_region: str = Field(
        default="ap-southeast-2",
        description="AWS region",
    )
    
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )
    
    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value
    
    @property
    def s3_config(self) -> dict:
        """S3 client configuration."""
        config = {"region_name": self.aws_region}
        if self.s3_endpoint_url:
            config["endpoint_url"] = self.s3_endpoint_url
        return config
    
    @property
    def ses_config(self) -> dict:
        """SES client configuration."""
        config = {"region_name": self.aws_region}
        if self.ses_endpoint_url:
            config["endpoint_url"] = self.ses_endpoint_url
        return config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached application settings.
    
    Used for process-wide client construction. Call get_settings.cache_clear()
    in tests after changing the environment.
    """
    return Settings()
