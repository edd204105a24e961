"""Application configuration schema."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AWSConfig(BaseModel):
    """AWS connection configuration."""

    model_config = ConfigDict(extra="forbid")

    region: Optional[str] = Field(None, description="AWS region for the Cognito API")
    profile: Optional[str] = Field(None, description="Named AWS credentials profile")
    endpoint_url: Optional[str] = Field(None, description="Override endpoint for cognito-idp")
    max_retries: int = Field(3, ge=0, le=10, description="botocore max retry attempts")
    retry_mode: Literal["legacy", "standard", "adaptive"] = Field(
        "standard", description="botocore retry mode"
    )
    connect_timeout: int = Field(5, gt=0, description="Connection timeout in seconds")
    read_timeout: int = Field(10, gt=0, description="Read timeout in seconds")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field("INFO", description="Log level")
    file_path: Optional[str] = Field(None, description="Optional log file path")
    console_enabled: bool = Field(True, description="Log to stderr")
    format: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log record format",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level


class AppConfig(BaseModel):
    """Top-level plugin configuration."""

    model_config = ConfigDict(extra="ignore")

    aws: AWSConfig = Field(default_factory=AWSConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
