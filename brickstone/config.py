"""Configuration loading and validation using Pydantic."""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from brickstone.infrastructure.config import YAMLConfigLoader

DEFAULT_PUBLIC_URL = "https://www.brickstonerealtygroups.com"

# Environment variables that override file settings (secrets stay out of YAML)
ENV_SMTP_HOST = "BRICKSTONE_SMTP_HOST"
ENV_SMTP_USER = "BRICKSTONE_SMTP_USER"
ENV_SMTP_PASSWORD = "BRICKSTONE_SMTP_PASSWORD"


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)


class SiteConfig(BaseModel):
    """Public site identity and trusted origins."""

    name: str = "Brickstone Realty Group"
    public_url: str = DEFAULT_PUBLIC_URL
    allowed_origins: list[str] = Field(default_factory=list)

    @field_validator("public_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("allowed_origins")
    @classmethod
    def validate_origins(cls, v: list[str]) -> list[str]:
        """Origins must be scheme://host[:port] without a trailing slash."""
        origins = []
        for origin in v:
            origin = origin.strip().rstrip("/")
            if not origin.startswith(("http://", "https://")):
                raise ValueError(f"Origin must start with http:// or https://: {origin}")
            origins.append(origin)
        return origins

    @model_validator(mode="after")
    def default_origins(self) -> "SiteConfig":
        if not self.allowed_origins:
            self.allowed_origins = [self.public_url]
        return self


class ContactConfig(BaseModel):
    """Contact form delivery and quota settings."""

    recipient: str = "info@brickstonerealty.com"
    sender: str = "no-reply@brickstonerealtygroups.com"
    sender_name: str = "Brickstone Realty Website"
    fallback_email: str = "info@brickstonerealty.com"
    max_sends: int = Field(default=3, ge=1)
    window_seconds: int = Field(default=600, ge=1)


class MailConfig(BaseModel):
    """Outbound mail transport."""

    transport: Literal["smtp", "log"] = "log"
    host: str = "localhost"
    port: int = Field(default=587, ge=1, le=65535)
    username: str | None = None
    password: str | None = None
    starttls: bool = True
    timeout: float = Field(default=10.0, gt=0)


class SessionConfig(BaseModel):
    """Visitor session cookie settings."""

    cookie_name: str = "brickstone_session"
    ttl_seconds: int = Field(default=7200, ge=60)
    sweep_interval_seconds: float = Field(default=60.0, gt=0)
    always_secure: bool = False


class Config(BaseModel):
    """Application configuration."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    site: SiteConfig = Field(default_factory=SiteConfig)
    contact: ContactConfig = Field(default_factory=ContactConfig)
    mail: MailConfig = Field(default_factory=MailConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)


def apply_env_overrides(data: dict, environ: dict[str, str] | None = None) -> dict:
    """Overlay SMTP settings from the environment onto raw config data."""
    env = os.environ if environ is None else environ
    mail_data = dict(data.get("mail") or {})

    if env.get(ENV_SMTP_HOST):
        mail_data["host"] = env[ENV_SMTP_HOST]
    if env.get(ENV_SMTP_USER):
        mail_data["username"] = env[ENV_SMTP_USER]
    if env.get(ENV_SMTP_PASSWORD):
        mail_data["password"] = env[ENV_SMTP_PASSWORD]

    return {**data, "mail": mail_data}


def load_config(
    config_path: Path | str = "config.yaml",
    environ: dict[str, str] | None = None,
) -> Config:
    """Load configuration from YAML file and environment."""
    data = YAMLConfigLoader(config_path).load()
    return Config.model_validate(apply_env_overrides(data, environ))
