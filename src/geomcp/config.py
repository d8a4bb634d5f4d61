"""Settings — environment-derived configuration, built once per process.

Credentials are optional at construction time. Accessors such as
:meth:`Settings.require_tavily` raise :class:`ConfigurationError` only when a
tool actually needs the value.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from geomcp.errors import ConfigurationError


class WordPressCredentials(BaseModel):
    """Resolved WordPress endpoint and application-password login."""

    model_config = ConfigDict(frozen=True)

    url: str
    user: str
    password: str


class ModelSettings(BaseModel):
    """Resolved chat-model endpoint for the content optimizer."""

    model_config = ConfigDict(frozen=True)

    model: str
    api_key: str
    api_base: str

    @property
    def litellm_model(self) -> str:
        """Model name in LiteLLM's ``provider/model`` convention.

        Bare names are routed through the OpenAI-compatible adapter so the
        request goes to ``{api_base}/chat/completions``.
        """
        if "/" in self.model:
            return self.model
        return f"openai/{self.model}"


class Settings(BaseModel):
    """Process configuration passed explicitly to every component.

    Usage::

        settings = Settings.from_env()
        key = settings.require_tavily()
    """

    model_config = ConfigDict(frozen=True)

    tavily_api_key: str | None = None
    tavily_base_url: str = "https://api.tavily.com"
    wordpress_url: str | None = None
    wordpress_user: str | None = None
    wordpress_app_password: str | None = None
    deepseek_api_key: str | None = None
    deepseek_base_url: str = "https://api.deepseek.com"
    deepseek_model: str = "deepseek-chat"
    http_timeout: float = 60.0
    log_level: str = "INFO"

    @field_validator(
        "tavily_api_key",
        "wordpress_url",
        "wordpress_user",
        "wordpress_app_password",
        "deepseek_api_key",
        mode="before",
    )
    @classmethod
    def _blank_is_absent(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Read settings from *environ* (defaults to :data:`os.environ`)."""
        env = os.environ if environ is None else environ
        data: dict[str, object] = {
            "tavily_api_key": env.get("TAVILY_API_KEY"),
            "wordpress_url": env.get("WORDPRESS_URL"),
            "wordpress_user": env.get("WORDPRESS_USER"),
            "wordpress_app_password": env.get("WORDPRESS_APP_PASSWORD"),
            "deepseek_api_key": env.get("DEEPSEEK_API_KEY"),
        }
        optional = {
            "tavily_base_url": "TAVILY_BASE_URL",
            "deepseek_base_url": "DEEPSEEK_BASE_URL",
            "deepseek_model": "DEEPSEEK_MODEL",
            "http_timeout": "GEO_HTTP_TIMEOUT",
            "log_level": "GEO_LOG_LEVEL",
        }
        for field, variable in optional.items():
            value = env.get(variable)
            if value:
                data[field] = value
        return cls.model_validate(data)

    def require_tavily(self) -> str:
        if self.tavily_api_key is None:
            raise ConfigurationError("TAVILY_API_KEY")
        return self.tavily_api_key

    def require_wordpress(self) -> WordPressCredentials:
        if self.wordpress_url is None:
            raise ConfigurationError("WORDPRESS_URL")
        if self.wordpress_user is None:
            raise ConfigurationError("WORDPRESS_USER")
        if self.wordpress_app_password is None:
            raise ConfigurationError("WORDPRESS_APP_PASSWORD")
        return WordPressCredentials(
            url=self.wordpress_url.rstrip("/"),
            user=self.wordpress_user,
            password=self.wordpress_app_password,
        )

    def require_model(self) -> ModelSettings:
        if self.deepseek_api_key is None:
            raise ConfigurationError("DEEPSEEK_API_KEY")
        return ModelSettings(
            model=self.deepseek_model,
            api_key=self.deepseek_api_key,
            api_base=self.deepseek_base_url.rstrip("/"),
        )
