"""
ViaCEP origin configuration.

Dependencies: pydantic, pydantic_settings
System role: Outbound address-provider configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ViaCepSettings(BaseSettings):
    """ViaCEP HTTP client configuration."""

    model_config = SettingsConfigDict(
        env_prefix="VIACEP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(
        default="https://viacep.com.br/ws",
        description="ViaCEP base URL; lookups hit {base_url}/{cep}/json/",
    )
    timeout_seconds: float = Field(
        default=10.0,
        description="Total timeout for a single lookup request",
    )
