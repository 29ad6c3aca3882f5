"""Configuration for Apple ID token verification.

Settings may come from a YAML file, from constructor arguments, or from
environment variables with the ``APPLEID_`` prefix. Environment variables take
precedence, so that a deployment can override a shared configuration file.
"""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import Self, override

import yaml
from pydantic import AliasChoices, Field
from pydantic.alias_generators import to_camel
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)
from safir.logging import LogLevel, Profile, configure_logging
from safir.pydantic import HumanTimedelta

from .constants import HTTP_TIMEOUT, ISSUER, JWKS_URI
from .models.client import AppleIDClient

__all__ = ["Config"]


class Config(BaseSettings):
    """Configuration for Apple ID token verification."""

    model_config = SettingsConfigDict(
        alias_generator=to_camel, extra="forbid", populate_by_name=True
    )

    client_id: str | None = Field(
        None,
        title="Client ID",
        description=(
            "Services ID or bundle ID of the relying party. If set, it is"
            " the default expected audience of ID tokens."
        ),
        validation_alias=AliasChoices("APPLEID_CLIENT_ID", "clientId"),
    )

    issuer: str = Field(
        ISSUER,
        title="Expected issuer",
        description="Expected issuer claim (``iss``) of the ID token",
        validation_alias=AliasChoices("APPLEID_ISSUER", "issuer"),
    )

    jwks_url: str = Field(
        JWKS_URI,
        title="Key set URL",
        description="URL from which to retrieve the signing key set",
        validation_alias=AliasChoices("APPLEID_JWKS_URL", "jwksUrl"),
    )

    http_timeout: HumanTimedelta = Field(
        timedelta(seconds=HTTP_TIMEOUT),
        title="HTTP timeout",
        description="Timeout for retrieving the key set",
        validation_alias=AliasChoices(
            "APPLEID_HTTP_TIMEOUT", "httpTimeout"
        ),
    )

    log_level: LogLevel = Field(
        LogLevel.INFO,
        title="Log level",
        validation_alias=AliasChoices("APPLEID_LOG_LEVEL", "logLevel"),
    )

    profile: Profile = Field(
        Profile.production,
        title="Logging profile",
        description="Use ``development`` for human-readable logs",
        validation_alias=AliasChoices("APPLEID_PROFILE", "profile"),
    )

    @override
    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Override the sources of settings.

        Deactivate :file:`.env` and secret file support and let environment
        variables override init parameters, which come from the YAML
        configuration file.
        """
        return (env_settings, init_settings)

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Construct a Config object from a configuration file.

        Parameters
        ----------
        path
            Path to the configuration file in YAML.

        Returns
        -------
        Config
            The corresponding `Config` object.
        """
        with path.open("r") as f:
            return cls(**(yaml.safe_load(f) or {}))

    @property
    def client(self) -> AppleIDClient | None:
        """The configured client, if a client ID was set."""
        if not self.client_id:
            return None
        return AppleIDClient(identifier=self.client_id)

    def configure_logging(self) -> None:
        """Configure logging based on the configuration."""
        configure_logging(
            name="appleid", profile=self.profile, log_level=self.log_level
        )
