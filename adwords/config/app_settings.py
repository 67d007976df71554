from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, JsonConfigSettingsSource, SettingsConfigDict

from adwords.util.paths import get_config_path


class TransportSettings(BaseModel):
    """HTTP transport settings shared by every service client."""

    insecure_skip_verify: bool = Field(default=False)
    dial_timeout: float = Field(default=30.0, gt=0, description="Connect timeout in seconds")
    user_agent: str = Field(default="gowsdl/0.1")


class BasicAuthSettings(BaseModel):
    """HTTP Basic credentials. Used only when a login is set."""

    login: Optional[str] = Field(default=None)
    password: str = Field(default="")


class WsseSettings(BaseModel):
    """WS-Security UsernameToken credentials. Attached only when a username is set."""

    username: Optional[str] = Field(default=None)
    password: str = Field(default="")
    must_understand: str = Field(default="")


class AdWordsHeaderSettings(BaseModel):
    """Values for the AdWords RequestHeader. Attached only when a developer token is set."""

    developer_token: Optional[str] = Field(default=None)
    client_customer_id: Optional[str] = Field(default=None)
    user_agent: Optional[str] = Field(default=None)
    validate_only: Optional[bool] = Field(default=None)
    partial_failure: Optional[bool] = Field(default=None)


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")


# Compute config path at module load time
_config_path = get_config_path()


class AppSettings(BaseSettings):
    transport: TransportSettings = Field(default_factory=TransportSettings)
    auth: BasicAuthSettings = Field(default_factory=BasicAuthSettings)
    wsse: WsseSettings = Field(default_factory=WsseSettings)
    adwords: AdWordsHeaderSettings = Field(default_factory=AdWordsHeaderSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        json_file=_config_path,
        json_file_encoding="utf-8",
        env_prefix="ADWORDS_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        return (
            init_settings,
            env_settings,
            JsonConfigSettingsSource(settings_cls),
            dotenv_settings,
            file_secret_settings,
        )


app_config = AppSettings()
