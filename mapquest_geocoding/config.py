"""Client configuration via Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "https://www.mapquestapi.com/geocoding/v1"


class Settings(BaseSettings):
    # Get a key at https://developer.mapquest.com/user/me/apps
    mapquest_api_key: str = Field(default="", validation_alias="MAPQUEST_API_KEY")
    mapquest_base_url: str = Field(default=DEFAULT_BASE_URL, validation_alias="MAPQUEST_BASE_URL")

    # Only used by HttpxTransport.
    mapquest_timeout: float = Field(default=10.0, validation_alias="MAPQUEST_TIMEOUT")

    # Enables coordinate range checks when decoding.
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
