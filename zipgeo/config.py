"""Application configuration via Pydantic Settings.

NOTE: Environment variable names are mapped explicitly (ZIP_CODES_PATH, etc.)
to avoid silent misconfiguration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Postal code table
    zip_codes_path: str = Field(default="", validation_alias="ZIP_CODES_PATH")
    zip_codes_delimiter: str = Field(default=",", validation_alias="ZIP_CODES_DELIMITER")
    zip_codes_encoding: str = Field(default="utf-8-sig", validation_alias="ZIP_CODES_ENCODING")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
