"""Application settings, read from the environment and an optional `.env` file.

Settings cover Firestore access, the Gemini model used for document
validation, the Compras.gov.br proxy and the billing defaults.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """The typed settings of the Licitax Advisor back office."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    LOG_LEVEL: str = "INFO"

    GCP_PROJECT: str | None = None
    GCP_LOCATION: str = "us-central1"
    GCP_FIRESTORE_HOST: str | None = None
    GCP_FIRESTORE_DATABASE: str = "(default)"
    FIREBASE_SERVICE_ACCOUNT_JSON: str | None = None

    GCP_GEMINI_MODEL: str = "gemini-2.5-flash"
    GCP_GEMINI_MAX_OUTPUT_TOKENS: int = 8192

    COMPRAS_GOV_PROXY_URL: str | None = None
    HTTP_REQUEST_DELAY_SECONDS: float = 0.0
    HTTP_CONNECT_TIMEOUT_SECONDS: float = 5.0
    HTTP_READ_TIMEOUT_SECONDS: float = 30.0

    DEFAULT_DUE_DAY: int = Field(default=15, ge=1, le=31)

    @field_validator(
        "FIREBASE_SERVICE_ACCOUNT_JSON", "GCP_FIRESTORE_HOST", "GCP_PROJECT", "COMPRAS_GOV_PROXY_URL", mode="before"
    )
    @classmethod
    def blank_as_none(cls, value: str | None) -> str | None:
        """Treats empty strings coming from the environment as unset.

        Args:
            value: The raw value read from the environment.

        Returns:
            The value, or None when it is blank.
        """
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ConfigProvider:
    """Builds `Config` objects; it keeps no state of its own."""

    @staticmethod
    def get_config() -> Config:
        """Reads the settings again from the current environment.

        Returns:
            A new, validated Config object.
        """
        return Config()
