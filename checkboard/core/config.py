# checkboard/core/config.py
from pathlib import Path

from pydantic import ConfigDict, field_validator
from pydantic_settings import BaseSettings

from checkboard.core.constants import CheckStatus

# Locate the .env file relative to the project root
BASE_DIR = Path(__file__).resolve().parent.parent.parent
ENV_FILE = BASE_DIR / ".env"


class Settings(BaseSettings):
    model_config = ConfigDict(env_file=str(ENV_FILE), extra="ignore")

    # Application
    PROJECT_NAME: str = "Checkboard"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"
    LOG_LEVEL: str = "INFO"

    # Check policies
    TRAINING_VALIDITY_DAYS: int = 365
    MFA_NO_EVIDENCE_STATUS: CheckStatus = CheckStatus.UNKNOWN

    @field_validator("TRAINING_VALIDITY_DAYS")
    @classmethod
    def validity_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("TRAINING_VALIDITY_DAYS must be a positive number of days")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


settings = Settings()
