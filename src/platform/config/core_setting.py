from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Ticket Purchase Service'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Purchase rules
    MAX_TICKET_LIMIT: int = 20  # Max tickets (all types) in a single purchase

    # Unit prices per ticket type (GBP)
    ADULT_TICKET_PRICE: int = 20
    CHILD_TICKET_PRICE: int = 10
    INFANT_TICKET_PRICE: int = 0

    @field_validator('MAX_TICKET_LIMIT')
    @classmethod
    def validate_max_ticket_limit(cls, v: int) -> int:
        if v < 1:
            raise ValueError('MAX_TICKET_LIMIT must be at least 1')
        return v

    @field_validator('ADULT_TICKET_PRICE', 'CHILD_TICKET_PRICE', 'INFANT_TICKET_PRICE')
    @classmethod
    def validate_ticket_price(cls, v: int) -> int:
        if v < 0:
            raise ValueError('Ticket price cannot be negative')
        return v


settings = Settings()  # type: ignore
