from pydantic_settings import BaseSettings
from dotenv import load_dotenv
import os
from pydantic import ConfigDict

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    # Database settings
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./catalog.db")
    DB_ECHO: bool = os.getenv("DB_ECHO", "false").lower() == "true"

    # Other settings
    DEBUG: bool = os.getenv("DEBUG", "true").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "info")
    LOG_FILE: str = os.getenv("LOG_FILE", "catalog.log")

    # Offer window rules
    OFFER_ENFORCE_DURATION_BOUNDS: bool = (
        os.getenv("OFFER_ENFORCE_DURATION_BOUNDS", "true").lower() == "true"
    )
    OFFER_MIN_DURATION_DAYS: int = int(os.getenv("OFFER_MIN_DURATION_DAYS", "1"))
    OFFER_MAX_DURATION_DAYS: int = int(os.getenv("OFFER_MAX_DURATION_DAYS", "365"))

    # Authorization
    ELEVATED_ROLES: str = os.getenv("ELEVATED_ROLES", "ADMIN")  # comma separated
    CONCEAL_FORBIDDEN: bool = os.getenv("CONCEAL_FORBIDDEN", "true").lower() == "true"

    @property
    def elevated_roles(self) -> set:
        """Roles allowed to mutate offers of stores they do not own"""
        return {
            role.strip().upper() for role in self.ELEVATED_ROLES.split(",") if role.strip()
        }

    model_config = ConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


settings = Settings()
