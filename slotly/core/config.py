from pydantic import Field
from pydantic_settings import BaseSettings
from typing import Optional, List
import os
import secrets

class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Slotly"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    TESTING: bool = os.getenv("TESTING", "0").lower() in ("1", "true", "t", "yes", "y")
    API_PREFIX: str = "/api"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Security
    # Generated once per process unless provided; tokens die with the process.
    SECRET_KEY: str = Field(default_factory=lambda: secrets.token_hex(64))
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    BCRYPT_ROUNDS: int = 10

    # Bootstrap
    SEED_DEMO_DATA: bool = False
    PROVIDER_USERNAME: Optional[str] = None
    PROVIDER_PASSWORD: Optional[str] = None

    # CORS / hosts
    ALLOWED_ORIGINS: List[str] = ["*"]
    ALLOWED_HOSTS: List[str] = ["localhost", "127.0.0.1", "*.localhost", "testserver"]

    @property
    def has_provider_account(self) -> bool:
        """Whether a provider account should be bootstrapped at startup."""
        return bool(self.PROVIDER_USERNAME and self.PROVIDER_PASSWORD)

    class Config:
        env_file = ".env"
        case_sensitive = True

# Create settings instance
settings = Settings()
