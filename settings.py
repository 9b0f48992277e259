from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ALLOWED_ORIGINS = [
    "https://youngachievers-2.onrender.com",
    "http://localhost:3000",
    "http://localhost:5173",
]

REQUIRED_ENV = ("EMAIL_USER", "EMAIL_PASS", "ADMIN_EMAIL")


class Settings(BaseSettings):
    """
    Process-wide configuration, read once at startup from the environment
    and an optional .env file. Variable names are the upper-cased field names.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    email_user: str = Field("", description="Mail account identity, also used as sender address")
    email_pass: str = Field("", description="Mail account secret")
    admin_email: str = Field("", description="Recipient of every inquiry")
    port: int = Field(5000, description="Listening port")
    smtp_host: str = Field("smtp.gmail.com")
    smtp_port: int = Field(587)
    from_name: str = Field("Young Achievers Website", description="Sender display name")
    allowed_origins: str = Field("", description="Comma-separated origin override")
    log_level: str = Field("INFO")

    @property
    def origin_allow_list(self) -> List[str]:
        if self.allowed_origins:
            return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]
        return list(DEFAULT_ALLOWED_ORIGINS)

    def missing_required(self) -> List[str]:
        values = {
            "EMAIL_USER": self.email_user,
            "EMAIL_PASS": self.email_pass,
            "ADMIN_EMAIL": self.admin_email,
        }
        return [name for name in REQUIRED_ENV if not values[name]]


@lru_cache()
def get_settings() -> Settings:
    return Settings()
