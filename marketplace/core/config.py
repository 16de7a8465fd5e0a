from decimal import Decimal
from functools import lru_cache
import json
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def parse_cors_origins(value: str) -> list[str]:
    if not value:
        return []

    parsed: list[str]
    raw = value.strip()
    if raw.startswith("["):
        try:
            items = json.loads(raw)
            parsed = [str(item).strip() for item in items if str(item).strip()]
        except (TypeError, ValueError):
            parsed = []
    else:
        parsed = [origin.strip() for origin in raw.split(",") if origin.strip()]

    # Preserve order and remove duplicates.
    return list(dict.fromkeys(parsed))


def parse_email_list(value: str) -> list[str]:
    return [item.strip().lower() for item in (value or "").split(",") if item.strip()]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_name: str = "Fesa Marketplace"
    environment: str = "development"
    api_v1_prefix: str = "/api/v1"
    log_level: str = "INFO"

    # Security
    secret_key: str
    jwt_algorithm: str = "HS256"
    # Unset means tokens never expire.
    access_token_expire_minutes: Optional[int] = None
    password_bcrypt_rounds: int = 12

    # Database
    database_url: str = "sqlite:///./fesa.db"
    db_pool_size: int = 5
    db_max_overflow: int = 5
    db_pool_timeout: int = 15
    db_pool_recycle: int = 1200
    db_pool_pre_ping: bool = True

    # Listings
    default_page_size: int = 10
    max_page_size: int = 100

    # Wallet
    max_deposit_amount: Decimal = Decimal("1000000")

    # Rate limiting (slowapi)
    rate_limit_enabled: bool = True

    # CORS
    cors_origins: str = "http://localhost:5173,http://localhost:3000"
    auto_create_tables: bool = True

    # Ops: the very first account becomes super-admin unless disabled. Accounts
    # listed in BOOTSTRAP_SUPER_ADMIN_EMAILS (comma-separated) are promoted at
    # startup, which is the recovery path when that account is lost.
    first_user_is_super_admin: bool = True
    bootstrap_super_admin_emails: str = ""


@lru_cache
def get_settings() -> Settings:
    return Settings()
