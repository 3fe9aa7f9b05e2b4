import re
from datetime import timedelta
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

# Grammar of the `ms` package, which jsonwebtoken uses to read EXPIRES_IN:
# "7d", "2 hours", "1.5h", "90 minutes"; a bare number is milliseconds.
_DURATION_UNITS = {
    "milliseconds": 0.001, "millisecond": 0.001, "msecs": 0.001, "msec": 0.001, "ms": 0.001,
    "seconds": 1, "second": 1, "secs": 1, "sec": 1, "s": 1,
    "minutes": 60, "minute": 60, "mins": 60, "min": 60, "m": 60,
    "hours": 3600, "hour": 3600, "hrs": 3600, "hr": 3600, "h": 3600,
    "days": 86400, "day": 86400, "d": 86400,
    "weeks": 604800, "week": 604800, "w": 604800,
    "years": 31557600, "year": 31557600, "yrs": 31557600, "yr": 31557600, "y": 31557600,
}
_DURATION_RE = re.compile(
    r"^((?:\d+)?\.?\d+) *(" + "|".join(sorted(_DURATION_UNITS, key=len, reverse=True)) + r")?$",
    re.IGNORECASE,
)


def parse_duration(value: str) -> timedelta:
    """Parse a token lifetime like "7d", "2 hours" or "3600000" (milliseconds) into a timedelta."""
    match = _DURATION_RE.match(str(value).strip())
    if not match:
        raise ValueError(f"Invalid duration: {value!r}")
    amount, unit = match.groups()
    lifetime = timedelta(seconds=float(amount) * _DURATION_UNITS[(unit or "ms").lower()])
    if lifetime <= timedelta(0):
        raise ValueError(f"Duration must be positive: {value!r}")
    return lifetime


class Settings(BaseSettings):
    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db_name: str = "l2-assignment-06"
    mongodb_timeout_ms: int = 5000

    # Collections
    users_collection: str = "user"
    relief_goods_collection: str = "reliefgoods"
    recent_works_collection: str = "ourRecentlyWorks"

    # Auth
    # No default: startup fails when JWT_SECRET is unset or empty
    jwt_secret: str = Field(..., min_length=1)
    jwt_algorithm: str = "HS256"
    expires_in: str = "1d"
    bcrypt_rounds: int = 10

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # App
    app_name: str = "relief-goods-backend"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "*"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @field_validator("expires_in")
    @classmethod
    def validate_expires_in(cls, value: str) -> str:
        parse_duration(value)
        return value

    def get_token_lifetime(self) -> timedelta:
        return parse_duration(self.expires_in)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
        extra="ignore"
    )


settings = Settings()
