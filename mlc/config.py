"""Application configuration"""

from dataclasses import dataclass, field
from datetime import timedelta
from os import getenv
from pathlib import Path


@dataclass
class Config:
    app_name: str = "mlc"
    app_version: str = "0.1.0"

    # Optional database URL for Postgres or other databases
    database_url_env: str | None = field(default=getenv("MLC_DATABASE_URL", None))

    # the place allowed to issue new cards
    admin_place: str = field(default=getenv("MLC_ADMIN_PLACE", "admin"))

    session_cookie: str = field(default=getenv("MLC_SESSION_COOKIE", "session"))
    session_ttl_hours: int = field(
        default=int(getenv("MLC_SESSION_TTL_HOURS", "24"))
    )
    # cookies get the Secure flag only when served over TLS
    tls_enabled: bool = field(
        default=getenv("MLC_TLS_ENABLED", "").lower() in ("1", "true", "yes")
    )

    @property
    def session_ttl(self) -> timedelta:
        return timedelta(hours=self.session_ttl_hours)

    @property
    def database_path(self) -> Path:
        return Path("./data/") / Path(f"{self.app_name}.db")

    @property
    def database_url(self) -> str:
        # Use provided DATABASE_URL if available, else fall back to SQLite file
        if self.database_url_env:
            return self.database_url_env
        return f"sqlite:///{self.database_path}"


def get_config():
    return Config()
