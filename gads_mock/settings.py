import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    # Server
    host: str
    port: int
    env: str                            # development | production | test

    # Logging
    log_level: str
    log_dir: Optional[str]

    # Optional YAML file replacing the built-in seed accounts
    accounts_config: Optional[str]

    # flask-limiter default limits
    rate_limits: List[str]


def get_settings() -> Settings:
    load_dotenv()  # reads .env if present

    rate_limits = os.getenv("RATE_LIMITS", "1000 per hour")

    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3000")),
        env=os.getenv("APP_ENV", "development").strip().lower(),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        log_dir=os.getenv("LOG_DIR", "logs") or None,
        accounts_config=os.getenv("ACCOUNTS_CONFIG") or None,
        rate_limits=[r.strip() for r in rate_limits.split(";") if r.strip()],
    )
