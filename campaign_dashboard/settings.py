import os
from dataclasses import dataclass
from dotenv import load_dotenv

DEFAULT_API_BASE_URL = "https://mixo-fe-backend-task.vercel.app"
DEFAULT_RATE_LIMIT = "120 per minute"


@dataclass(frozen=True)
class Settings:
    # Campaign API
    api_base_url: str
    api_timeout: float

    # Flask
    secret_key: str

    # YAML display config
    config_path: str

    # Logging
    log_level: str
    log_dir: str

    # flask-limiter, applied to each route separately
    rate_limit: str = DEFAULT_RATE_LIMIT


def get_settings() -> Settings:
    load_dotenv()  # reads .env if present

    return Settings(
        api_base_url=os.getenv("CAMPAIGN_API_BASE_URL", DEFAULT_API_BASE_URL).strip().rstrip("/"),
        api_timeout=float(os.getenv("CAMPAIGN_API_TIMEOUT", "10")),
        secret_key=os.getenv("DASHBOARD_SECRET_KEY", "dev-secret-key-change-in-production"),
        config_path=os.getenv("DASHBOARD_CONFIG_PATH", "configs/dashboard.yaml"),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        log_dir=os.getenv("LOG_DIR", "logs"),
        rate_limit=os.getenv("DASHBOARD_RATE_LIMIT", DEFAULT_RATE_LIMIT),
    )
