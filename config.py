"""Configuration for the JobInsight service, read from the environment."""
import os
import logging
from functools import lru_cache
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Settings:
    """Application configuration."""

    def __init__(self):
        # LLM
        self.gemini_api_key = os.getenv("GEMINI_API_KEY", "")
        self.gemini_api_url = os.getenv(
            "GEMINI_API_URL",
            "https://generativelanguage.googleapis.com/v1beta/models/gemini-1.5-flash:generateContent",
        )

        # Job posting relay
        self.cors_proxy_url = os.getenv("CORS_PROXY_URL", "https://corsproxy.io/?")
        self.http_timeout = float(os.getenv("HTTP_TIMEOUT", "60"))

        # Backend-as-a-service (auth)
        self.supabase_url = os.getenv("SUPABASE_URL", "")
        self.supabase_anon_key = os.getenv("SUPABASE_ANON_KEY", "")
        self.auth_disabled = _flag("AUTH_DISABLED", "false")

        # Storage
        is_hf = os.environ.get("SPACE_ID") is not None
        self.base_dir = os.getenv("BASE_DIR", "/tmp/data" if is_hf else "data")
        self.database_url = os.getenv(
            "DATABASE_URL", f"sqlite:///{os.path.join(self.base_dir, 'jobinsight.db')}"
        )

        # Extraction
        self.use_document_parsers = _flag("USE_DOCUMENT_PARSERS", "true")

        # Server / client
        self.host = os.getenv("HOST", "127.0.0.1")
        self.port = int(os.getenv("PORT", "8000"))
        self.api_url = os.getenv("API_URL", f"http://{self.host}:{self.port}")
        self.log_level = os.getenv("LOG_LEVEL", "INFO")


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str = None) -> None:
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
