from pydantic_settings import BaseSettings
import logging
import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

_logger = logging.getLogger(__name__)

# Load .env explicitly before creating Settings
# Look for .env in the api directory (parent of the package directory)
api_dir = Path(__file__).parent.parent.parent
env_path = api_dir / ".env"

if env_path.exists():
    load_dotenv(env_path, override=True)
    _logger.info(f"Loaded .env file from: {env_path}")
else:
    # Fallback to current directory
    current_env = Path(".env")
    if current_env.exists():
        load_dotenv(current_env, override=True)
        _logger.info(f"Loaded .env file from: {current_env.absolute()}")

# Bundled source tables ship inside the package
DEFAULT_SOURCE_DIR = Path(__file__).parent.parent / "data"

# Precedence order: later tables win on lemma collisions
DEFAULT_SOURCE_ORDER = ["common_verbs", "verbs", "additional_verbs", "priority_verbs"]


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Source tables
    source_dir: str = str(DEFAULT_SOURCE_DIR)
    source_order: List[str] = list(DEFAULT_SOURCE_ORDER)

    # Load policy
    strict_load: bool = True
    allow_partial_load: bool = True
    strict_accepts_symmetry: bool = False

    # Resolution
    default_region: str = "la_general"

    # API
    api_v1_prefix: str = "/api/v1"

    # CORS
    cors_origins: list[str] = ["*"]

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    def __init__(self, **kwargs):
        # Source settings use a CONJUGADOR_ prefix in the environment
        if not kwargs.get("source_dir") and os.getenv("CONJUGADOR_SOURCE_DIR"):
            kwargs["source_dir"] = os.getenv("CONJUGADOR_SOURCE_DIR")
        if not kwargs.get("source_order") and os.getenv("CONJUGADOR_SOURCE_ORDER"):
            kwargs["source_order"] = [
                name.strip() for name in os.getenv("CONJUGADOR_SOURCE_ORDER", "").split(",") if name.strip()
            ]
        if "strict_load" not in kwargs:
            kwargs["strict_load"] = _env_bool("CONJUGADOR_STRICT_LOAD", True)
        if "allow_partial_load" not in kwargs:
            kwargs["allow_partial_load"] = _env_bool("CONJUGADOR_ALLOW_PARTIAL_LOAD", True)
        if "strict_accepts_symmetry" not in kwargs:
            kwargs["strict_accepts_symmetry"] = _env_bool("CONJUGADOR_STRICT_ACCEPTS_SYMMETRY", False)
        super().__init__(**kwargs)


# Create settings instance
settings = Settings()

# Validate the configured source directory
if not Path(settings.source_dir).is_dir():
    _logger.warning(f"Source directory does not exist: {settings.source_dir}")
