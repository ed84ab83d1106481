# -------------------------------------------------------------
# Settings: environment variables, optionally from a .env file
# -------------------------------------------------------------

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_MODEL = "gemini-1.5-flash"
DEFAULT_DATA_DIR = Path(os.path.expanduser("~")) / ".bodymetrics"
STORAGE_KEY = "body_metrics_pro_data"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str]
    data_dir: Path
    model_name: str
    log_level: str

    @property
    def storage_path(self) -> Path:
        return self.data_dir / f"{STORAGE_KEY}.json"


def get_settings() -> Settings:
    load_dotenv()  # loads from .env into os.environ
    data_dir = os.getenv("BODYMETRICS_DATA_DIR")
    return Settings(
        api_key=os.getenv("API_KEY") or os.getenv("GEMINI_API_KEY"),
        data_dir=Path(data_dir).expanduser() if data_dir else DEFAULT_DATA_DIR,
        model_name=os.getenv("BODYMETRICS_MODEL", DEFAULT_MODEL),
        log_level=os.getenv("BODYMETRICS_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
