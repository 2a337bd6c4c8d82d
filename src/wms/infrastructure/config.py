import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Resolve the default data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]

DEFAULT_LOG_LEVEL = "WARNING"


def log_level_from(raw: str | None) -> str:
    """Normalise a level name, falling back to WARNING for unknown names."""
    level = (raw or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


class Settings:
    data_file: Path = Path(
        os.getenv("WMS_DATA_FILE", str(_PROJECT_ROOT / "data" / "wms.json"))
    )
    log_level: str = log_level_from(os.getenv("WMS_LOG_LEVEL"))


settings = Settings()
