# brandforge/config.py
import os
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parent.parent
load_dotenv(ROOT_DIR / ".env")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = ("*",)
    swatch_width: int = 640
    swatch_height: int = 160


def _int_env(key, default):
    raw = os.environ.get(key)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logging.warning(f"{key}={raw!r} is not an integer, using {default}")
        return default


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    origins = os.environ.get("BRANDFORGE_CORS_ORIGINS", "*")
    return Settings(
        log_level=os.environ.get("BRANDFORGE_LOG_LEVEL", "INFO").upper(),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()) or ("*",),
        swatch_width=_int_env("BRANDFORGE_SWATCH_WIDTH", 640),
        swatch_height=_int_env("BRANDFORGE_SWATCH_HEIGHT", 160),
    )


def configure_logging(level="INFO"):
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
