from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path

from dotenv import load_dotenv


load_dotenv()

DEFAULT_AIRPORTS_CSV = Path(__file__).resolve().parent / "data" / "airports.csv"


@dataclass(frozen=True)
class Settings:
    airports_csv_path: str = os.getenv("AIRPORTS_CSV_PATH", str(DEFAULT_AIRPORTS_CSV))

    suggest_default_limit: int = int(os.getenv("SUGGEST_DEFAULT_LIMIT", "8"))
    search_default_limit: int = int(os.getenv("SEARCH_DEFAULT_LIMIT", "10"))
    popular_default_limit: int = int(os.getenv("POPULAR_DEFAULT_LIMIT", "20"))
    max_result_limit: int = int(os.getenv("MAX_RESULT_LIMIT", "50"))

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8000"))

    def __post_init__(self) -> None:
        # Unknown level names fall back to INFO rather than breaking app startup.
        level = (self.log_level or "").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            level = "INFO"
        object.__setattr__(self, "log_level", level)


settings = Settings()
