"""Environment-driven settings for the lookup service."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8787
DEFAULT_LEGISLATORS_PATH = Path("congress-legislators") / "legislators-current.yaml"
DEFAULT_KANSAS_CSV_PATH = Path("dist") / "kansas" / "kansas.csv"

# Geography collection holding state senate districts in Census geocoder
# responses. The key is tied to the Census data vintage.
DEFAULT_SENATE_GEOGRAPHY = "2024 State Legislative Districts - Upper"


@dataclass(frozen=True)
class Settings:
    """Runtime configuration."""

    key: str | None = None
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    legislators_path: Path = DEFAULT_LEGISLATORS_PATH
    kansas_csv_path: Path = DEFAULT_KANSAS_CSV_PATH
    senate_geography: str = DEFAULT_SENATE_GEOGRAPHY
    log_level: str = "INFO"


def load_settings(env_file: str | None = None) -> Settings:
    """
    Read settings from the environment.

    A ``.env`` file is loaded first when present; variables already set in
    the environment take precedence over it.
    """
    load_dotenv(env_file)

    key = os.environ.get("KEY") or None
    if key is None:
        logger.error("KEY is not set; request keys will only be checked for presence")

    return Settings(
        key=key,
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", DEFAULT_PORT)),
        legislators_path=Path(os.environ.get("LEGISLATORS_PATH", DEFAULT_LEGISLATORS_PATH)),
        kansas_csv_path=Path(os.environ.get("KANSAS_CSV_PATH", DEFAULT_KANSAS_CSV_PATH)),
        senate_geography=os.environ.get("KANSAS_SENATE_GEOGRAPHY", DEFAULT_SENATE_GEOGRAPHY),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    )
