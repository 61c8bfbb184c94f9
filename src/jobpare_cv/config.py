"""
Configuration settings for jobpare-cv.

Values come from the environment (or a local .env file). Defaults work
out of the box; override them when Chromium lives somewhere unusual or the
PDF step needs more time.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from jobpare_cv.exceptions import ConfigError

load_dotenv()

ENV_NAMES = {
    "pdf_timeout": "JOBPARE_PDF_TIMEOUT",
    "chrome_path": "JOBPARE_CHROME_PATH",
    "headless": "JOBPARE_HEADLESS",
    "storage_dir": "JOBPARE_STORAGE_DIR",
    "data_dir": "JOBPARE_DATA_DIR",
}


class Settings(BaseModel):
    # seconds allowed for the whole PDF conversion before it is abandoned
    pdf_timeout: float = Field(default=30.0, gt=0)
    chrome_path: Optional[str] = None
    headless: bool = True
    storage_dir: Path = Path.home() / ".jobpare-cv"
    data_dir: Path = Path("cv-data")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in ("0", "false", "no", "off", "")


def get_settings() -> Settings:
    """
    Build the settings from the current environment.

    Raises:
        ConfigError: If an environment variable holds an invalid value.
    """
    values = {"headless": _env_flag(ENV_NAMES["headless"], True)}
    for field in ("pdf_timeout", "chrome_path", "storage_dir", "data_dir"):
        if os.getenv(ENV_NAMES[field]):
            values[field] = os.getenv(ENV_NAMES[field])

    try:
        return Settings(**values)
    except ValidationError as e:
        problems = []
        for err in e.errors():
            field = err["loc"][0]
            problems.append(f"{ENV_NAMES[field]}={values.get(field)!r}: {err['msg']}")
        raise ConfigError("Invalid configuration: " + "; ".join(problems)) from e
