"""
Retitle — Backend Configuration
Loads .env automatically, then reads all settings from environment variables.
"""

import os
import re
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_env_path = Path(__file__).resolve().parent.parent.parent / ".env"
load_dotenv(_env_path)

DEFAULT_REPLACEMENT_REGEX = r"[\W]"


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""
    host: str
    port: int
    debug: bool
    replacement_regex: str
    plugin_config_path: str
    store_path: str
    metadata_filename: str


def _load_config() -> AppConfig:
    return AppConfig(
        host=os.getenv("APP_HOST", "0.0.0.0"),
        port=int(os.getenv("APP_PORT", "8000")),
        debug=os.getenv("APP_DEBUG", "false").lower() == "true",
        replacement_regex=os.getenv("RETITLE_REPLACEMENT_REGEX", DEFAULT_REPLACEMENT_REGEX),
        plugin_config_path=os.getenv(
            "RETITLE_PLUGIN_CONFIG",
            os.path.join("config", "plugin_intranda_step_updateProcessTitle.xml"),
        ),
        store_path=os.getenv("RETITLE_STORE_PATH", os.path.join("data", "processes.json")),
        metadata_filename=os.getenv("RETITLE_METADATA_FILENAME", "meta.json"),
    )


def _validate_config(cfg: AppConfig) -> None:
    """Fail fast if the replacement regex does not compile."""
    try:
        re.compile(cfg.replacement_regex)
    except re.error as exc:
        print(
            f"\n  ERROR: RETITLE_REPLACEMENT_REGEX is not a valid regular expression: {exc}\n"
            f"  Value: {cfg.replacement_regex!r}\n",
            file=sys.stderr,
        )
        sys.exit(1)


settings = _load_config()
_validate_config(settings)
