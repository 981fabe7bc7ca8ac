"""
Runtime settings for Logic Auditor.

Settings come from environment variables (optionally via a .env file):
- LOGIC_AUDITOR_SCENARIOS: path to a scenario YAML file
- LOGIC_AUDITOR_PAGE_TITLE: browser tab title
- LOGIC_AUDITOR_LOG_LEVEL: logging level name
"""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from logicaudit.classroom.dataset import DEFAULT_SCENARIOS_PATH


ENV_PREFIX = "LOGIC_AUDITOR_"


class AppSettings(BaseModel):
    scenarios_path: Path = DEFAULT_SCENARIOS_PATH
    page_title: str = "Logic Auditor"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_settings(env: Optional[Mapping[str, str]] = None) -> AppSettings:
    """
    Build settings from environment variables.

    Args:
        env: Variables to read (default: os.environ after loading .env)

    Returns:
        AppSettings with unset values left at their defaults
    """
    if env is None:
        load_dotenv()
        env = os.environ

    values = {}
    for field in ("scenarios", "page_title", "log_level"):
        raw = env.get(ENV_PREFIX + field.upper())
        if raw:
            key = "scenarios_path" if field == "scenarios" else field
            values[key] = raw
    return AppSettings(**values)
