# calc_config.py
"""
Settings for the calculator command line tool.

Values come from the environment (optionally seeded from a .env file):
    CALC_LOG_LEVEL     logging level name, default WARNING
    CALC_PROMPT        prompt shown when reading from a terminal, default "> "
    CALC_FLOAT_FORMAT  format() spec for the result, default "" (plain str())
"""

import logging
import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, field_validator

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class CalcSettings(BaseModel):
    """Model for calculator settings."""
    log_level: str = "WARNING"
    prompt: str = "> "
    float_format: str = ""

    @field_validator('log_level')
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator('float_format')
    @classmethod
    def float_format_must_be_valid(cls, v: str) -> str:
        try:
            format(1.5, v)
        except ValueError:
            raise ValueError(f"Invalid float format: {v!r}")
        return v

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    def format_value(self, value: float) -> str:
        if not self.float_format:
            return str(value)
        return format(value, self.float_format)


def load_settings() -> CalcSettings:
    """
    Builds settings from the environment after loading the nearest .env file
    (searched upward from the working directory) if there is one.

    Raises:
        pydantic.ValidationError: if a variable holds an invalid value
    """
    load_dotenv(find_dotenv(usecwd=True))
    values = {}
    for field, var in (
        ("log_level", "CALC_LOG_LEVEL"),
        ("prompt", "CALC_PROMPT"),
        ("float_format", "CALC_FLOAT_FORMAT"),
    ):
        raw = os.getenv(var)
        if raw is not None:
            values[field] = raw
    return CalcSettings(**values)
