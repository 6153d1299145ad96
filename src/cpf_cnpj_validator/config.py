from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env if present
load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off")


@dataclass(frozen=True)
class Settings:
    # reject non-digit characters before doing any arithmetic
    strict_digits: bool = _env_flag("CPF_CNPJ_STRICT_DIGITS", True)
    log_level: str = os.getenv("CPF_CNPJ_LOG_LEVEL", "WARNING")


settings = Settings()


def configure_logging(level: str | int = settings.log_level) -> logging.Logger:
    """Attaches a single stdout handler to the package logger (idempotent)."""
    logger = logging.getLogger("cpf_cnpj_validator")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
