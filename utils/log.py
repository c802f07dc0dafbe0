# utils/log.py
from __future__ import annotations
import logging
from typing import Optional

from utils.config import get_settings


def setup_logging(level: Optional[str] = None) -> None:
    name = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
