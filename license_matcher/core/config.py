"""
Settings loaded from the environment (or a `.env` file).

LOG_LEVEL is not applied on import: callers that want it call `configure_logging()`.
"""

import os
import logging
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()

# policy chain, evaluated left to right
MATCH_POLICIES = os.getenv("MATCH_POLICIES", "definition,harvest")

# harvest tool whose latest snapshot is compared
HARVEST_TOOL = os.getenv("HARVEST_TOOL", "clearlydefined")

# logging, applied by configure_logging()
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")


def policy_names(raw: Optional[str] = None) -> List[str]:
    """
    Splits a comma-separated policy list (defaults to MATCH_POLICIES) into clean names.
    """
    value = MATCH_POLICIES if raw is None else raw
    return [name.strip().lower() for name in value.split(",") if name.strip()]


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Applies LOG_LEVEL (or the given level) to the package logger and returns it.
    """
    logger = logging.getLogger("license_matcher")
    logger.setLevel((level or LOG_LEVEL).upper())
    return logger
