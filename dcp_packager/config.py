"""Configuration defaults, capacity limits, log levels, and .env loading.

WHY: Centralizes every configurable value so it is easy to find, update,
and override. Descriptive defaults and capacity limits are plain module
constants, not buried in the factories, so both humans and coding
agents can change them confidently.

HOW: python-dotenv loads the .env file on import. Each default can be
overridden through an environment variable of the same name.

RULES:
- Issuer and creator default to "<APP_NAME> <version>"
- Capacity limits bound reels per CPL, CPLs per PKL, PKLs per package
- LOG_LEVEL_NAMES is ordered NONE, ERROR, WARN, INFO, DEBUG
- Unknown log level names raise ValueError
- Invalid DCP_DEFAULT_KIND or DCP_LOG_LEVEL values fall back to the
  built-in default with a warning
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

from dcp_packager import __version__

# Load .env from the project root (where the script is run from)
load_dotenv()

logger = logging.getLogger(__name__)

APP_NAME = "DCP Packager"
APP_VERSION = __version__


def env_choice(name: str, default: str, choices: tuple[str, ...], upper: bool = False) -> str:
    """Read an environment variable that must be one of ``choices``.

    RULES:
    - Surrounding whitespace is stripped; case is folded to match choices
    - Unset or empty returns default
    - Any other value outside choices logs a warning and returns default
    """
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    value = raw.upper() if upper else raw.lower()
    if value not in choices:
        logger.warning(
            "Ignoring %s=%r: expected one of %s, using %s",
            name, raw, ", ".join(choices), default,
        )
        return default
    return value


# ---------------------------------------------------------------------------
# Descriptive defaults copied into every PKL / CPL / Reel
# ---------------------------------------------------------------------------

DEFAULT_ANNOTATION = os.getenv("DCP_DEFAULT_ANNOTATION", "DCP_PACKAGER")
DEFAULT_TITLE = os.getenv("DCP_DEFAULT_TITLE", "DCP_PACKAGER")

CONTENT_KINDS: tuple[str, ...] = (
    "feature",
    "trailer",
    "test",
    "teaser",
    "rating",
    "advertisement",
    "short",
    "transitional",
    "psa",
    "policy",
)
"""Content kinds accepted in a CPL."""

DEFAULT_KIND = env_choice("DCP_DEFAULT_KIND", "feature", CONTENT_KINDS)

# ---------------------------------------------------------------------------
# Capacity limits for the aggregators
# ---------------------------------------------------------------------------

MAX_REELS = int(os.getenv("DCP_MAX_REELS", "30"))
MAX_CPLS = int(os.getenv("DCP_MAX_CPLS", "5"))
MAX_PKLS = int(os.getenv("DCP_MAX_PKLS", "1"))

# ---------------------------------------------------------------------------
# Log levels
# ---------------------------------------------------------------------------

LOG_LEVEL_NAMES: tuple[str, ...] = ("NONE", "ERROR", "WARN", "INFO", "DEBUG")

_LOG_LEVELS: dict[str, int] = {
    "NONE": logging.CRITICAL + 10,
    "ERROR": logging.ERROR,
    "WARN": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

DEFAULT_LOG_LEVEL = env_choice("DCP_LOG_LEVEL", "WARN", LOG_LEVEL_NAMES, upper=True)


def map_log_level(name: str) -> int:
    """Map a log level name from LOG_LEVEL_NAMES to a ``logging`` level.

    RULES:
    - Case-insensitive
    - NONE silences everything, including errors
    - Raises ValueError for names outside LOG_LEVEL_NAMES
    """
    key = name.strip().upper()
    if key not in _LOG_LEVELS:
        raise ValueError(
            "Unknown log level '{}'. Expected one of: {}".format(
                name, ", ".join(LOG_LEVEL_NAMES)
            )
        )
    return _LOG_LEVELS[key]
