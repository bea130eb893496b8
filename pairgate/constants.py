"""Shared constants for pairgate.

List file format, config search paths and environment variable names live here.
No magic strings in other modules — import from here.
"""

import os

# ─── List file format ────────────────────────────────────────────────────────

# Separator between submission names on one line of a pair list file.
PAIR_SEPARATOR: str = ";"

# Encoding used to read pair list files.
LIST_FILE_ENCODING: str = "utf-8"

# ─── Config ──────────────────────────────────────────────────────────────────

# Current supported config version
SUPPORTED_CONFIG_VERSION: int = 1

# Versions accepted by load_config()
SUPPORTED_VERSIONS: frozenset[int] = frozenset({1})

# Filter modes accepted in filter.mode / PAIRGATE_FILTER_MODE
FILTER_MODE_NONE: str = "none"
FILTER_MODE_ALLOW: str = "allow"
FILTER_MODE_DENY: str = "deny"
VALID_FILTER_MODES: frozenset[str] = frozenset({FILTER_MODE_NONE, FILTER_MODE_ALLOW, FILTER_MODE_DENY})

VALID_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Default config search paths (PAIRGATE_CONFIG env var prepended at runtime)
DEFAULT_CONFIG_PATHS: list[str] = [
    ".pairgate/config.yaml",
    os.path.expanduser("~/.pairgate/config.yaml"),
]

# ─── Environment variables ───────────────────────────────────────────────────

ENV_CONFIG: str = "PAIRGATE_CONFIG"
ENV_FILTER_MODE: str = "PAIRGATE_FILTER_MODE"
ENV_LIST_PATH: str = "PAIRGATE_LIST_PATH"
ENV_LOG_LEVEL: str = "PAIRGATE_LOG_LEVEL"
