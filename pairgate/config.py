"""Config loading for pairgate.

Reads `.pairgate/config.yaml` (or `~/.pairgate/config.yaml`).
Raises SystemExit on parse errors, missing `version` field or invalid values.
If no config file is found, returns defaults (no filtering, INFO logging).

Config search order:
  1. `config_path` argument (if provided — for testing or explicit override)
  2. PAIRGATE_CONFIG environment variable (if set and no `config_path`)
  3. `.pairgate/config.yaml` (working directory)
  4. `~/.pairgate/config.yaml` (home directory)
A path named by 1 or 2 that does not exist is an error, not a fallthrough.

Environment variable overrides (applied after the file):
  PAIRGATE_FILTER_MODE — overrides filter.mode
  PAIRGATE_LIST_PATH   — overrides filter.list_path
  PAIRGATE_LOG_LEVEL   — overrides logging.level

Example:

    version: 1
    filter:
      mode: deny
      list_path: collaborators.txt
    logging:
      level: INFO
      json: false
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import NoReturn, Optional, Union

import yaml

from pairgate.constants import (
    DEFAULT_CONFIG_PATHS,
    ENV_CONFIG,
    ENV_FILTER_MODE,
    ENV_LIST_PATH,
    ENV_LOG_LEVEL,
    FILTER_MODE_ALLOW,
    FILTER_MODE_NONE,
    SUPPORTED_CONFIG_VERSION,
    SUPPORTED_VERSIONS,
    VALID_FILTER_MODES,
    VALID_LOG_LEVELS,
)
from pairgate.filters.base import PassAllFilter
from pairgate.filters.list_filter import ListFilter, new_allow_list_filter, new_deny_list_filter
from pairgate.utils.logger import get_logger

logger = get_logger(__name__)


def _config_error(msg: str) -> NoReturn:
    print(f"CONFIG ERROR: {msg}", file=sys.stderr)
    raise SystemExit(1)


# ─── Dataclasses ─────────────────────────────────────────────────────────────


@dataclass
class FilterConfig:
    """Which pair filter to build.

    mode:      "none" (compare every pair) | "allow" | "deny"
    list_path: Pair list file; required for "allow" and "deny".
    """

    mode: str = FILTER_MODE_NONE
    list_path: Optional[str] = None


@dataclass
class LoggingConfig:
    level: str = "INFO"
    json: bool = False


@dataclass
class Config:
    """Root configuration object populated from .pairgate/config.yaml.

    All fields have safe defaults — pairgate runs without any config file.
    """

    version: int = SUPPORTED_CONFIG_VERSION
    filter: FilterConfig = field(default_factory=FilterConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    path: Optional[str] = None  # Path to the loaded config file

    @classmethod
    def defaults(cls) -> "Config":
        return cls()

    @classmethod
    def from_dict(cls, raw: dict, path: Optional[str] = None) -> "Config":
        """Construct Config from a parsed YAML dict.

        Merges user-supplied values onto defaults; unknown keys are ignored.
        A relative filter.list_path is resolved against the config file's directory.

        Raises:
            SystemExit(1): On an invalid filter.mode or logging.level. A missing
                           list_path is checked later, after env overrides.
        """
        # ── Filter ────────────────────────────────────────────────────────────
        filter_raw = raw.get("filter") or {}
        if not isinstance(filter_raw, dict):
            _config_error(f"'filter' must be a mapping, got {type(filter_raw).__name__}.")
        list_path = filter_raw.get("list_path")
        if list_path is not None:
            list_path = str(list_path)
            if path is not None and not os.path.isabs(os.path.expanduser(list_path)):
                list_path = os.path.join(os.path.dirname(path), list_path)
        filter_config = FilterConfig(
            mode=str(filter_raw.get("mode", FILTER_MODE_NONE)).lower(),
            list_path=list_path,
        )

        # ── Logging ───────────────────────────────────────────────────────────
        logging_raw = raw.get("logging") or {}
        if not isinstance(logging_raw, dict):
            _config_error(f"'logging' must be a mapping, got {type(logging_raw).__name__}.")
        logging_config = LoggingConfig(
            level=str(logging_raw.get("level", "INFO")).upper(),
            json=bool(logging_raw.get("json", False)),
        )

        config = cls(
            version=raw.get("version", SUPPORTED_CONFIG_VERSION),
            filter=filter_config,
            logging=logging_config,
            path=path,
        )
        validate_config(config, require_list_path=False)
        return config


# ─── Config loading ──────────────────────────────────────────────────────────


def load_config(config_path: Optional[str] = None, require_list_path: bool = True) -> Config:
    """Load and validate pairgate configuration.

    If no file is found on the default search paths, returns default Config
    (not an error). A path named explicitly, by ``config_path`` or
    PAIRGATE_CONFIG, must exist.
    Pass ``require_list_path=False`` when the caller supplies the list path
    itself (e.g. from the command line) and calls validate_config() afterwards.
    If a file is found but invalid, writes error to stderr and raises SystemExit(1).
    Environment overrides are applied in both cases.

    Raises:
        SystemExit(1): On a missing explicit config file, YAML parse error,
                       missing or unsupported ``version``, invalid
                       filter/logging values (file or environment).
    """
    explicit = config_path or os.environ.get(ENV_CONFIG)
    if explicit and not os.path.isfile(os.path.expanduser(explicit)):
        source = "--config" if config_path else ENV_CONFIG
        _config_error(f"Config file not found: {explicit} (from {source}).")

    search_paths: list[str] = []
    if explicit:
        search_paths.append(explicit)
    search_paths.extend(DEFAULT_CONFIG_PATHS)

    found_path: Optional[str] = None
    for candidate in search_paths:
        expanded = os.path.expanduser(candidate)
        if os.path.isfile(expanded):
            found_path = expanded
            break

    # ── No config file found ─────────────────────────────────────────────────
    if found_path is None:
        logger.debug("No config file found — using defaults", searched=search_paths)
        config = Config.defaults()
        _apply_env_overrides(config, require_list_path)
        return config

    # ── Parse config file ─────────────────────────────────────────────────────
    logger.debug("Loading config", path=found_path)

    try:
        with open(found_path) as fh:
            raw = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        _config_error(
            f"Failed to parse {found_path}: {exc}\n"
            "Check the YAML syntax and try again."
        )
    except OSError as exc:
        _config_error(f"Could not read {found_path}: {exc}")

    if not isinstance(raw, dict):
        if raw is None:
            _config_error(
                f"{found_path} is missing the required 'version' field.\n"
                "Add 'version: 1' to the top of your config file."
            )
        _config_error(
            f"{found_path} is not a valid YAML mapping.\n"
            "The config file must be a YAML dictionary at the top level."
        )

    # ── Version validation ────────────────────────────────────────────────────
    version = raw.get("version")
    if version is None:
        _config_error(
            f"{found_path} is missing the required 'version' field.\n"
            "Add 'version: 1' to the top of your config file."
        )
    if version not in SUPPORTED_VERSIONS:
        _config_error(
            f"Unsupported config version: {version}. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}."
        )

    config = Config.from_dict(raw, path=found_path)
    _apply_env_overrides(config, require_list_path)

    logger.info(
        "Config loaded",
        path=found_path,
        version=config.version,
        filter_mode=config.filter.mode,
        list_path=config.filter.list_path,
    )
    return config


def _apply_env_overrides(config: Config, require_list_path: bool = True) -> None:
    """Apply PAIRGATE_* environment overrides to a Config in-place, then re-validate.

    Raises:
        SystemExit(1): If the resulting config is invalid.
    """
    env_mode = os.environ.get(ENV_FILTER_MODE)
    if env_mode:
        config.filter.mode = env_mode.lower()
    env_list = os.environ.get(ENV_LIST_PATH)
    if env_list:
        config.filter.list_path = env_list
    env_level = os.environ.get(ENV_LOG_LEVEL)
    if env_level:
        config.logging.level = env_level.upper()
    validate_config(config, require_list_path)


def validate_config(config: Config, require_list_path: bool = True) -> None:
    """Check filter and logging values; exit with CONFIG ERROR on the first problem."""
    if config.filter.mode not in VALID_FILTER_MODES:
        _config_error(
            f"Invalid filter.mode: '{config.filter.mode}'. "
            f"Supported values: {sorted(VALID_FILTER_MODES)}."
        )
    if require_list_path and config.filter.mode != FILTER_MODE_NONE and not config.filter.list_path:
        _config_error(
            f"filter.mode '{config.filter.mode}' requires filter.list_path "
            f"(or the {ENV_LIST_PATH} environment variable)."
        )
    if config.logging.level not in VALID_LOG_LEVELS:
        _config_error(
            f"Invalid logging.level: '{config.logging.level}'. "
            f"Supported values: {sorted(VALID_LOG_LEVELS)}."
        )


# ─── Filter construction ─────────────────────────────────────────────────────


def build_filter(filter_config: FilterConfig) -> Union[ListFilter, PassAllFilter]:
    """Build the pair filter selected by ``filter_config``.

    Raises:
        OSError: The configured list file could not be loaded. Callers must
                 abort instead of comparing unfiltered.
    """
    if filter_config.mode == FILTER_MODE_NONE:
        return PassAllFilter()
    path = os.path.expanduser(filter_config.list_path or "")
    if filter_config.mode == FILTER_MODE_ALLOW:
        return new_allow_list_filter(path)
    return new_deny_list_filter(path)
