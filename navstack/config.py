# navstack/config.py
# Description: Settings file for navstack routers and the demo app.
#
# Imports
import copy
import os
import sys
if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib
from pathlib import Path
from typing import Any, Dict, Optional
#
# Third-Party Imports
import toml
from loguru import logger
#
#######################################################################################################################
#
# Functions:

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "navstack" / "config.toml"

ENV_LOG_LEVEL = "NAVSTACK_LOG_LEVEL"
ENV_LOGGING_ENABLED = "NAVSTACK_LOGGING_ENABLED"

CONFIG_TOML_CONTENT = """
# Configuration for navstack
# Settings here are merged on top of the built-in defaults.

[navigation]
# Log every navigate/pop/pop_to call made through a Router.
# Individual routers can still override this with `logging_enabled=`.
logging_enabled = false

[logging]
# One of TRACE, DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL
log_level = "INFO"
# Leave empty to log to stderr only.
log_file = ""
rotation = "10 MB"
"""

DEFAULT_CONFIG_FROM_TOML: Dict[str, Any] = tomllib.loads(CONFIG_TOML_CONTENT)

_TRUE_STRINGS = ("1", "true", "t", "yes", "y", "on")

_CONFIG_CACHE: Optional[Dict[str, Any]] = None


def deep_merge_dicts(base: Dict, update: Dict) -> Dict:
    """Return a copy of ``base`` with ``update`` merged in, table by table."""
    merged = copy.deepcopy(base)
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge_dicts(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_STRINGS


def _read_user_file() -> Dict[str, Any]:
    """Parse the user's file; a missing or broken file counts as empty."""
    if not DEFAULT_CONFIG_PATH.exists():
        return {}
    try:
        with open(DEFAULT_CONFIG_PATH, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        logger.error(f"Ignoring malformed config file {DEFAULT_CONFIG_PATH}: {e}")
    except OSError as e:
        logger.error(f"Could not read config file {DEFAULT_CONFIG_PATH}: {e}")
    return {}


def _write_default_file() -> None:
    try:
        DEFAULT_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        DEFAULT_CONFIG_PATH.write_text(CONFIG_TOML_CONTENT, encoding="utf-8")
        logger.info(f"Created default config file at {DEFAULT_CONFIG_PATH}")
    except OSError as e:
        logger.error(f"Could not create config file {DEFAULT_CONFIG_PATH}: {e}. Using internal defaults.")


def load_config(force_reload: bool = False) -> Dict[str, Any]:
    """
    Built-in defaults, overlaid with the user's file and the environment.

    Never writes anything; a missing file simply means defaults. The result is
    cached until ``force_reload`` or a successful save.
    """
    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None and not force_reload:
        return _CONFIG_CACHE

    merged = deep_merge_dicts(DEFAULT_CONFIG_FROM_TOML, _read_user_file())

    log_level = os.getenv(ENV_LOG_LEVEL)
    if log_level:
        merged["logging"]["log_level"] = log_level
    logging_enabled = os.getenv(ENV_LOGGING_ENABLED)
    if logging_enabled is not None:
        merged["navigation"]["logging_enabled"] = _as_bool(logging_enabled)

    logger.debug(f"Loaded navstack config (file present: {DEFAULT_CONFIG_PATH.exists()})")
    _CONFIG_CACHE = merged
    return merged


def load_cli_config_and_ensure_existence(force_reload: bool = False) -> Dict[str, Any]:
    """
    Like :func:`load_config`, but first writes the commented default file if
    the user has none yet. Applications call this once at startup; library
    code only reads.
    """
    if not DEFAULT_CONFIG_PATH.exists():
        _write_default_file()
        force_reload = True
    return load_config(force_reload=force_reload)


def save_setting_to_cli_config(section: str, key: str, value: Any) -> bool:
    """
    Persist ``[section] key = value`` in the user's file.

    Dotted sections ("logging.sinks") address nested tables. The rest of the
    file is preserved and the cache is refreshed.

    Returns:
        True if the file was written, False otherwise
    """
    global _CONFIG_CACHE
    if DEFAULT_CONFIG_PATH.exists():
        try:
            with open(DEFAULT_CONFIG_PATH, "rb") as f:
                document = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Refusing to overwrite malformed config file {DEFAULT_CONFIG_PATH}: {e}")
            return False
    else:
        document = {}

    table = document
    for part in section.split("."):
        table = table.setdefault(part, {})
        if not isinstance(table, dict):
            logger.error(f"Cannot set {key!r}: '{part}' in [{section}] is a value, not a table")
            return False
    table[key] = value

    try:
        DEFAULT_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        with open(DEFAULT_CONFIG_PATH, "w", encoding="utf-8") as f:
            toml.dump(document, f)
    except OSError as e:
        logger.error(f"Failed to write {DEFAULT_CONFIG_PATH}: {e}")
        return False

    logger.success(f"Saved [{section}] {key} = {value!r} to {DEFAULT_CONFIG_PATH}")
    _CONFIG_CACHE = None
    return True


def get_cli_setting(section: str, key: str, default: Any = None) -> Any:
    """One value from the merged configuration, or ``default``."""
    table = load_config().get(section)
    if isinstance(table, dict):
        return table.get(key, default)
    return default


def get_navigation_logging_enabled() -> bool:
    """Default for `Router.logging_enabled`."""
    return _as_bool(get_cli_setting("navigation", "logging_enabled", False))


def get_logging_settings() -> Dict[str, Any]:
    """The [logging] section with types normalised."""
    log_file = get_cli_setting("logging", "log_file", "")
    return {
        "log_level": str(get_cli_setting("logging", "log_level", "INFO")).upper(),
        "log_file": Path(log_file) if log_file else None,
        "rotation": str(get_cli_setting("logging", "rotation", "10 MB")),
    }

#
# End of config.py
#######################################################################################################################
