# db_connector/config.py

import configparser
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .database_info import DatabaseInfo

# Pick up DB_* overrides and DB_CONNECTOR_CONFIG from a local .env
load_dotenv()

RESERVED_KEYS = ("active", "host", "port", "database", "name")


def _config_path() -> Path:
    cfg_env = os.getenv("DB_CONNECTOR_CONFIG", "").strip()
    if cfg_env and Path(cfg_env).is_file():
        return Path(cfg_env)
    home = os.getenv("HOME") or os.getenv("USERPROFILE") or None
    base = Path(home) if home else Path.home()
    return base / ".db_connector.cfg"


def _apply_env(profile: Dict[str, Any]) -> Dict[str, Any]:
    """Let DB_HOST, DB_PORT, DB_NAME, DB_USER and DB_PASS override the profile."""
    if os.getenv("DB_HOST"):
        profile["host"] = os.environ["DB_HOST"]
    if os.getenv("DB_PORT"):
        profile["port"] = int(os.environ["DB_PORT"])
    if os.getenv("DB_NAME"):
        profile["database"] = os.environ["DB_NAME"]
    if os.getenv("DB_USER"):
        profile["options"]["user"] = os.environ["DB_USER"]
    if os.getenv("DB_PASS"):
        profile["options"]["password"] = os.environ["DB_PASS"]
    return profile


def load_config(profile_name: Optional[str] = None) -> Dict[str, Any]:
    """
    Load connection settings from ~/.db_connector.cfg, or (if set and exists) from $DB_CONNECTOR_CONFIG.

    Args:
        profile_name: Name of the section to load. If None, uses [DEFAULT].active or the first section.

    Environment:
        DB_CONNECTOR_CONFIG: path to an alternate .cfg file (used only if that file exists).
        DB_HOST, DB_PORT, DB_NAME, DB_USER, DB_PASS: override the matching profile values.
            If there is no config file at all, DB_HOST alone is enough to build a profile.

    Returns:
        Dict with host, port (int or None), database (str or None) and options.
        Options hold every other key of the section in file order (keys from [DEFAULT]
        last). Keys keep their case; an empty value becomes None.

    Raises:
        RuntimeError: If no config is found or cannot be parsed, no profile is defined,
            or the profile is unknown.
    """

    # 1) Determine config file path
    cfg_path = _config_path()

    if not cfg_path.is_file():
        if os.getenv("DB_HOST"):
            return _apply_env({"host": "localhost", "port": None, "database": None, "options": {}})
        raise RuntimeError(
            f"No DB config found at {cfg_path}. "
            "Please create ~/.db_connector.cfg, set DB_CONNECTOR_CONFIG correctly, or set DB_HOST."
        )

    # 2) Parse the file, keeping option names case-sensitive (useSSL, serverTimezone, ...)
    cfg = configparser.ConfigParser(allow_no_value=True, interpolation=None)
    cfg.optionxform = str
    try:
        cfg.read(cfg_path)
    except configparser.Error as e:
        raise RuntimeError(f"Cannot parse {cfg_path}: {e}") from e

    # 3) Pick the profile/section
    if profile_name:
        active = profile_name
    else:
        active = cfg["DEFAULT"].get("active", None)

    if not active:
        sections = cfg.sections()
        if not sections:
            raise RuntimeError(f"No profiles defined in {cfg_path}")
        active = sections[0]

    if active not in cfg:
        raise RuntimeError(f"Profile '{active}' not found in {cfg_path}")

    sect = cfg[active]

    # 4) Build the profile dict
    profile = {
        "host": sect.get("host") or "localhost",
        "port": sect.getint("port") if sect.get("port") else None,
        "database": sect.get("database") or sect.get("name") or None,
        "options": {
            key: (value or None)
            for key, value in sect.items()
            if key not in RESERVED_KEYS
        },
    }
    return _apply_env(profile)


def load_database_info(profile_name: Optional[str] = None) -> DatabaseInfo:
    """Load a profile (see load_config) as a DatabaseInfo."""
    profile = load_config(profile_name)
    return DatabaseInfo(
        uri=profile["host"],
        port=profile["port"],
        database=profile["database"],
        connection_option=profile["options"],
    )
