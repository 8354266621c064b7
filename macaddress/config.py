"""
Configuration constants for the macaddress library.

Address layout constants, accepted textual forms, paths, and the optional
YAML runtime configuration are centralized here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

import yaml


# ---------------- Address Layout ----------------

EUI_LEN = 6  # Octets in an EUI-48 address
OCTET_MAX = 0xFF

ZERO_EUI = (0x00,) * EUI_LEN
BROADCAST_EUI = (0xFF,) * EUI_LEN

# Bits of the first octet
MULTICAST_BIT = 0x01  # I/G bit: 1 = group (multicast)
LOCAL_BIT = 0x02      # U/L bit: 1 = locally administered


# ---------------- Textual Forms ----------------

VALID_TEXT_LENGTHS = (14, 17)  # "0x" + 12 digits, or 12 digits + 5 separators
HEX_PREFIXES = ("0x", "0X")
SEPARATORS = frozenset("-:.")
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

LINK_LOCAL_PREFIX = "ff80::"


# ---------------- Wire Format ----------------

WIRE_FIELD = "eui"  # {"eui": [o0, ..., o5]}


# ---------------- File Paths ----------------

CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".macaddress")
CONFIG_FILE = os.path.join(CONFIG_DIR, "config.yaml")
LOG_DIR = os.path.join(CONFIG_DIR, "logs")


# ---------------- Logging Configuration ----------------

LOGGER_NAME = "macaddress"
LOG_FILE = os.path.join(LOG_DIR, "macaddress.log")
LOG_MAX_BYTES = 1 * 1024 * 1024  # 1MB per log file
LOG_BACKUP_COUNT = 3


@dataclass
class RuntimeConfig:
    """Runtime configuration, populated from defaults and the YAML file."""

    log_to_file: bool = False
    log_to_console: bool = False
    log_level: str = "INFO"


def load_config_file(path: Optional[str] = None) -> dict:
    """
    Load configuration from YAML file.

    Args:
        path: Path to config file (defaults to CONFIG_FILE)

    Returns:
        Configuration dict (empty if the file doesn't exist or is unusable)
    """
    config_path = path or CONFIG_FILE

    if not os.path.exists(config_path):
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        from .logging_setup import log_warning
        log_warning(f"[CONFIG] Ignoring config file {config_path}: {e}")
        return {}

    return data if isinstance(data, dict) else {}


def save_default_config(path: Optional[str] = None) -> str:
    """
    Save default configuration file.

    Args:
        path: Path to config file (defaults to CONFIG_FILE)

    Returns:
        The path written
    """
    config_path = path or CONFIG_FILE

    default_config = """\
# macaddress library configuration

# Logging settings
logging:
  # Write records to a rotating log file
  to_file: false
  # Echo records to stderr
  to_console: false
  # Log level: DEBUG, INFO, WARNING, ERROR
  level: INFO
"""

    directory = os.path.dirname(config_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as f:
        f.write(default_config)
    return config_path


def apply_config_file(runtime_config: RuntimeConfig, file_config: dict) -> None:
    """
    Apply file configuration to runtime config.

    Only keys present in the file override the current values.
    """
    logging_config = file_config.get("logging") or {}
    if not isinstance(logging_config, dict):
        return

    for key, attr in (("to_file", "log_to_file"), ("to_console", "log_to_console")):
        if key not in logging_config:
            continue
        value = logging_config[key]
        # Quoted YAML values such as "false" arrive as strings
        if not isinstance(value, bool):
            from .logging_setup import log_warning
            log_warning(f"[CONFIG] Ignoring logging.{key}={value!r}: expected true or false")
            continue
        setattr(runtime_config, attr, value)
    if "level" in logging_config:
        runtime_config.log_level = str(logging_config["level"]).upper()
