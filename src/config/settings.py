"""
Configuration settings for the OTP Entry desktop application (PySide6).
"""
import os
import sys
import configparser
from typing import Optional
from pathlib import Path


def get_config_path() -> Path:
    """Get the path to config.ini file."""
    if getattr(sys, 'frozen', False):
        exe_dir = Path(sys.executable).parent
        config_path = exe_dir / 'config.ini'
    else:
        # Go up from src/config/ to the project root
        config_path = Path(__file__).parent.parent.parent / 'config.ini'
    return config_path


def load_config() -> configparser.ConfigParser:
    """Load configuration from config.ini file."""
    config = configparser.ConfigParser()
    config_path = get_config_path()
    if config_path.exists():
        config.read(config_path)
    return config


_config = load_config()


def _get_int(section: str, option: str, env: str, default: int) -> int:
    raw = _config.get(section, option, fallback=os.getenv(env, str(default)))
    try:
        return int(raw)
    except (TypeError, ValueError):
        # logger is configured from these settings, so it can't be used here
        print(f"Invalid {env}={raw!r}, using {default}", file=sys.stderr)
        return default


def _get_optional_int(section: str, option: str, env: str) -> Optional[int]:
    raw = _config.get(section, option, fallback=os.getenv(env, ""))
    if not raw or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        print(f"Invalid {env}={raw!r}, ignoring", file=sys.stderr)
        return None


def _get_bool(section: str, option: str, env: str, default: bool) -> bool:
    raw = _config.get(section, option, fallback=os.getenv(env, str(default)))
    return str(raw).lower() in ("true", "1", "yes")


class AppSettings:
    """Application configuration settings."""

    # Application metadata
    APP_NAME = "OTP Entry"
    APP_VERSION = "1.0.0"
    APP_TITLE = "OTP Entry v1.0.0 (Qt)"

    # Window dimensions
    WINDOW_WIDTH = 420
    WINDOW_HEIGHT = 260
    MIN_WINDOW_WIDTH = 360
    MIN_WINDOW_HEIGHT = 220

    # OTP field group
    OTP_LENGTH = _get_int('otp', 'length', "OTP_LENGTH", 6)
    OTP_FIELD_CLASS = _config.get('otp', 'field_class',
                                  fallback=os.getenv("OTP_FIELD_CLASS", "otp-field"))
    # Fixed paste length kept for old forms that always expected 6 digits.
    # Unset means "paste must match the number of boxes".
    OTP_LEGACY_PASTE_LENGTH = _get_optional_int('otp', 'legacy_paste_length',
                                                "OTP_LEGACY_PASTE_LENGTH")
    OTP_MASK_INPUT = _get_bool('otp', 'mask_input', "OTP_MASK_INPUT", False)

    # Logging
    LOG_LEVEL = _config.get('logging', 'level', fallback=os.getenv("LOG_LEVEL", "INFO"))
    LOG_FILE = os.getenv("LOG_FILE", "otp_entry_qt.log")
    LOG_MAX_SIZE = int(os.getenv("LOG_MAX_SIZE", "10485760"))   # 10 MB
    LOG_BACKUP_COUNT = int(os.getenv("LOG_BACKUP_COUNT", "5"))

    # File paths
    CONFIG_DIR = Path(os.getenv("OTP_ENTRY_HOME", str(Path.home() / ".otp_entry_qt")))
    LOG_DIR = CONFIG_DIR / "logs"

    # Debug
    DEBUG = os.getenv("DEBUG", "False").lower() in ("true", "1", "yes")

    @classmethod
    def ensure_directories(cls):
        """Ensure required directories exist."""
        for directory in [cls.CONFIG_DIR, cls.LOG_DIR]:
            directory.mkdir(parents=True, exist_ok=True)


# Global settings instance
settings = AppSettings()
