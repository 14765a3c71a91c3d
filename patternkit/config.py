"""
Centralized Configuration Module

Application constants, logging configuration, and settings.
Import from here instead of hardcoding values.
"""

import os
import logging
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Load default .env before the config classes read os.environ
load_dotenv()

# ============================================================================
# Environment Loading
# ============================================================================

def load_environment(env_file: Optional[str] = None):
    """
    Load environment variables from .env file.

    Args:
        env_file: Optional path to .env file. If None, uses default .env
    """
    if env_file:
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=True)
            logger.info(f"Loaded environment from: {env_file}")
        else:
            logger.warning(f"Environment file not found: {env_file}")
    else:
        load_dotenv(override=True)

    AppConfig.reload()
    LogConfig.reload()


# ============================================================================
# Application Constants
# ============================================================================

class AppConfig:
    """Application-wide configuration constants"""

    APP_NAME = "patternkit"
    APP_VERSION = "1.0.0"
    APP_DESCRIPTION = "Singleton and abstract factory building blocks"

    # Theme used by the CLI when --theme is not given
    DEFAULT_THEME = os.getenv("PATTERNKIT_THEME", "american")

    OUTPUT_FORMATS = ("list", "table", "json")
    DEFAULT_OUTPUT_FORMAT = os.getenv("PATTERNKIT_OUTPUT_FORMAT", "list")

    @classmethod
    def reload(cls):
        """Re-read environment-backed values (after load_environment)"""
        cls.DEFAULT_THEME = os.getenv("PATTERNKIT_THEME", "american")
        cls.DEFAULT_OUTPUT_FORMAT = os.getenv("PATTERNKIT_OUTPUT_FORMAT", "list")


# ============================================================================
# Logging Configuration
# ============================================================================

class LogConfig:
    """Logging configuration"""

    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    # Detailed format with file/line
    DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"

    # File Logging
    LOG_FILE = os.getenv("LOG_FILE")  # Optional
    LOG_FILE_MAX_BYTES = int(os.getenv("LOG_FILE_MAX_BYTES", "10485760"))  # 10MB
    LOG_FILE_BACKUP_COUNT = int(os.getenv("LOG_FILE_BACKUP_COUNT", "5"))

    @classmethod
    def reload(cls):
        """Re-read environment-backed values (after load_environment)"""
        cls.LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
        cls.LOG_FILE = os.getenv("LOG_FILE")
        cls.LOG_FILE_MAX_BYTES = int(os.getenv("LOG_FILE_MAX_BYTES", "10485760"))
        cls.LOG_FILE_BACKUP_COUNT = int(os.getenv("LOG_FILE_BACKUP_COUNT", "5"))


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """
    Configure application logging.

    Args:
        verbose: Enable verbose (DEBUG) logging
        log_file: Optional log file path
    """
    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, LogConfig.LOG_LEVEL, logging.WARNING)

    log_format = LogConfig.DETAILED_FORMAT if verbose else LogConfig.LOG_FORMAT

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=LogConfig.LOG_DATE_FORMAT
    )
    logging.getLogger().setLevel(log_level)

    if log_file or LogConfig.LOG_FILE:
        from logging.handlers import RotatingFileHandler

        file_path = log_file or LogConfig.LOG_FILE
        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=LogConfig.LOG_FILE_MAX_BYTES,
            backupCount=LogConfig.LOG_FILE_BACKUP_COUNT
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(log_format, LogConfig.LOG_DATE_FORMAT))
        logging.getLogger().addHandler(file_handler)
        logger.info(f"Logging to file: {file_path}")

    logger.info(f"Logging configured: level={logging.getLevelName(log_level)}")


logger = logging.getLogger(__name__)


# ============================================================================
# Validation
# ============================================================================

def validate_config():
    """
    Validate configuration on startup.
    Raises ConfigurationError if a setting has an unusable value.
    """
    errors = []

    if not isinstance(logging.getLevelName(LogConfig.LOG_LEVEL), int):
        errors.append(f"Unknown LOG_LEVEL: {LogConfig.LOG_LEVEL}")

    if AppConfig.DEFAULT_OUTPUT_FORMAT not in AppConfig.OUTPUT_FORMATS:
        errors.append(
            f"Unknown PATTERNKIT_OUTPUT_FORMAT: {AppConfig.DEFAULT_OUTPUT_FORMAT} "
            f"(expected one of {', '.join(AppConfig.OUTPUT_FORMATS)})"
        )

    if not AppConfig.DEFAULT_THEME.strip():
        errors.append("PATTERNKIT_THEME cannot be empty")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg, details=errors)

    logger.debug("Configuration validated")


__all__ = [
    'AppConfig',
    'LogConfig',
    'load_environment',
    'setup_logging',
    'validate_config',
]
