"""Launcher configuration storage.

Configuration lives in ``$XDG_CONFIG_HOME/poppi_launcher/config.json``.
A missing file is created with defaults on first load.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from xdg.BaseDirectory import xdg_config_home

from .errors import ConfigError, ErrorCode
from .models.config import LauncherConfig


logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = "poppi_launcher"
CONFIG_FILE_NAME = "config.json"


def default_config_path() -> Path:
    return Path(xdg_config_home) / CONFIG_DIR_NAME / CONFIG_FILE_NAME


class ConfigStore:
    """Loads and saves LauncherConfig as JSON."""

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize the store.

        Args:
            config_file: Path to config file (default: XDG config location)
        """
        self.config_file = Path(config_file) if config_file else default_config_path()

    def load(self) -> LauncherConfig:
        """Load configuration from disk.

        If the file doesn't exist, it is created with defaults.

        Returns:
            Validated LauncherConfig

        Raises:
            ConfigError: File unreadable, not JSON, or fails validation
        """
        if not self.config_file.exists():
            logger.info(f"No configuration at {self.config_file}, writing defaults")
            config = LauncherConfig()
            self.save(config)
            return config

        try:
            with open(self.config_file) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(str(self.config_file), f"invalid JSON: {e}")
        except OSError as e:
            raise ConfigError(str(self.config_file), str(e))

        try:
            config = LauncherConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(str(self.config_file), str(e), code=ErrorCode.CONFIG_INVALID)

        logger.debug(f"Loaded configuration from {self.config_file}")
        return config

    def load_or_default(self) -> LauncherConfig:
        """Load configuration, falling back to defaults on errors."""
        try:
            return self.load()
        except ConfigError as e:
            logger.warning(f"{e.message}. Using default configuration.")
            return LauncherConfig()

    def save(self, config: LauncherConfig) -> None:
        """Save configuration to disk.

        Creates parent directory if it doesn't exist.
        Performs atomic write using temp file + rename.

        Raises:
            ConfigError: The file could not be written
        """
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(
                dir=self.config_file.parent,
                prefix=".config-",
                suffix=".json",
            )
        except OSError as e:
            raise ConfigError(str(self.config_file), str(e), code=ErrorCode.CONFIG_WRITE_FAILED)

        try:
            with os.fdopen(fd, "w") as f:
                json.dump(config.model_dump(mode="json"), f, indent=2)
                f.write("\n")
                f.flush()
                os.fsync(f.fileno())

            os.replace(temp_path, self.config_file)

        except OSError as e:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise ConfigError(str(self.config_file), str(e), code=ErrorCode.CONFIG_WRITE_FAILED)

    def ensure_exists(self) -> Path:
        """Make sure the config file exists and return its path."""
        if not self.config_file.exists():
            self.save(LauncherConfig())
        return self.config_file
