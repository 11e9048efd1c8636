"""
Configuration management for bookit.

Settings are layered with sensible defaults. They live apart from the
bookmark store itself: the store is the YAML file named by config_path,
while these settings come from ~/.config/bookit/config.toml and BOOKIT_*
environment variables.
"""
import os
import tomli
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, field

from bookit.constants import DEFAULT_CONFIG_PATH, DEFAULT_EDIT_COMMAND, ENV_PREFIX
from bookit.errors import SettingsError


@dataclass
class BookitConfig:
    """
    bookit settings with sensible defaults.

    Configuration hierarchy (highest to lowest priority):
    1. Command-line arguments
    2. Environment variables (BOOKIT_*)
    3. Settings file named by BOOKIT_SETTINGS or passed explicitly
    4. User settings file (~/.config/bookit/config.toml)
    5. Defaults
    """

    # Store file holding the bookmarks
    config_path: str = field(default=DEFAULT_CONFIG_PATH)

    # Edit action template
    edit_command: str = field(default=DEFAULT_EDIT_COMMAND)

    # Display settings
    color_output: bool = field(default=True)

    # Advanced
    log_level: str = field(default="WARNING")

    @classmethod
    def load(cls, settings_file: Optional[Path] = None) -> "BookitConfig":
        """
        Load configuration from files and environment.

        Args:
            settings_file: Specific settings file to load on top of the user file

        Returns:
            Merged configuration object
        """
        config = cls()

        # Load user settings if present
        user_settings_path = Path.home() / ".config" / "bookit" / "config.toml"
        if user_settings_path.exists():
            config._merge(cls._load_toml(user_settings_path))

        if settings_file is None and os.environ.get(f"{ENV_PREFIX}SETTINGS"):
            settings_file = Path(os.environ[f"{ENV_PREFIX}SETTINGS"]).expanduser()

        if settings_file and settings_file.exists():
            config._merge(cls._load_toml(settings_file))

        # Apply environment variables (BOOKIT_* prefix)
        config._apply_env_vars()

        # Expand paths
        config._expand_paths()

        return config

    @staticmethod
    def _load_toml(path: Path) -> Dict[str, Any]:
        """Load TOML settings file."""
        try:
            with open(path, "rb") as f:
                return tomli.load(f)
        except tomli.TOMLDecodeError as e:
            raise SettingsError(f"Invalid settings file '{path}': {e}") from e
        except OSError as e:
            raise SettingsError(f"Unable to read settings file '{path}': {e}") from e

    def _merge(self, data: Dict[str, Any]):
        """Merge configuration data into this instance."""
        for key, value in data.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def _apply_env_vars(self):
        """Apply environment variables with BOOKIT_ prefix."""
        for key, value in os.environ.items():
            if key.startswith(ENV_PREFIX):
                config_key = key[len(ENV_PREFIX):].lower()
                if hasattr(self, config_key):
                    # Convert string values to appropriate types
                    current_value = getattr(self, config_key)
                    if isinstance(current_value, bool):
                        setattr(self, config_key, value.lower() in ("true", "1", "yes"))
                    else:
                        setattr(self, config_key, value)

    def _expand_paths(self):
        """Expand ~ and environment variables in paths."""
        value = self.config_path
        if isinstance(value, str):
            self.config_path = os.path.expanduser(os.path.expandvars(value))

    def get_store_path(self) -> str:
        """Get the tilde-expanded store path, otherwise as written."""
        return os.path.expanduser(self.config_path)


# Global configuration instance
_config: Optional[BookitConfig] = None


def get_config(reload: bool = False, settings_file: Optional[Path] = None) -> BookitConfig:
    """
    Get the global configuration instance.

    Args:
        reload: Force reload configuration from files
        settings_file: Specific settings file to load

    Returns:
        Global configuration instance
    """
    global _config
    if _config is None or reload:
        _config = BookitConfig.load(settings_file)
    return _config


def init_config(config_path: Optional[str] = None, **kwargs) -> BookitConfig:
    """
    Initialize configuration with command-line overrides.

    Args:
        config_path: Store path override
        **kwargs: Other configuration overrides

    Returns:
        Configured instance
    """
    config = get_config(reload=True)

    if config_path:
        config.config_path = os.path.expanduser(config_path)

    for key, value in kwargs.items():
        if hasattr(config, key) and value is not None:
            setattr(config, key, value)

    return config
