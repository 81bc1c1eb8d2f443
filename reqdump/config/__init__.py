from typing import Optional

from reqdump.config.models import ConfigModel, DumpConfig, LoggingConfig
from reqdump.config.paths import get_app_dir


class ConfigurationService:
    """Configuration service that manages config loading without global state."""

    def __init__(self, config_path: Optional[str] = None, config: Optional[ConfigModel] = None):
        """Initialize with an optional config path, or a ready-made config for tests."""
        self.config_path = config_path
        self._config = config if config is not None else self._load_config()

    def _load_config(self) -> ConfigModel:
        return ConfigModel.load(self.config_path)

    def get_config(self) -> ConfigModel:
        return self._config

    def reload_config(self) -> ConfigModel:
        """Reload configuration from file."""
        self._config = self._load_config()
        return self._config


def setup_config() -> None:
    """Create ~/.reqdump and a default config.yaml if they don't exist."""
    app_dir = get_app_dir()
    app_dir.mkdir(exist_ok=True)

    config_file = app_dir / 'config.yaml'
    if not config_file.exists():
        ConfigModel().save(str(config_file))


__all__ = ['ConfigModel', 'ConfigurationService', 'DumpConfig', 'LoggingConfig', 'setup_config']
