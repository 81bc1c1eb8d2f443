from typing import List

import yaml
from pydantic import BaseModel, ConfigDict, Field

from reqdump.config.env_yaml import load_yaml
from reqdump.config.paths import get_app_dir


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default='INFO', description='Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)')
    console_enabled: bool = Field(default=True, description='Enable console logging')
    file_enabled: bool = Field(default=False, description='Enable rotating JSON file logging')
    log_file_dir: str | None = Field(default=None, description='Log directory (defaults to ~/.reqdump/logs)')
    max_file_size: str = Field(default='10MB', description='Maximum log file size before rotation')
    backup_count: int = Field(default=4, ge=0, description='Number of backup files to keep')


class DumpConfig(BaseModel):
    """Which sections a request dump contains and how wide values may get."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = Field(default=False, description='Log a dump block for every request')
    has_request: bool = Field(default=True, description='Include request properties, headers, parameters and attributes')
    has_cookie: bool = Field(default=True, description='Include one table per request cookie')
    has_response: bool = Field(default=True, description='Include response properties and headers')
    has_session: bool = Field(default=True, description='Include session attributes')
    max_length: int = Field(default=100, ge=1, description='Characters of a value per dump line before wrapping')
    redact_headers: List[str] = Field(default_factory=lambda: ['authorization', 'x-api-key', 'cookie', 'set-cookie'])


class ConfigModel(BaseModel):
    """Configuration model with validation."""

    model_config = ConfigDict(extra='allow')

    version: str = Field(default='1', description='Config version')
    host: str = Field(default='127.0.0.1')
    port: int = Field(default=8000, ge=1, le=65535)
    dev: bool = Field(default=False)
    cors_allow_origins: List[str] = Field(default_factory=list)
    dump: DumpConfig = Field(default_factory=DumpConfig, description='Request dump configuration')
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description='Logging configuration')

    @classmethod
    def load(cls, config_path: str | None = None) -> 'ConfigModel':
        """Load configuration from YAML file.

        Tries multiple locations in order:
        1. Explicit config_path if provided
        2. ~/.reqdump/config.yaml in user home directory
        3. ./config.yaml in current directory
        """
        config_paths = []
        if config_path:
            config_paths.append(config_path)
        else:
            home_config = get_app_dir() / 'config.yaml'
            if home_config.exists():
                config_paths.append(str(home_config))
            config_paths.append('config.yaml')

        data = {}
        for path in config_paths:
            try:
                with open(path, 'r') as f:
                    # later files override earlier ones
                    data.update(load_yaml(f) or {})
            except FileNotFoundError:
                continue
            except yaml.YAMLError as e:
                raise ValueError(f'Invalid YAML in config file {path}: {e}')
            except OSError as e:
                raise ValueError(f'Error reading config file {path}: {e}')

        return cls(**data)

    def save(self, config_path: str) -> None:
        """Save configuration to YAML file."""
        with open(config_path, 'w') as f:
            yaml.safe_dump(self.model_dump(), f, default_flow_style=False, sort_keys=False, indent=2)
