import os
import tempfile
from unittest.mock import patch

import pytest
import yaml
from pydantic import ValidationError

from reqdump.config import ConfigurationService
from reqdump.config.models import ConfigModel, DumpConfig


def _write_temp_yaml(content: str) -> str:
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        f.write(content)
        return f.name


@pytest.mark.parametrize(
    'scenario,config_data,validation,should_raise,error_match',
    [
        ('defaults for non-existent file', None, lambda c: c.host == '127.0.0.1' and c.port == 8000 and c.dump.enabled is False and c.dump.max_length == 100, False, None),
        (
            'values from yaml file',
            {'host': '0.0.0.0', 'port': 9000, 'dump': {'enabled': True, 'max_length': 40, 'has_cookie': False}},
            lambda c: c.host == '0.0.0.0' and c.port == 9000 and c.dump.enabled and c.dump.max_length == 40 and c.dump.has_cookie is False and c.dump.has_session is True,
            False,
            None,
        ),
        ('invalid yaml', '{ invalid yaml', None, True, 'Invalid YAML'),
    ],
)
def test_config_loading(scenario, config_data, validation, should_raise, error_match):
    """Test configuration loading scenarios."""
    if config_data is None:
        config = ConfigModel.load('non-existent-config.yaml')
        assert validation(config)
        return

    content = config_data if isinstance(config_data, str) else yaml.safe_dump(config_data)
    temp_path = _write_temp_yaml(content)
    try:
        if should_raise:
            with pytest.raises(ValueError, match=error_match):
                ConfigModel.load(temp_path)
        else:
            assert validation(ConfigModel.load(temp_path))
    finally:
        os.unlink(temp_path)


@pytest.mark.parametrize('max_length', [0, -5])
def test_dump_max_length_must_be_positive(max_length):
    with pytest.raises(ValidationError):
        DumpConfig(max_length=max_length)


def test_dump_config_is_immutable():
    cfg = DumpConfig()
    with pytest.raises(ValidationError):
        cfg.enabled = True


def test_port_validation():
    assert ConfigModel(port=8080).port == 8080
    for port in (0, 65536):
        with pytest.raises(ValidationError):
            ConfigModel(port=port)


def test_config_env_vars():
    """Test that !env tags resolve environment variables and fall back to defaults."""
    temp_path = _write_temp_yaml(
        """
port: !env [TEST_PORT, 8000]
dump:
  enabled: !env [TEST_DUMP_ENABLED, false]
  max_length: !env [TEST_DUMP_MAX_LENGTH, 100]
"""
    )
    try:
        with patch.dict(os.environ, {'TEST_DUMP_ENABLED': 'true', 'TEST_DUMP_MAX_LENGTH': '60'}, clear=True):
            config = ConfigModel.load(temp_path)
            assert config.port == 8000
            assert config.dump.enabled is True
            assert config.dump.max_length == 60
    finally:
        os.unlink(temp_path)


def test_config_save_round_trip(tmp_path):
    path = tmp_path / 'config.yaml'
    ConfigModel(port=9100, dump=DumpConfig(enabled=True, max_length=30)).save(str(path))
    loaded = ConfigModel.load(str(path))
    assert loaded.port == 9100
    assert loaded.dump.enabled is True
    assert loaded.dump.max_length == 30


def test_configuration_service_reload(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text('dump:\n  max_length: 10\n')
    service = ConfigurationService(str(path))
    assert service.get_config().dump.max_length == 10

    path.write_text('dump:\n  max_length: 20\n')
    assert service.reload_config().dump.max_length == 20
    assert service.get_config().dump.max_length == 20


def test_configuration_service_with_given_config():
    config = ConfigModel(dev=True)
    assert ConfigurationService(config=config).get_config() is config
