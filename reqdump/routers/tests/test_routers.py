from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from reqdump.config.models import ConfigModel, DumpConfig, LoggingConfig
from reqdump.main import create_app


@pytest.fixture
def client():
    config = ConfigModel(dump=DumpConfig(enabled=False, max_length=5), logging=LoggingConfig(console_enabled=False))
    return TestClient(create_app(config))


def test_health_check(client):
    response = client.get('/api/health')
    assert response.status_code == 200
    assert response.json() == {'status': 'ok'}


def test_correlation_id_generated(client):
    response = client.get('/api/health')
    assert len(response.headers['X-Correlation-ID']) == 32


def test_dump_config(client):
    response = client.get('/api/dump/config')
    assert response.status_code == 200
    assert response.json()['max_length'] == 5
    assert response.json()['enabled'] is False


def test_preview_string_table_uses_configured_limit(client):
    response = client.post('/api/dump/preview', json={'title': 'X', 'values': {'a': 'hello!'}})
    assert response.status_code == 200
    assert response.text == '+-------+\n|X      |\n+-+-----+\n|a|hello|\n| |!    |\n+-+-----+\n'


def test_preview_object_table(client):
    response = client.post('/api/dump/preview', json={'title': 'Attrs', 'values': {'x': [1, 2, 3]}, 'chunk_limit': 100, 'typed': True})
    assert response.status_code == 200
    assert response.text.split('\n')[3:5] == ['|x|list   |', '|[1, 2, 3]|']


def test_preview_null_value(client):
    response = client.post('/api/dump/preview', json={'title': 'T', 'values': {'k': None}, 'chunk_limit': 10})
    assert '|k|(null)|' in response.text


def test_preview_rejects_bad_chunk_limit(client):
    response = client.post('/api/dump/preview', json={'title': 'T', 'values': {}, 'chunk_limit': 0})
    assert response.status_code == 400
    assert 'chunk_limit' in response.json()['detail']


def test_app_dumps_requests_when_enabled():
    config = ConfigModel(dump=DumpConfig(enabled=True), logging=LoggingConfig(console_enabled=False))
    with patch('reqdump.observability.dumper.log') as mock_log:
        response = TestClient(create_app(config)).get('/api/health', headers={'X-Correlation-ID': 'abc123'})
    assert response.status_code == 200
    text = mock_log.info.call_args.args[0]
    assert '|Request: GET http://testserver/api/health' in text
    assert 'abc123' in text
