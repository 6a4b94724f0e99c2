import os
import sys
import pytest

# Ensure project root is on sys.path for module resolution
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from app import create_app


@pytest.fixture
def app_config(monkeypatch):
    # Keep the developer's environment out of the tests
    for name in ('PAYMENTS_VARIANT', 'PAYMENTS_OPERATIONS', 'GATEWAY_PROVIDER',
                 'RATELIMIT_MAX', 'RATELIMIT_WINDOW_MINUTES', 'LOG_FILE', 'FORCE_HTTPS'):
        monkeypatch.delenv(name, raising=False)
    return {'TESTING': True, 'RATELIMIT_ENABLED': False}


@pytest.fixture
def test_app(app_config):
    return create_app(app_config)


@pytest.fixture
def client(test_app):
    return test_app.test_client()


@pytest.fixture
def legacy_client(app_config):
    app_config['PAYMENTS_VARIANT'] = 'legacy'
    app_config['PAYMENTS_OPERATIONS'] = 'payments,refunds'
    return create_app(app_config).test_client()
