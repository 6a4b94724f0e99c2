from config import load_config
from payments import parse_operations

import pytest


def test_defaults(monkeypatch):
    for name in ('PORT', 'PAYMENTS_VARIANT', 'PAYMENTS_OPERATIONS', 'RATELIMIT_MAX', 'RATELIMIT_WINDOW_MINUTES'):
        monkeypatch.delenv(name, raising=False)
    config = load_config()
    assert config['PORT'] == 8080
    assert config['PAYMENTS_OPERATIONS'] == 'credit,debit'
    assert config['RATELIMIT_DEFAULT'] == '200 per 15 minutes'
    assert config['RATELIMIT_STRATEGY'] == 'fixed-window'


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv('PORT', '80')
    monkeypatch.setenv('PAYMENTS_VARIANT', 'LEGACY')
    monkeypatch.delenv('PAYMENTS_OPERATIONS', raising=False)
    monkeypatch.setenv('RATELIMIT_MAX', '100')
    config = load_config()
    assert config['PORT'] == 80
    assert config['PAYMENTS_VARIANT'] == 'legacy'
    assert config['PAYMENTS_OPERATIONS'] == 'payments,refunds'
    assert config['RATELIMIT_DEFAULT'] == '100 per 15 minutes'


def test_parse_operations():
    assert parse_operations(' Credit, debit,credit ') == ['credit', 'debit']
    with pytest.raises(ValueError):
        parse_operations(' , ')
