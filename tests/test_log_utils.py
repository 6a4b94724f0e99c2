import logging

from log_utils import configure_logging, mask_ip, mask_reference, sanitize_for_log


def test_configure_logging_keeps_existing_handlers(tmp_path, monkeypatch):
    existing = logging.NullHandler()
    monkeypatch.setattr(logging.getLogger(), 'handlers', [existing])
    log_file = tmp_path / 'payments.log'

    configure_logging('INFO', str(log_file))
    configure_logging('INFO', str(log_file))

    assert logging.getLogger().handlers == [existing]
    assert not log_file.exists()


def test_mask_reference_keeps_last_four():
    assert mask_reference('4234567890123456') == '************3456'
    assert mask_reference('abc') == '***'


def test_mask_ip_and_sanitize():
    assert mask_ip('192.168.1.20') == '192.168.1.xxx'
    assert sanitize_for_log('a\nb') == 'a\\nb'
