import logging

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def configure_logging(level='INFO', log_file=None):
    """Log to the console and, when log_file is given, to a file kept for auditing.
    Does nothing once the root logger has handlers.
    """
    if logging.getLogger().handlers:
        return
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, delay=True))
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, handlers=handlers)


# Helpers to keep user input and personal data out of the logs as-is
def mask_ip(ip: str) -> str:
    if not ip:
        return ''
    # IPv4 mask last octet -> 192.0.2.xxx
    if '.' in ip:
        parts = ip.split('.')
        if len(parts) == 4:
            return '.'.join(parts[:3] + ['xxx'])
        return ip
    if ':' in ip:
        parts = ip.split(':')
        return ':'.join(parts[:len(parts)-1] + ['xxxx'])
    return ip


def mask_reference(reference) -> str:
    """Show only the last four characters of a phone, card, e-mail or IBAN."""
    if not isinstance(reference, str):
        return sanitize_for_log(reference, maxlen=20)
    if len(reference) <= 4:
        return '*' * len(reference)
    return sanitize_for_log(reference[-4:].rjust(len(reference), '*'), maxlen=40)


def sanitize_for_log(value, maxlen: int = 120) -> str:
    s = str(value)
    s = s.replace('\n', '\\n').replace('\r', '\\r').replace('\t', ' ')
    if len(s) > maxlen:
        return s[:maxlen] + '...'
    return s
