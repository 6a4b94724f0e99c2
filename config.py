"""
Application settings read from the environment (and from a .env file, if present).
"""
import os

from dotenv import load_dotenv

DEFAULT_OPERATIONS = {
    'extended': 'credit,debit',
    'legacy': 'payments,refunds',
}


def _flag(name, default):
    return os.getenv(name, default).lower() == 'true'


def load_config():
    """Build the Flask config mapping. Environment is read on every call."""
    load_dotenv()
    variant = os.getenv('PAYMENTS_VARIANT', 'extended').lower()
    max_requests = int(os.getenv('RATELIMIT_MAX', '200'))
    window_minutes = int(os.getenv('RATELIMIT_WINDOW_MINUTES', '15'))

    return {
        'API_NAME': os.getenv('API_NAME', 'DAD Payments API'),
        'HOST': os.getenv('HOST', '0.0.0.0'),
        'PORT': int(os.getenv('PORT', '8080')),
        'DEBUG': _flag('FLASK_DEBUG', 'false'),
        'FORCE_HTTPS': _flag('FORCE_HTTPS', 'false'),
        'LOG_LEVEL': os.getenv('LOG_LEVEL', 'INFO'),
        'LOG_FILE': os.getenv('LOG_FILE'),

        'PAYMENTS_VARIANT': variant,
        'PAYMENTS_OPERATIONS': os.getenv(
            'PAYMENTS_OPERATIONS', DEFAULT_OPERATIONS.get(variant, 'credit,debit')),
        'GATEWAY_PROVIDER': os.getenv('GATEWAY_PROVIDER', 'sandbox'),

        'CORS_ORIGINS': os.getenv('CORS_ORIGINS', '*'),

        # Flask-Limiter settings, fixed window keyed by client address
        'RATELIMIT_ENABLED': _flag('RATELIMIT_ENABLED', 'true'),
        'RATELIMIT_DEFAULT': f'{max_requests} per {window_minutes} minutes',
        'RATELIMIT_STRATEGY': 'fixed-window',
        'RATELIMIT_STORAGE_URI': os.getenv('RATELIMIT_STORAGE_URI', 'memory://'),
        'RATELIMIT_HEADERS_ENABLED': True,
        'RATELIMIT_HEADER_LIMIT': 'RateLimit-Limit',
        'RATELIMIT_HEADER_REMAINING': 'RateLimit-Remaining',
        # Reset keeps the default X-RateLimit-Reset name, its value is an epoch timestamp
        'RATELIMIT_HEADER_RETRY_AFTER': 'Retry-After',
    }
