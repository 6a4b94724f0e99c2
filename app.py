import logging

import click
from flask import Flask, current_app, json, request
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_talisman import Talisman

from config import load_config
from log_utils import configure_logging, mask_ip, mask_reference, sanitize_for_log
from payment_types import get_payment_types
from payments import OPERATIONS, operation_response, parse_operations
from payments_gateway import get_gateway

logger = logging.getLogger(__name__)


def create_app(overrides=None, limiter=None):
    """Build the payments API.

    overrides is applied on top of the environment config. A Limiter can be
    passed in to share its counters; otherwise the app gets its own.
    """
    app = Flask(__name__)
    app.config.from_mapping(load_config())
    if overrides:
        app.config.update(overrides)

    configure_logging(app.config['LOG_LEVEL'], app.config['LOG_FILE'])

    # Unknown variants or operations fail here, before serving anything
    payment_types = get_payment_types(app.config['PAYMENTS_VARIANT'])
    operations = parse_operations(app.config['PAYMENTS_OPERATIONS'])
    app.extensions['payments'] = {
        'types': payment_types,
        'operations': operations,
        'gateway': get_gateway(app.config['GATEWAY_PROVIDER'], payment_types),
    }

    # ------------------------------------------------------------------
    # Rate limiting, CORS and security headers
    # ------------------------------------------------------------------
    limiter = limiter or Limiter(key_func=get_remote_address)
    limiter.init_app(app)
    CORS(app, origins=app.config['CORS_ORIGINS'], methods=['GET', 'POST'])
    Talisman(
        app,
        force_https=app.config['FORCE_HTTPS'],
        content_security_policy={'default-src': "'none'"},
    )

    # ------------------------------------------------------------------
    # Routes
    # ------------------------------------------------------------------
    app.add_url_rule('/', 'index', api_description)
    app.add_url_rule('/api', 'api_description', api_description)
    for operation in operations:
        app.add_url_rule(
            f'/api/{operation}', operation, make_operation_view(operation), methods=['POST'])

    register_error_handlers(app)
    register_commands(app)

    logger.info(
        f"Payments API ready. Variant: {app.config['PAYMENTS_VARIANT']}. "
        f"Operations: {', '.join(operations)}. Rate limit: {app.config['RATELIMIT_DEFAULT']}")
    return app


def api_description():
    operations = current_app.extensions['payments']['operations']
    return {
        'name': current_app.config['API_NAME'],
        'usage': {name: f'POST /api/{name}' for name in operations},
    }


def make_operation_view(operation):
    def view():
        data = request.get_json(silent=True)
        payments = current_app.extensions['payments']
        if isinstance(data, dict):
            logger.info(
                f"{operation} request: type={sanitize_for_log(data.get('type'), 20)}, "
                f"reference={mask_reference(data.get('reference'))}, "
                f"value={sanitize_for_log(data.get('value'), 20)}")
        else:
            logger.info(f"{operation} request without a JSON object body")

        body, status = operation_response(operation, data, payments['types'], payments['gateway'])
        if status != 201:
            logger.warning(f"{operation} refused ({body['status']}): {body['message']}")
        return body, status

    view.__name__ = f'{operation}_view'
    return view


def register_error_handlers(app):
    @app.errorhandler(404)
    def handle_404(e):
        logger.info(f"404 Not Found: {sanitize_for_log(request.path)}")
        return {'status': 'not found', 'message': 'resource not found'}, 404

    @app.errorhandler(405)
    def handle_405(e):
        return {'status': 'method not allowed', 'message': f'{request.method} not allowed here'}, 405

    @app.errorhandler(429)
    def handle_429(e):
        logger.warning(f"Rate limit exceeded by IP: {mask_ip(request.remote_addr or '')}")
        return {'status': 'too many requests', 'message': f'rate limit exceeded: {e.description}'}, 429

    @app.errorhandler(500)
    def handle_500(e):
        # Details stay in the server log, never in the response
        logger.exception(f"Unhandled exception while handling request: {request.path}")
        return {'status': 'error', 'message': 'internal error'}, 500


def register_commands(app):
    @app.cli.command('simulate')
    @click.option('--type', 'payment_type', required=True, help='Payment type code, e.g. MBWAY.')
    @click.option('--reference', required=True)
    @click.option('--value', type=float, required=True)
    @click.option('--operation', default=None,
                  help='Operation to register, defaults to the first enabled one.')
    def simulate(payment_type, reference, value, operation):
        """Run one request through validation and the gateway, without HTTP."""
        payments = current_app.extensions['payments']
        operation = operation or payments['operations'][0]
        if operation not in OPERATIONS:
            raise click.BadParameter(f'unknown operation {operation}', param_hint='--operation')

        data = {'type': payment_type, 'reference': reference, 'value': value}
        body, status = operation_response(operation, data, payments['types'], payments['gateway'])
        click.echo(json.dumps(body))
        if status != 201:
            raise click.exceptions.Exit(1)

    @app.cli.command('payment-types')
    def list_payment_types():
        """List the payment types of the active variant."""
        for code, payment_type in current_app.extensions['payments']['types'].items():
            click.echo(
                f"{code}: reference={payment_type.reference_pattern.pattern} "
                f"max={payment_type.max_value}")


def main():
    app = create_app()
    app.run(host=app.config['HOST'], port=app.config['PORT'], debug=app.config['DEBUG'])


if __name__ == '__main__':
    main()
