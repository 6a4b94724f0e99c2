import json


def test_simulate_command_accepts(test_app):
    runner = test_app.test_cli_runner()
    result = runner.invoke(args=['simulate', '--type', 'MBWAY', '--reference', '912345678', '--value', '5'])
    assert result.exit_code == 0
    assert json.loads(result.output) == {'status': 'valid', 'message': 'credit registered', 'value': '5.00'}


def test_simulate_command_rejects(test_app):
    runner = test_app.test_cli_runner()
    result = runner.invoke(args=['simulate', '--type', 'PAYPAL', '--reference', 'user@example.com',
                                 '--value', '1000', '--operation', 'debit'])
    assert result.exit_code == 1
    assert json.loads(result.output)['message'] == 'payment limit exceeded'


def test_payment_types_command(test_app):
    result = test_app.test_cli_runner().invoke(args=['payment-types'])
    assert result.exit_code == 0
    codes = [line.split(':')[0] for line in result.output.splitlines()]
    assert codes == ['MBWAY', 'PAYPAL', 'VISA', 'MB', 'IBAN']
