import json
from unittest.mock import MagicMock, patch
from urllib.parse import parse_qs, unquote, urlsplit

import requests

from thermal_label_service.client import LabelClient


def test_print_url_encodes_json_params():
    client = LabelClient('http://labels.local/')
    url = client.print_url(
        '#1001',
        shipping_address={'name': 'Jane Doe', 'city': 'Ottawa'},
        line_items=[{'title': 'Mug', 'quantity': 2}],
        order_id='42',
        label_count=2,
    )

    parts = urlsplit(url)
    params = parse_qs(parts.query)
    assert f'{parts.scheme}://{parts.netloc}{parts.path}' == 'http://labels.local/print'
    assert params['orderName'] == ['#1001']
    assert params['orderId'] == ['42']
    assert params['labelCount'] == ['2']
    assert json.loads(unquote(params['shippingAddress'][0])) == {'name': 'Jane Doe', 'city': 'Ottawa'}
    assert json.loads(unquote(params['lineItems'][0])) == [{'title': 'Mug', 'quantity': 2}]


def test_print_url_omits_missing_params():
    params = parse_qs(urlsplit(LabelClient().print_url('#1')).query)
    assert set(params) == {'orderName', 'labelCount'}


def test_print_url_is_understood_by_service(generic_client):
    url = LabelClient('http://localhost').print_url(
        '#2002',
        shipping_address={'name': 'Ana 100% Silva', 'city': 'Lisboa'},
        line_items=[{'title': 'Mug', 'quantity': 3}],
    )
    parts = urlsplit(url)
    html = generic_client.get(f'{parts.path}?{parts.query}').get_data(as_text=True)

    assert 'ANA 100% SILVA' in html
    assert 'Lisboa' in html
    assert '3x Mug' in html
    assert '#2002' in html


@patch('thermal_label_service.client.requests.get')
def test_get_label_success(mock_get):
    mock_get.return_value = MagicMock(text='<html>label</html>')

    result = LabelClient('http://labels.local').get_label('#1')

    assert result == {'success': True, 'html': '<html>label</html>'}
    assert mock_get.call_args.args[0].startswith('http://labels.local/print?')
    assert mock_get.call_args.kwargs['timeout'] == 30


@patch('thermal_label_service.client.requests.get')
def test_get_label_connection_error(mock_get):
    mock_get.side_effect = requests.exceptions.ConnectionError()

    result = LabelClient('http://labels.local').get_label('#1')

    assert result == {'success': False, 'error': 'Cannot connect to http://labels.local'}


@patch('thermal_label_service.client.requests.get')
def test_get_label_timeout(mock_get):
    mock_get.side_effect = requests.exceptions.Timeout()

    assert LabelClient().get_label('#1') == {'success': False, 'error': 'Request timeout'}


@patch('thermal_label_service.client.requests.get')
def test_health(mock_get):
    mock_get.return_value = MagicMock(json=MagicMock(return_value={'status': 'online'}))

    assert LabelClient('http://labels.local').health() == {'status': 'online'}
    mock_get.assert_called_once_with('http://labels.local/health', timeout=30)
