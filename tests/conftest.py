"""
Shared pytest fixtures.

    flask_app       - the service app in testing mode (label style restored after)
    generic_client  - test client rendering the generic style
    branded_client  - test client rendering the branded style
    sample_order    - an Order with a full address and a few items
"""

import pytest

from thermal_label_service.app import app
from thermal_label_service.models import Order


@pytest.fixture
def flask_app():
    original_style = app.config['LABEL_STYLE']
    app.config['TESTING'] = True
    yield app
    app.config['LABEL_STYLE'] = original_style


@pytest.fixture
def generic_client(flask_app):
    flask_app.config['LABEL_STYLE'] = 'generic'
    return flask_app.test_client()


@pytest.fixture
def branded_client(flask_app):
    flask_app.config['LABEL_STYLE'] = 'branded'
    return flask_app.test_client()


@pytest.fixture
def sample_order():
    return Order.from_dict({
        'id': 'gid://shopify/Order/42',
        'name': '#1001',
        'shippingAddress': {
            'name': 'Jane Doe',
            'firstName': 'Jane',
            'company': 'Maple Widgets',
            'address1': '24 Sussex Dr',
            'address2': 'Unit 5',
            'city': 'Ottawa',
            'provinceCode': 'ON',
            'zip': 'K1M 1M4',
            'country': 'Canada',
            'phone': '+1 613 555 0100',
        },
        'lineItems': [
            {'title': 'Desk Lamp', 'quantity': 2},
            {'name': 'Bookend'},
        ],
    })
