"""
Thermal Label Service Client
============================

Python SDK for building print URLs and fetching labels.

Usage:
    from thermal_label_service.client import LabelClient

    client = LabelClient('http://localhost:3000')

    # URL to open in a browser print dialog
    url = client.print_url(
        '#1001',
        shipping_address={'name': 'Jane Doe', 'city': 'Ottawa'},
        line_items=[{'title': 'Mug', 'quantity': 2}],
        label_count=2,
    )

    # Fetch the HTML directly
    result = client.get_label('#1001', shipping_address={'name': 'Jane Doe'})
"""

import json
import requests
from urllib.parse import quote, urlencode
from typing import Dict, Any, Optional, List


class LabelClient:
    """Client for Thermal Label Service."""

    def __init__(self, base_url: str = 'http://localhost:3000', timeout: int = 30):
        """
        Initialize client.

        Args:
            base_url: Base URL of the label service
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    @staticmethod
    def _encode_json(value: Any) -> str:
        # The service URL-decodes JSON params once more after query parsing
        return quote(json.dumps(value), safe='')

    def _print_params(self, order_name: str, shipping_address: Optional[Dict] = None,
                      line_items: Optional[List[Dict]] = None, order_id: str = None,
                      label_count: int = 1) -> Dict[str, Any]:
        params = {'orderName': order_name, 'labelCount': label_count}
        if order_id:
            params['orderId'] = order_id
        if shipping_address is not None:
            params['shippingAddress'] = self._encode_json(shipping_address)
        if line_items is not None:
            params['lineItems'] = self._encode_json(line_items)
        return params

    def print_url(self, order_name: str, shipping_address: Optional[Dict] = None,
                  line_items: Optional[List[Dict]] = None, order_id: str = None,
                  label_count: int = 1) -> str:
        """
        Build the /print URL for an order.

        Args:
            order_name: Order name/number, e.g. '#1001'
            shipping_address: Address dict with storefront keys (name, city, ...)
            line_items: List of {'title': ..., 'quantity': ...}
            order_id: Order ID (optional)
            label_count: Number of copies

        Returns:
            Absolute URL string
        """
        params = self._print_params(order_name, shipping_address, line_items,
                                    order_id, label_count)
        return f'{self.base_url}/print?{urlencode(params)}'

    def get_label(self, order_name: str, shipping_address: Optional[Dict] = None,
                  line_items: Optional[List[Dict]] = None, order_id: str = None,
                  label_count: int = 1) -> Dict[str, Any]:
        """Fetch rendered label HTML."""
        url = self.print_url(order_name, shipping_address, line_items,
                             order_id, label_count)
        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
            return {'success': True, 'html': response.text}

        except requests.exceptions.Timeout:
            return {'success': False, 'error': 'Request timeout'}
        except requests.exceptions.ConnectionError:
            return {'success': False, 'error': f'Cannot connect to {self.base_url}'}
        except requests.exceptions.RequestException as e:
            return {'success': False, 'error': str(e)}

    def health(self) -> Dict[str, Any]:
        """Check service health."""
        try:
            response = requests.get(f'{self.base_url}/health', timeout=self.timeout)
            response.raise_for_status()
            return response.json()

        except requests.exceptions.Timeout:
            return {'success': False, 'error': 'Request timeout'}
        except requests.exceptions.ConnectionError:
            return {'success': False, 'error': f'Cannot connect to {self.base_url}'}
        except (requests.exceptions.RequestException, ValueError) as e:
            return {'success': False, 'error': str(e)}
