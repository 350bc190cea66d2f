"""
Thermal Label Service - Main Application
========================================

Renders printable HTML shipping labels from query-string order data.

Run: python -m thermal_label_service
"""

import re
import json
import logging
from datetime import datetime
from urllib.parse import unquote
from flask import Flask, Response, request, jsonify
from flask_cors import CORS

from . import __version__
from .config import (
    PORT, HOST, DEBUG, LOG_LEVEL, LIVENESS_MESSAGE,
    CORS_ORIGINS, CORS_METHODS, CORS_HEADERS,
    LABEL_STYLE, DEFAULT_LABEL_STYLE, MAX_LABEL_COUNT, LOGO_PATH,
)
from .logo import load_logo
from .models import Order
from .renderers import BaseRenderer, BrandedLabelRenderer, get_renderer

logger = logging.getLogger(__name__)

# =============================================================================
# Application Setup
# =============================================================================

app = Flask(__name__)
app.config['LABEL_STYLE'] = LABEL_STYLE

CORS(app, origins=CORS_ORIGINS, methods=CORS_METHODS, allow_headers=CORS_HEADERS)

# Read once at startup, shared read-only by all requests
_logo = load_logo(LOGO_PATH)

_renderers: dict = {}

_LEADING_INT = re.compile(r'\s*([+-]?)(\d+)')

# =============================================================================
# Request Helpers
# =============================================================================

def _parse_json_param(name: str, default, expected_type: type):
    """Decode a URL-encoded JSON query parameter, falling back to default."""
    raw = request.args.get(name)
    if not raw:
        return default

    try:
        value = json.loads(unquote(raw))
    except (ValueError, RecursionError) as e:
        logger.error("Error parsing %s query param: %s", name, e)
        return default

    if not isinstance(value, expected_type):
        logger.error("Ignoring %s query param: expected %s, got %s",
                     name, expected_type.__name__, type(value).__name__)
        return default

    return value


def _parse_label_count(raw) -> int:
    """Leading-integer coercion; anything unusable becomes 1."""
    match = _LEADING_INT.match(raw or '')
    if not match:
        return 1
    sign, digits = match.groups()
    digits = digits.lstrip('0')
    if sign == '-' or not digits:
        return 1
    # Longer than any allowed count; int() also rejects 4300+ digits
    if len(digits) > len(str(MAX_LABEL_COUNT)):
        return MAX_LABEL_COUNT
    return min(int(digits), MAX_LABEL_COUNT)


def _get_renderer(style: str) -> BaseRenderer:
    """Get (and cache) the renderer for a label style."""
    if style in _renderers:
        return _renderers[style]

    renderer_class = get_renderer(style)
    if not renderer_class:
        logger.warning("Unknown label style %r, using %r", style, DEFAULT_LABEL_STYLE)
        return _get_renderer(DEFAULT_LABEL_STYLE)

    if issubclass(renderer_class, BrandedLabelRenderer):
        renderer = renderer_class(logo=_logo)
    else:
        renderer = renderer_class()

    _renderers[style] = renderer
    return renderer

# =============================================================================
# Health & Info Endpoints
# =============================================================================

@app.route('/', methods=['GET'])
def index():
    """Liveness check."""
    return LIVENESS_MESSAGE


@app.route('/health', methods=['GET'])
def health():
    """Health check with service info."""
    return jsonify({
        'status': 'online',
        'service': 'Thermal Label Service',
        'version': __version__,
        'label_style': _get_renderer(app.config['LABEL_STYLE']).style,
        'logo_loaded': _logo is not None,
        'timestamp': datetime.now().isoformat(),
    })

# =============================================================================
# Label Printing
# =============================================================================

@app.route('/print', methods=['GET'])
def print_label():
    """Render the shipping label HTML for an order.

    Query params:
        orderId - Order ID (optional)
        orderName - Order name/number shown on the label (default "Order")
        labelCount - Number of copies (generic style only, default 1)
        shippingAddress - URL-encoded JSON address object
        lineItems - URL-encoded JSON list of {title, quantity}
    """
    order = Order.from_dict({
        'id': request.args.get('orderId'),
        'name': request.args.get('orderName'),
        'shippingAddress': _parse_json_param('shippingAddress', {}, dict),
        'lineItems': _parse_json_param('lineItems', [], list),
    })
    copies = _parse_label_count(request.args.get('labelCount'))

    renderer = _get_renderer(app.config['LABEL_STYLE'])
    html = renderer.render(order, copies)

    response = Response(html, mimetype='text/html')
    response.headers['Access-Control-Allow-Origin'] = '*'
    return response

# =============================================================================
# Main
# =============================================================================

def main():
    """Run the service."""
    logging.basicConfig(
        level=LOG_LEVEL,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )

    print("=" * 60)
    print("  Thermal Label Service")
    print("=" * 60)
    print(f"  Version: {__version__}")
    print(f"  Port: {PORT}")
    print(f"  Label style: {app.config['LABEL_STYLE']}")
    print(f"  Logo: {'loaded' if _logo else 'not loaded'} ({LOGO_PATH})")
    print("=" * 60)
    print("  Endpoints:")
    print("    GET  /          - Liveness check")
    print("    GET  /health    - Service info")
    print("    GET  /print     - Render label HTML")
    print("=" * 60)

    app.run(host=HOST, port=PORT, debug=DEBUG)


if __name__ == '__main__':
    main()
