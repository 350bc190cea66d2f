import re
from datetime import date

import pytest

from thermal_label_service.logo import LogoAsset
from thermal_label_service.models import Order
from thermal_label_service.renderers import (
    BrandedLabelRenderer,
    GenericLabelRenderer,
    escape_html,
    format_label_date,
    get_renderer,
)
from thermal_label_service.renderers.branded import customer_first_name
from thermal_label_service.renderers.generic import barcode_bars, render_barcode_svg


# =============================================================================
# Shared helpers
# =============================================================================

def test_escape_html_all_special_characters():
    assert escape_html('<a href="x">Tom & Jerry\'s</a>') == (
        '&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&#039;s&lt;/a&gt;'
    )


def test_escape_html_escapes_existing_entities():
    assert escape_html('&lt;') == '&amp;lt;'


@pytest.mark.parametrize('value', [None, '', 0, False])
def test_escape_html_falsy_is_empty(value):
    assert escape_html(value) == ''


def test_escape_html_stringifies_numbers():
    assert escape_html(3) == '3'


def test_format_label_date():
    assert format_label_date(date(2026, 3, 5)) == 'Mar 5, 2026'
    assert format_label_date(date(2025, 12, 31)) == 'Dec 31, 2025'


def test_registry():
    assert get_renderer('generic') is GenericLabelRenderer
    assert get_renderer('branded') is BrandedLabelRenderer
    assert get_renderer('unknown') is None


# =============================================================================
# Barcode
# =============================================================================

def test_barcode_bar_counts():
    assert len(barcode_bars('AB1')) == 3
    assert len(barcode_bars('A-B')) == 2
    assert barcode_bars('#-!') == []


def test_barcode_geometry():
    # A=65 -> 3, B=66 -> 1, 1=49 -> 2
    assert barcode_bars('AB1') == [(10, 3), (15, 1), (18, 2)]


def test_barcode_svg_rects():
    svg = render_barcode_svg('#1001')
    assert svg.count('<rect') == 4
    assert '<rect x="10" y="5" width="' in svg
    assert 'height="30"' in svg


# =============================================================================
# Generic label
# =============================================================================

def test_generic_single_copy(sample_order):
    html = GenericLabelRenderer().render(sample_order)

    assert html.startswith('<!DOCTYPE html>')
    assert html.count('class="label"') == 1
    assert 'class="page-break"' not in html
    assert 'SHIP TO' in html
    assert '#1001' in html
    assert 'JANE DOE' in html
    assert 'Maple Widgets' in html
    assert 'Ottawa, ON K1M 1M4' in html
    assert '2x Desk Lamp' in html
    assert '1x Bookend' in html
    assert format_label_date() in html


def test_generic_copies_separated_by_page_breaks(sample_order):
    html = GenericLabelRenderer().render(sample_order, copies=3)

    assert html.count('class="label"') == 3
    assert html.count('class="page-break"') == 2
    labels = [m.start() for m in re.finditer('class="label"', html)]
    breaks = [m.start() for m in re.finditer('class="page-break"', html)]
    assert labels[0] < breaks[0] < labels[1] < breaks[1] < labels[2]


@pytest.mark.parametrize('copies', [0, -4])
def test_generic_non_positive_copies_render_one(sample_order, copies):
    html = GenericLabelRenderer().render(sample_order, copies=copies)
    assert html.count('class="label"') == 1


def test_generic_truncates_line_items():
    order = Order.from_dict({
        'name': '#1',
        'lineItems': [{'title': f'Item {i}', 'quantity': i} for i in range(1, 8)],
    })
    html = GenericLabelRenderer().render(order)

    assert html.count('class="item-row"') == 5
    assert '5x Item 5' in html
    assert 'Item 6' not in html
    assert '+ 2 more items' in html


def test_generic_five_items_has_no_more_note():
    order = Order.from_dict({
        'lineItems': [{'title': f'Item {i}'} for i in range(5)],
    })
    html = GenericLabelRenderer().render(order)

    assert html.count('class="item-row"') == 5
    assert 'more items' not in html


def test_generic_item_placeholder_title():
    order = Order.from_dict({'lineItems': [{'quantity': 4}]})
    assert '4x Item' in GenericLabelRenderer().render(order)


def test_generic_no_items():
    html = GenericLabelRenderer().render(Order())
    assert 'No items listed' in html
    assert 'class="item-row"' not in html


def test_generic_empty_address_placeholder():
    html = GenericLabelRenderer().render(Order())
    assert '<div class="recipient">N/A</div>' in html
    assert 'Tel:' not in html


def test_generic_recipient_falls_back_to_first_name():
    order = Order.from_dict({'shippingAddress': {'firstName': 'Ana'}})
    assert '<div class="recipient">ANA</div>' in GenericLabelRenderer().render(order)


def test_generic_escapes_every_field():
    payload = '<i>"x"&\'y\'</i>'
    escaped = '&lt;i&gt;&quot;x&quot;&amp;&#039;y&#039;&lt;/i&gt;'
    order = Order.from_dict({
        'name': payload,
        'shippingAddress': {
            'company': payload,
            'address1': payload,
            'address2': payload,
            'city': payload,
            'country': payload,
            'phone': payload,
        },
        'lineItems': [{'title': payload, 'quantity': payload}],
    })
    html = GenericLabelRenderer().render(order)

    assert '<i>' not in html
    assert '</i>' not in html
    # title, order number, barcode text, company, 2 streets, country, phone, item title
    assert html.count(escaped) >= 9
    assert f'{escaped}x {escaped}' in html


def test_generic_barcode_is_per_copy():
    order = Order.from_dict({'name': 'AB1'})
    html = GenericLabelRenderer().render(order, copies=2)
    assert html.count('<rect') == 6


# =============================================================================
# Branded label
# =============================================================================

def test_customer_first_name_rules():
    order = Order.from_dict({'shippingAddress': {'firstName': 'Ana', 'name': 'Jane Doe'}})
    assert customer_first_name(order.shipping_address) == 'Ana'

    order = Order.from_dict({'shippingAddress': {'name': 'Jane Doe'}})
    assert customer_first_name(order.shipping_address) == 'Jane'

    assert customer_first_name(Order().shipping_address) == 'Customer'


def test_branded_ignores_copies(sample_order):
    html = BrandedLabelRenderer().render(sample_order, copies=5)

    assert html.count('class="label"') == 1
    assert 'page-break' not in html
    assert '<rect' not in html
    assert 'Desk Lamp' not in html


def test_branded_content(sample_order):
    renderer = BrandedLabelRenderer(
        logo=LogoAsset(data=b'abc'),
        brand={'name': 'AD-Bits', 'handle': '@adbits3d', 'website': 'adbits.ca'},
    )
    html = renderer.render(sample_order)

    assert 'THANK YOU,' in html
    assert '<div class="customer-name">JANE</div>' in html
    assert 'src="data:image/png;base64,YWJj"' in html
    assert 'Order #1001' in html
    assert format_label_date() in html
    assert '@adbits3d' in html
    assert 'adbits.ca' in html
    assert html.count('class="social-item"') == 3


def test_branded_without_logo_has_empty_src():
    html = BrandedLabelRenderer(logo=None).render(Order())
    assert 'src=""' in html
    assert 'CUSTOMER' in html


def test_branded_escapes_fields():
    order = Order.from_dict({
        'name': '<b>&',
        'shippingAddress': {'firstName': "o'<x>"},
    })
    html = BrandedLabelRenderer().render(order)

    assert '<b>' not in html
    assert '<x>' not in html
    assert 'Order &lt;b&gt;&amp;' in html
    assert 'O&#039;&lt;X&gt;' in html


def test_branded_escapes_brand_config():
    renderer = BrandedLabelRenderer(brand={'name': 'A&B', 'handle': '@a<b', 'website': 'a"b'})
    html = renderer.render(Order())

    assert 'A&amp;B' in html
    assert '@a&lt;b' in html
    assert 'a&quot;b' in html
