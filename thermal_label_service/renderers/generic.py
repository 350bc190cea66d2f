"""
Generic Label Renderer
======================

Ship-to label for 4x6 inch thermal printers: header with order number and
date, recipient address, order contents and a decorative order barcode.
Supports multiple copies, each on its own printed page.
"""

import re
from typing import List, Tuple

from .base import BaseRenderer, escape_html, format_label_date
from ..models import Address, LineItem, Order
from ..config import MAX_LINE_ITEMS

# Barcode geometry (SVG user units)
BAR_START_X = 10
BAR_GAP = 2
BAR_Y = 5
BAR_HEIGHT = 30

_NON_ALNUM = re.compile(r'[^A-Za-z0-9]')

_STYLES = """
    @page {
      size: 4in 6in;
      margin: 0;
    }

    * {
      box-sizing: border-box;
      margin: 0;
      padding: 0;
    }

    body {
      font-family: 'Arial', 'Helvetica', sans-serif;
      background: #fff;
      color: #000;
    }

    .label {
      width: 4in;
      height: 6in;
      padding: 0.2in;
      display: flex;
      flex-direction: column;
      overflow: hidden;
    }

    .label-header {
      display: flex;
      justify-content: space-between;
      align-items: flex-start;
      border-bottom: 3px solid #000;
      padding-bottom: 0.1in;
      margin-bottom: 0.15in;
    }

    .ship-to {
      font-size: 22px;
      font-weight: bold;
      letter-spacing: 2px;
    }

    .order-meta {
      text-align: right;
      font-size: 12px;
    }

    .order-number {
      font-size: 16px;
      font-weight: bold;
    }

    .address {
      font-size: 15px;
      line-height: 1.35;
    }

    .recipient {
      font-size: 20px;
      font-weight: bold;
      margin-bottom: 4px;
    }

    .divider {
      border-top: 2px dashed #000;
      margin: 0.15in 0;
    }

    .contents {
      flex: 1;
      font-size: 13px;
    }

    .section-title {
      font-size: 11px;
      font-weight: bold;
      letter-spacing: 2px;
      margin-bottom: 4px;
    }

    .item-row {
      padding: 2px 0;
      white-space: nowrap;
      overflow: hidden;
      text-overflow: ellipsis;
    }

    .more-items,
    .no-items {
      font-style: italic;
      padding-top: 2px;
    }

    .label-footer {
      border-top: 3px solid #000;
      padding-top: 0.1in;
      text-align: center;
    }

    .barcode {
      height: 40px;
    }

    .barcode-text {
      font-size: 12px;
      letter-spacing: 3px;
    }

    .page-break {
      page-break-after: always;
      break-after: page;
    }

    @media print {
      body {
        -webkit-print-color-adjust: exact;
        print-color-adjust: exact;
      }
    }
"""


def barcode_bars(order_name: str) -> List[Tuple[int, int]]:
    """
    Compute decorative bar geometry for an order name.

    Non-alphanumeric characters are dropped. Each remaining character
    yields one bar of width (char code mod 3) + 1.

    Returns:
        List of (x, width) tuples, left to right
    """
    bars = []
    x = BAR_START_X
    for char in _NON_ALNUM.sub('', order_name or ''):
        width = (ord(char) % 3) + 1
        bars.append((x, width))
        x += width + BAR_GAP
    return bars


def render_barcode_svg(order_name: str) -> str:
    """Inline SVG for the decorative order barcode."""
    bars = barcode_bars(order_name)
    view_width = (bars[-1][0] + bars[-1][1] if bars else 0) + BAR_START_X
    rects = ''.join(
        f'<rect x="{x}" y="{BAR_Y}" width="{width}" height="{BAR_HEIGHT}" />'
        for x, width in bars
    )
    return (
        f'<svg class="barcode" viewBox="0 0 {view_width} {BAR_HEIGHT + 2 * BAR_Y}" '
        f'preserveAspectRatio="none" fill="black">{rects}</svg>'
    )


class GenericLabelRenderer(BaseRenderer):
    """Multi-copy ship-to label."""

    style = 'generic'
    supports_copies = True

    def __init__(self, max_line_items: int = MAX_LINE_ITEMS):
        self.max_line_items = max_line_items

    def render(self, order: Order, copies: int = 1) -> str:
        formatted_date = format_label_date()
        panel = self._render_panel(order, formatted_date)
        page_break = '\n  <div class="page-break"></div>\n'
        panels = page_break.join([panel] * self.label_count(copies))

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Shipping Label - {escape_html(order.name)}</title>
  <style>{_STYLES}  </style>
</head>
<body>
{panels}
</body>
</html>"""

    def _render_panel(self, order: Order, formatted_date: str) -> str:
        order_name = escape_html(order.name)
        return f"""  <div class="label">
    <div class="label-header">
      <div class="ship-to">SHIP TO</div>
      <div class="order-meta">
        <div class="order-number">{order_name}</div>
        <div class="order-date">{formatted_date}</div>
      </div>
    </div>

    <div class="address">
{self._render_address(order.shipping_address)}
    </div>

    <div class="divider"></div>

    <div class="contents">
      <div class="section-title">CONTENTS</div>
{self._render_items(order.line_items)}
    </div>

    <div class="label-footer">
      {render_barcode_svg(order.name)}
      <div class="barcode-text">{order_name}</div>
    </div>
  </div>"""

    def _render_address(self, address: Address) -> str:
        recipient = address.name or address.first_name or 'N/A'
        lines = [f'      <div class="recipient">{escape_html(recipient.upper())}</div>']
        for css_class, value in [
            ('company', address.company),
            ('street', address.address1),
            ('street', address.address2),
            ('city', address.city_line),
            ('country', address.country),
        ]:
            if value:
                lines.append(f'      <div class="{css_class}">{escape_html(value)}</div>')
        if address.phone:
            lines.append(f'      <div class="phone">Tel: {escape_html(address.phone)}</div>')
        return '\n'.join(lines)

    def _render_items(self, items: List[LineItem]) -> str:
        if not items:
            return '      <div class="no-items">No items listed</div>'

        rows = [
            f'      <div class="item-row">'
            f'{escape_html(item.quantity)}x {escape_html(item.title or "Item")}</div>'
            for item in items[:self.max_line_items]
        ]
        remaining = len(items) - self.max_line_items
        if remaining > 0:
            rows.append(f'      <div class="more-items">+ {remaining} more items</div>')
        return '\n'.join(rows)
