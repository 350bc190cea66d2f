"""
Branded Label Renderer
======================

Single "thank you" label: customer first name, brand logo, date, order
number and a social media footer. Always one label, no barcode, no items.
"""

from typing import Dict, Optional

from .base import BaseRenderer, escape_html, format_label_date
from ..models import Address, Order
from ..config import BRAND
from ..logo import LogoAsset

_INSTAGRAM_ICON = (
    '<svg class="social-icon" viewBox="0 0 24 24" fill="black">'
    '<path d="M12 2.163c3.204 0 3.584.012 4.85.07 3.252.148 4.771 1.691 4.919 4.919'
    '.058 1.265.069 1.645.069 4.849 0 3.205-.012 3.584-.069 4.849-.149 3.225-1.664 '
    '4.771-4.919 4.919-1.266.058-1.644.07-4.85.07-3.204 0-3.584-.012-4.849-.07-3.26-'
    '.149-4.771-1.699-4.919-4.92-.058-1.265-.07-1.644-.07-4.849 0-3.204.013-3.583.07-'
    '4.849.149-3.227 1.664-4.771 4.919-4.919 1.266-.057 1.645-.069 4.849-.069zm0-2.163'
    'c-3.259 0-3.667.014-4.947.072-4.358.2-6.78 2.618-6.98 6.98-.059 1.281-.073 1.689-'
    '.073 4.948 0 3.259.014 3.668.072 4.948.2 4.358 2.618 6.78 6.98 6.98 1.281.058 '
    '1.689.072 4.948.072 3.259 0 3.668-.014 4.948-.072 4.354-.2 6.782-2.618 6.979-6.98'
    '.059-1.28.073-1.689.073-4.948 0-3.259-.014-3.667-.072-4.947-.196-4.354-2.617-6.78-'
    '6.979-6.98-1.281-.059-1.69-.073-4.949-.073zm0 5.838c-3.403 0-6.162 2.759-6.162 '
    '6.162s2.759 6.163 6.162 6.163 6.162-2.759 6.162-6.163c0-3.403-2.759-6.162-6.162-'
    '6.162zm0 10.162c-2.209 0-4-1.79-4-4 0-2.209 1.791-4 4-4s4 1.791 4 4c0 2.21-1.791 '
    '4-4 4zm6.406-11.845c-.796 0-1.441.645-1.441 1.44s.645 1.44 1.441 1.44c.795 0 '
    '1.439-.645 1.439-1.44s-.644-1.44-1.439-1.44z"/></svg>'
)

_WEB_ICON = (
    '<svg class="social-icon" viewBox="0 0 24 24" fill="black">'
    '<circle cx="12" cy="12" r="10" stroke="black" stroke-width="2" fill="none"/>'
    '<path d="M2 12h20M12 2c-2.5 2.5-4 5.5-4 10s1.5 7.5 4 10c2.5-2.5 4-5.5 4-10s-1.5-'
    '7.5-4-10z" stroke="black" stroke-width="1.5" fill="none"/></svg>'
)

_FACEBOOK_ICON = (
    '<svg class="social-icon" viewBox="0 0 24 24" fill="black">'
    '<path d="M24 12.073c0-6.627-5.373-12-12-12s-12 5.373-12 12c0 5.99 4.388 10.954 '
    '10.125 11.854v-8.385H7.078v-3.47h3.047V9.43c0-3.007 1.792-4.669 4.533-4.669 1.312 '
    '0 2.686.235 2.686.235v2.953H15.83c-1.491 0-1.956.925-1.956 1.874v2.25h3.328l-.532 '
    '3.47h-2.796v8.385C19.612 23.027 24 18.062 24 12.073z"/></svg>'
)

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
    }

    .label {
      width: 4in;
      height: 6in;
      padding: 0.3in 0.25in;
      background: #fff;
      display: flex;
      flex-direction: column;
      align-items: center;
    }

    .top-line {
      width: 60px;
      height: 4px;
      background: #000;
      margin-bottom: 0.2in;
    }

    .thank-you {
      text-align: center;
      margin-bottom: 0.35in;
    }

    .thank-you-text {
      font-size: 16px;
      letter-spacing: 4px;
      margin-bottom: 2px;
    }

    .customer-name {
      font-size: 22px;
      letter-spacing: 4px;
    }

    .logo-section {
      display: flex;
      flex-direction: column;
      align-items: center;
      flex: 1;
      justify-content: center;
    }

    .logo {
      width: 120px;
      height: 120px;
      margin-bottom: 0.15in;
    }

    .brand-name {
      font-size: 36px;
      font-weight: bold;
      letter-spacing: 1px;
    }

    .order-info {
      display: flex;
      justify-content: space-between;
      width: 100%;
      margin-top: auto;
      margin-bottom: 0.25in;
      font-size: 14px;
    }

    .footer {
      display: flex;
      justify-content: center;
      gap: 0.25in;
      width: 100%;
      padding-top: 0.15in;
      border-top: 1px solid #eee;
    }

    .social-item {
      display: flex;
      align-items: center;
      gap: 4px;
      font-size: 11px;
    }

    .social-icon {
      width: 16px;
      height: 16px;
    }

    @media print {
      body {
        -webkit-print-color-adjust: exact;
        print-color-adjust: exact;
      }
    }
"""


def customer_first_name(address: Address) -> str:
    """firstName, else the first word of name, else 'Customer'."""
    if address.first_name:
        return address.first_name
    if address.name:
        return address.name.split(' ')[0]
    return 'Customer'


class BrandedLabelRenderer(BaseRenderer):
    """One-off branded thank-you label."""

    style = 'branded'

    def __init__(self, logo: Optional[LogoAsset] = None, brand: Optional[Dict[str, str]] = None):
        self.logo = logo
        self.brand = brand or BRAND

    @property
    def logo_src(self) -> str:
        return self.logo.data_uri if self.logo else ''

    def render(self, order: Order, copies: int = 1) -> str:
        first_name = customer_first_name(order.shipping_address)
        order_name = escape_html(order.name)
        brand_name = escape_html(self.brand['name'])

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Shipping Label - {order_name}</title>
  <style>{_STYLES}  </style>
</head>
<body>
  <div class="label">
    <div class="top-line"></div>

    <div class="thank-you">
      <div class="thank-you-text">THANK YOU,</div>
      <div class="customer-name">{escape_html(first_name.upper())}</div>
    </div>

    <div class="logo-section">
      <img class="logo" src="{self.logo_src}" alt="{brand_name} Logo" />
      <div class="brand-name">{brand_name}</div>
    </div>

    <div class="order-info">
      <div class="date">{format_label_date()}</div>
      <div class="order-number">Order {order_name}</div>
    </div>

    <div class="footer">
      <div class="social-item">
        {_INSTAGRAM_ICON}
        <span>{escape_html(self.brand['handle'])}</span>
      </div>
      <div class="social-item">
        {_WEB_ICON}
        <span>{escape_html(self.brand['website'])}</span>
      </div>
      <div class="social-item">
        {_FACEBOOK_ICON}
        <span>{brand_name}</span>
      </div>
    </div>
  </div>
</body>
</html>"""
