"""
Order Model
===========

Transient order record built from query parameters for a single request.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List

from ..config import DEFAULT_ORDER_NAME


def _text(value: Any) -> str:
    """Coerce a JSON scalar to a display string ('' for missing or nested)."""
    if value is None or value is False or isinstance(value, (dict, list)):
        return ''
    return str(value)


@dataclass
class Address:
    """Shipping address. Every field is optional."""

    name: str = ""
    first_name: str = ""
    company: str = ""
    address1: str = ""
    address2: str = ""
    city: str = ""
    province_code: str = ""
    province: str = ""
    zip: str = ""
    country: str = ""
    phone: str = ""

    @property
    def region(self) -> str:
        return self.province_code or self.province

    @property
    def city_line(self) -> str:
        """City, region and postal code on one line."""
        parts = []
        if self.city:
            parts.append(self.city)
        tail = ' '.join(p for p in [self.region, self.zip] if p)
        if tail:
            parts.append(tail)
        return ', '.join(parts)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'Address':
        """Create from the storefront's camelCase JSON."""
        if not isinstance(data, dict):
            return cls()
        return cls(
            name=_text(data.get('name')),
            first_name=_text(data.get('firstName')),
            company=_text(data.get('company')),
            address1=_text(data.get('address1')),
            address2=_text(data.get('address2')),
            city=_text(data.get('city')),
            province_code=_text(data.get('provinceCode')),
            province=_text(data.get('province')),
            zip=_text(data.get('zip')),
            country=_text(data.get('country')),
            phone=_text(data.get('phone')),
        )


@dataclass
class LineItem:
    """A single order line."""

    title: str = ""
    quantity: Any = 1

    @classmethod
    def from_dict(cls, data: Any) -> 'LineItem':
        if not isinstance(data, dict):
            return cls()
        quantity = data.get('quantity')
        return cls(
            title=_text(data.get('title') or data.get('name')),
            quantity=_text(quantity) or 1,
        )


@dataclass
class Order:
    """Order data needed to print a label."""

    name: str = DEFAULT_ORDER_NAME
    id: Optional[str] = None
    shipping_address: Address = field(default_factory=Address)
    line_items: List[LineItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Order':
        """Create from a dictionary with camelCase keys."""
        items = data.get('lineItems')
        if not isinstance(items, list):
            items = []
        return cls(
            name=_text(data.get('name')) or DEFAULT_ORDER_NAME,
            id=data.get('id'),
            shipping_address=Address.from_dict(data.get('shippingAddress')),
            line_items=[LineItem.from_dict(item) for item in items],
        )
