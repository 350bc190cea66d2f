"""
Thermal Label Service Models
"""

from .order import Address, LineItem, Order

__all__ = ['Address', 'LineItem', 'Order']
