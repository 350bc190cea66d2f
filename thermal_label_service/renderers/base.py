"""
Base Renderer
=============

Abstract base class for label renderers plus the helpers every label
style shares.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Optional

from ..models import Order

_MONTHS = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
           'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')

_HTML_ENTITIES = (
    ('&', '&amp;'),  # must run first
    ('<', '&lt;'),
    ('>', '&gt;'),
    ('"', '&quot;'),
    ("'", '&#039;'),
)


def escape_html(value: Any) -> str:
    """Escape HTML special characters. Falsy values become ''."""
    if not value:
        return ''
    text = str(value)
    for char, entity in _HTML_ENTITIES:
        text = text.replace(char, entity)
    return text


def format_label_date(day: Optional[date] = None) -> str:
    """Format a date as 'Oct 9, 2026' regardless of process locale."""
    day = day or date.today()
    return f'{_MONTHS[day.month - 1]} {day.day}, {day.year}'


class BaseRenderer(ABC):
    """Abstract base class for label renderers."""

    # Name used in configuration (LABEL_STYLE)
    style: str = ''

    # Whether repeated copies are honoured
    supports_copies: bool = False

    @abstractmethod
    def render(self, order: Order, copies: int = 1) -> str:
        """
        Render a complete HTML document for the order.

        Args:
            order: Order to print
            copies: Number of label panels requested

        Returns:
            HTML document string
        """
        pass

    def label_count(self, copies: int) -> int:
        """Number of panels this renderer will actually produce."""
        if not self.supports_copies:
            return 1
        return max(1, copies)
