"""
Thermal Label Service Renderers
===============================

HTML label styles.
"""

from .base import BaseRenderer, escape_html, format_label_date
from .generic import GenericLabelRenderer
from .branded import BrandedLabelRenderer

__all__ = [
    'BaseRenderer', 'GenericLabelRenderer', 'BrandedLabelRenderer',
    'escape_html', 'format_label_date',
]

# Renderer registry
RENDERERS = {
    'generic': GenericLabelRenderer,
    'branded': BrandedLabelRenderer,
}


def get_renderer(style: str) -> type:
    """Get renderer class by style name."""
    return RENDERERS.get(style)
