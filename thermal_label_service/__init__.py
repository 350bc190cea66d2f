"""
Thermal Label Service
=====================

Small HTTP service that renders printable 4x6 inch HTML shipping labels
for e-commerce orders.

Label styles:
- generic - ship-to label with address, contents and order barcode
- branded - single "thank you" label with logo and social footer

Usage:
    python -m thermal_label_service

Endpoints:
    GET  /          - Liveness string
    GET  /health    - Service info (JSON)
    GET  /print     - Render label HTML from query parameters
"""

__version__ = '1.0.0'
__author__ = 'AD-Bits'
