"""
Thermal Label Service Configuration
"""

import os
from pathlib import Path

# =============================================================================
# Server Configuration
# =============================================================================

PORT = int(os.environ.get('PORT', 3000))
HOST = os.environ.get('HOST', '0.0.0.0')
DEBUG = os.environ.get('DEBUG', 'false').lower() == 'true'

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

LIVENESS_MESSAGE = 'Thermal Label Printer App is running'

# =============================================================================
# CORS (labels are opened cross-origin from the store admin console)
# =============================================================================

CORS_ORIGINS = '*'
CORS_METHODS = ['GET', 'POST', 'OPTIONS']
CORS_HEADERS = ['Content-Type', 'Authorization']

# =============================================================================
# Label Configuration
# =============================================================================

# generic or branded
LABEL_STYLE = os.environ.get('LABEL_STYLE', 'generic').lower()
DEFAULT_LABEL_STYLE = 'generic'

DEFAULT_ORDER_NAME = 'Order'

# Upper bound on copies in a single response
MAX_LABEL_COUNT = int(os.environ.get('MAX_LABEL_COUNT', 50))

# Item rows shown before the "+ N more items" note
MAX_LINE_ITEMS = 5

# =============================================================================
# Branding (branded style only)
# =============================================================================

STATIC_DIR = Path(__file__).parent / 'static'

LOGO_PATH = os.environ.get('LOGO_PATH', str(STATIC_DIR / 'logo.png'))

BRAND = {
    'name': os.environ.get('BRAND_NAME', 'AD-Bits'),
    'handle': os.environ.get('BRAND_HANDLE', '@adbits3d'),
    'website': os.environ.get('BRAND_WEBSITE', 'adbits.ca'),
}
