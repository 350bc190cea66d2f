"""
Logo Asset
==========

The branded label embeds a logo as an inline data URI. The file is read
once at startup and shared read-only by every request.
"""

import base64
import logging
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import Optional

from PIL import Image

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogoAsset:
    """Logo image bytes and their MIME type."""

    data: bytes
    mime_type: str = 'image/png'

    @property
    def data_uri(self) -> str:
        encoded = base64.b64encode(self.data).decode('ascii')
        return f'data:{self.mime_type};base64,{encoded}'


def load_logo(path) -> Optional[LogoAsset]:
    """
    Load the logo from disk.

    Args:
        path: Image file path (PNG, JPEG, GIF, ...)

    Returns:
        LogoAsset, or None if the file is missing or not an image
    """
    try:
        data = Path(path).read_bytes()
        with Image.open(BytesIO(data)) as img:
            image_format = img.format
    except OSError as e:
        logger.error("Could not load logo %s: %s", path, e)
        return None

    mime_type = Image.MIME.get(image_format, 'image/png')
    logger.info("Loaded logo %s (%s, %d bytes)", path, mime_type, len(data))
    return LogoAsset(data=data, mime_type=mime_type)
