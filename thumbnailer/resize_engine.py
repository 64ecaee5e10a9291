"""
ResizeEngine - Decodes an image and re-encodes it at a fixed square size.
"""

import io
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from PIL import Image, ImageOps, UnidentifiedImageError

from .errors import DecodeError

SIZES = (50, 100, 200)


@dataclass(frozen=True)
class ResizedVariant:
    """
    One resized raster.

    Attributes:
        data: Encoded image bytes
        format: Output format name as used in keys (e.g. 'jpeg', 'png')
        size: Square edge length in pixels
        content_type: MIME type of data
    """
    data: bytes
    format: str
    size: int
    content_type: str

    @property
    def width(self) -> int:
        return self.size

    @property
    def height(self) -> int:
        return self.size


class ResizeEngine:
    """
    Resizes images with Pillow.

    Every variant is scaled to cover the target square and center-cropped,
    so output dimensions always equal the requested size. The output
    format follows the decoded image, not the key's extension.
    """

    # Decoded format -> (save format, content type)
    OUTPUT_FORMATS = {
        'JPEG': ('JPEG', 'image/jpeg'),
        'MPO': ('JPEG', 'image/jpeg'),
        'PNG': ('PNG', 'image/png'),
        'GIF': ('GIF', 'image/gif'),
        'WEBP': ('WEBP', 'image/webp'),
        'TIFF': ('TIFF', 'image/tiff'),
    }
    FALLBACK_FORMAT = ('PNG', 'image/png')

    def __init__(self, quality: int = 80, logger: Optional[logging.Logger] = None):
        """
        Initialize resize engine.

        Args:
            quality: JPEG/WebP quality for output (default: 80)
            logger: Optional logger instance
        """
        self.quality = quality
        self.logger = logger or logging.getLogger(__name__)

    def resize(self, image_data: bytes, size: int) -> ResizedVariant:
        """
        Produce one square variant.

        Args:
            image_data: Source image as bytes
            size: Edge length of the output square

        Returns:
            ResizedVariant with the encoded bytes

        Raises:
            DecodeError: If the bytes are not a supported image
        """
        if size <= 0:
            raise ValueError(f"Size must be positive, got {size}")

        img = self._decode(image_data)
        output_format, content_type = self._get_output_format(img.format)

        img = self._convert_color_mode(img, output_format)
        img = ImageOps.fit(img, (size, size), Image.Resampling.LANCZOS)

        output = io.BytesIO()
        if output_format == 'JPEG':
            img.save(output, format='JPEG', quality=self.quality)
        elif output_format == 'WEBP':
            img.save(output, format='WEBP', quality=self.quality)
        else:
            img.save(output, format=output_format)

        return ResizedVariant(
            data=output.getvalue(),
            format=output_format.lower(),
            size=size,
            content_type=content_type,
        )

    def _decode(self, image_data: bytes) -> Image.Image:
        """Open and fully load image data."""
        try:
            img = Image.open(io.BytesIO(image_data))
            img.load()
            return img
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            raise DecodeError(f"Cannot decode image: {e}") from e

    def _get_output_format(self, decoded_format: Optional[str]) -> Tuple[str, str]:
        """Determine output format based on the decoded format."""
        return self.OUTPUT_FORMATS.get(decoded_format or '', self.FALLBACK_FORMAT)

    def _convert_color_mode(self, img: Image.Image, output_format: str) -> Image.Image:
        """Convert image to a color mode the output format can store."""
        if output_format == 'JPEG':
            if img.mode in ('RGBA', 'LA', 'P'):
                img = img.convert('RGBA')
                background = Image.new('RGB', img.size, (255, 255, 255))
                background.paste(img, mask=img.split()[-1])
                return background
            if img.mode not in ('RGB', 'L', 'CMYK'):
                return img.convert('RGB')
            return img
        if output_format == 'GIF':
            return img
        if img.mode == 'P':
            return img.convert('RGBA')
        if img.mode not in ('RGB', 'RGBA', 'L', 'LA'):
            return img.convert('RGB')
        return img
