"""
Image Probe
Reads pixel dimensions from an image file header
"""
from PIL import Image, UnidentifiedImageError

from core.aspect_classifier import ImageDimensions
from core.errors import CollaboratorFailure


def probe_dimensions(path: str) -> ImageDimensions:
    """Return the stored pixel width/height of an image.

    Pillow only parses the header here; pixel data is never decoded.

    Raises:
        CollaboratorFailure: if the file cannot be opened as an image.
    """
    try:
        with Image.open(path) as image:
            width, height = image.size
    except UnidentifiedImageError as e:
        raise CollaboratorFailure(f"Not a recognized image: {path}") from e
    except OSError as e:
        raise CollaboratorFailure(f"Failed to read image dimensions from {path}: {e}") from e

    return ImageDimensions(width=int(width), height=int(height))
