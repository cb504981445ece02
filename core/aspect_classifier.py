"""
Aspect Classifier
Maps an image's width/height ratio to a size category and the
thumbnail / smaller max dimensions used for resizing
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_DOWN
from typing import Optional

from core.errors import InvalidDimensionsError

RATIO_PRECISION = Decimal("0.01")


@dataclass(frozen=True)
class ImageDimensions:
    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class SizeCategory:
    label: str
    thumbnail_max: int
    smaller_max: int


@dataclass(frozen=True)
class ResizeSpec:
    thumbnail_max: int
    smaller_max: int


SQUARE = SizeCategory("1x1", thumbnail_max=200, smaller_max=1200)
WIDE = SizeCategory("2x1", thumbnail_max=400, smaller_max=1200)
PANORAMA = SizeCategory("3x1", thumbnail_max=600, smaller_max=1600)
TALL = SizeCategory("1x2", thumbnail_max=400, smaller_max=1200)
EXTRA_TALL = SizeCategory("3x2", thumbnail_max=600, smaller_max=1800)
# Very extreme ratios reuse the square sizes
FALLBACK = SQUARE


def compute_aspect_ratio(dimensions: ImageDimensions) -> Decimal:
    """Return width / height truncated to two decimal places.

    Truncation (not rounding) keeps 1205x1000 at 1.20 on the square/wide
    boundary.

    Raises:
        InvalidDimensionsError: if width or height is zero or negative.
    """
    if dimensions.width <= 0 or dimensions.height <= 0:
        raise InvalidDimensionsError(
            f"Image reports invalid dimensions {dimensions}; width and height must be positive"
        )
    ratio = Decimal(dimensions.width) / Decimal(dimensions.height)
    return ratio.quantize(RATIO_PRECISION, rounding=ROUND_DOWN)


def classify_ratio(ratio: Decimal) -> SizeCategory:
    """Pick the size category for an already truncated aspect ratio"""
    if Decimal("0.8") <= ratio <= Decimal("1.2"):
        return SQUARE
    if Decimal("1.2") < ratio <= Decimal("2.5"):
        if ratio >= Decimal("2.0"):
            return PANORAMA
        return WIDE
    if Decimal("0.4") <= ratio < Decimal("0.8"):
        if ratio >= Decimal("0.5"):
            return TALL
        return EXTRA_TALL
    return FALLBACK


def classify(dimensions: ImageDimensions) -> SizeCategory:
    return classify_ratio(compute_aspect_ratio(dimensions))


def build_resize_spec(category: SizeCategory, override_max: Optional[int] = None) -> ResizeSpec:
    """Combine a category's sizes with an optional smaller-version override.

    The override only replaces smaller_max; the thumbnail size always comes
    from the category.
    """
    smaller_max = category.smaller_max if override_max is None else override_max
    return ResizeSpec(thumbnail_max=category.thumbnail_max, smaller_max=smaller_max)
