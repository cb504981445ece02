"""
Resize Runner
Runs one resize_images invocation: probe, classify, then write thumbnail and smaller version
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from core.aspect_classifier import (
    ImageDimensions,
    ResizeSpec,
    SizeCategory,
    build_resize_spec,
    classify_ratio,
    compute_aspect_ratio,
)
from core.image_probe import probe_dimensions
from core.image_resizer import ImageResizer
from utils.filename_generator import OutputNames, derive_output_names, overwrites_input
from utils.logger import logDebug, logInfo, logProgress, logWarn


@dataclass(frozen=True)
class ResizeResult:
    dimensions: ImageDimensions
    aspect_ratio: Decimal
    category: SizeCategory
    spec: ResizeSpec
    outputs: OutputNames


class ResizeRunner:
    def __init__(self, input_path: str, override_max: Optional[int] = None, output_dir: Optional[str] = None,
                 resizer: Optional[ImageResizer] = None):
        self.input_path = input_path
        self.override_max = override_max
        self.output_dir = output_dir
        self.resizer = resizer or ImageResizer()

    def plan(self) -> ResizeResult:
        """Probe the input and work out sizes and output names without writing anything"""
        dimensions = probe_dimensions(self.input_path)
        logProgress(f"Original image dimensions: {dimensions}")

        aspect_ratio = compute_aspect_ratio(dimensions)
        logDebug(f"{dimensions.width} / {dimensions.height} = {aspect_ratio} (truncated to 2 decimals)")
        category = classify_ratio(aspect_ratio)
        spec = build_resize_spec(category, self.override_max)
        if self.override_max is not None:
            logDebug(f"Smaller version max overridden: {category.smaller_max}px → {spec.smaller_max}px")

        logProgress(f"Aspect ratio: {aspect_ratio} (classified as {category.label})")
        logProgress(f"Thumbnail max dimension: {spec.thumbnail_max}px")
        logProgress(f"Smaller version max dimension: {spec.smaller_max}px")

        outputs = derive_output_names(self.input_path, self.output_dir)
        return ResizeResult(dimensions, aspect_ratio, category, spec, outputs)

    @staticmethod
    def _log_written(metadata):
        size = metadata['processed_size']
        logDebug(f"💾 Wrote {metadata['output_path']}: {size['width']}×{size['height']} {metadata['format']}, {metadata['processed_file_size']} bytes")

    def run(self) -> ResizeResult:
        result = self.plan()
        outputs = result.outputs
        logInfo(f"📁 Output directory: {self.output_dir or '.'}")

        if overwrites_input(outputs, self.input_path):
            logWarn(f"Smaller version will overwrite the original file: {outputs.smaller_path}")

        logProgress(f"Creating thumbnail: {outputs.thumbnail_path}")
        written = self.resizer.resize_to_max(self.input_path, str(outputs.thumbnail_path), result.spec.thumbnail_max)
        self._log_written(written)

        logProgress(f"Creating smaller version: {outputs.smaller_path}")
        written = self.resizer.resize_to_max(self.input_path, str(outputs.smaller_path), result.spec.smaller_max)
        self._log_written(written)

        logProgress("Done! Created:")
        logProgress(f"  - {outputs.thumbnail_path} ({result.spec.thumbnail_max}px max)")
        logProgress(f"  - {outputs.smaller_path} ({result.spec.smaller_max}px max)")
        return result
