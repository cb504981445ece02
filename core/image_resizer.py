"""
Image Resizer
Scales an image so its larger side matches a max dimension and writes it out
Keeps the source format, aspect ratio and EXIF block
"""
from pathlib import Path
from typing import Dict, Tuple

from PIL import Image, UnidentifiedImageError

from core.errors import CollaboratorFailure
from utils.logger import logDebug


class ImageResizer:
    def __init__(self, resample=Image.Resampling.LANCZOS):
        self.resample = resample

    @staticmethod
    def calculate_new_dimensions(original_size: Tuple[int, int], max_dimension: int) -> Tuple[int, int]:
        """Calculate new dimensions while preserving aspect ratio"""
        width, height = original_size

        if width >= height:
            # Landscape or square
            new_width = max_dimension
            new_height = int(height * (max_dimension / width))
        else:
            # Portrait
            new_height = max_dimension
            new_width = int(width * (max_dimension / height))

        # Never collapse the short side of extreme panoramas to zero
        return (max(new_width, 1), max(new_height, 1))

    def resize_to_max(self, input_path: str, output_path: str, max_dimension: int) -> Dict:
        """
        Resize a single image and write it to output_path

        Args:
            input_path: Path to source image
            output_path: Path for the resized output (may equal input_path)
            max_dimension: Target size of the larger side, in pixels

        Returns:
            Dict with resize metadata

        Raises:
            CollaboratorFailure: if the source cannot be read or the output cannot be written
        """
        try:
            with Image.open(input_path) as source:
                source.load()
                original_size = source.size
                original_format = source.format
                exif_data = source.info.get('exif')

                new_size = self.calculate_new_dimensions(original_size, max_dimension)
                resized = source.resize(new_size, self.resample)
        except UnidentifiedImageError as e:
            raise CollaboratorFailure(f"Not a recognized image: {input_path}") from e
        except OSError as e:
            raise CollaboratorFailure(f"Failed to read {input_path}: {e}") from e

        logDebug(f"🔧 Scaled image: {original_size[0]}×{original_size[1]} → {new_size[0]}×{new_size[1]}")

        save_kwargs = {}
        if exif_data:
            save_kwargs['exif'] = exif_data

        try:
            resized.save(output_path, format=original_format, **save_kwargs)
        except (OSError, ValueError) as e:
            raise CollaboratorFailure(f"Failed to write {output_path}: {e}") from e

        return {
            'input_path': str(input_path),
            'output_path': str(output_path),
            'original_size': {'width': original_size[0], 'height': original_size[1]},
            'processed_size': {'width': new_size[0], 'height': new_size[1]},
            'format': original_format,
            'processed_file_size': Path(output_path).stat().st_size,
        }
