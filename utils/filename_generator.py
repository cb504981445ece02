"""
Filename Generator
Derives the thumbnail and smaller-version output names from the input filename
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

THUMBNAIL_SUFFIX = "-thumbnail"


@dataclass(frozen=True)
class OutputNames:
    thumbnail_path: Path
    smaller_path: Path


def split_extension(filename: str) -> Tuple[str, str]:
    """Split on the LAST dot: 'vacation.photo.jpg' -> ('vacation.photo', 'jpg').

    A name without a dot has an empty extension.
    """
    base, dot, extension = filename.rpartition(".")
    if not dot:
        return filename, ""
    return base, extension


def _with_extension(base: str, extension: str) -> str:
    return f"{base}.{extension}" if extension else base


def derive_output_names(input_path: str, output_dir: Optional[str] = None) -> OutputNames:
    """Build both output paths inside output_dir (default: current directory).

    Only the basename of input_path is used, so outputs never land next to
    the input unless output_dir points there.
    """
    filename = os.path.basename(input_path)
    base, extension = split_extension(filename)

    target_dir = Path(output_dir) if output_dir else Path(".")
    return OutputNames(
        thumbnail_path=target_dir / _with_extension(f"{base}{THUMBNAIL_SUFFIX}", extension),
        smaller_path=target_dir / _with_extension(base, extension),
    )


def overwrites_input(names: OutputNames, input_path: str) -> bool:
    """True when the smaller output would replace the input file"""
    try:
        return names.smaller_path.resolve() == Path(input_path).resolve()
    except OSError:
        return False
