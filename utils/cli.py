import argparse
import os
import re
from dataclasses import dataclass
from typing import List, Optional

from core.errors import InputNotFoundError, InvalidOverrideError, UsageError
from utils.config_utils import resolve_log_file, resolve_output_dir, resolve_verbose

PROG = "resize_images"
HELP_FLAGS = ("-h", "--help")
OVERRIDE_PATTERN = re.compile(r"^[0-9]+$")

USAGE = f"""Usage: {PROG} <input_image> [max_dimension] [--output-dir DIR] [--verbose] [--log-file PATH]
  <input_image>: Relative or absolute path to the original photo (e.g. ./raw/photo.jpg).
  [max_dimension]: Optional override for the larger output's max pixel size (e.g. 1800).
  --output-dir DIR: Directory for both outputs (default: $RESIZE_IMAGES_OUTPUT_DIR or the current directory).
  --verbose: Show ratio and scaling details.
  --log-file PATH: Also append the run log to PATH.
Example: {PROG} photo.jpg 1600
Description: Generates a thumbnail and resized version based on aspect ratio.
Dimensions: The tool inspects the image's width/height and automatically picks the correct
  target sizes (e.g. 200px max for square thumbnails, up to 600px for wide shots).
  Provide [max_dimension] to change the size of the larger output."""


@dataclass(frozen=True)
class ResizeRequest:
    input_path: str
    override_max: Optional[int]
    output_dir: str
    verbose: bool = False
    log_file: Optional[str] = None


class _RaisingArgumentParser(argparse.ArgumentParser):
    """argparse exits with status 2 on bad input; this tool reports usage errors with 1"""

    def error(self, message):
        raise UsageError(message)


def print_usage():
    print(USAGE)


def wants_help(argv: List[str]) -> bool:
    return bool(argv) and argv[0] in HELP_FLAGS


def _build_parser() -> argparse.ArgumentParser:
    parser = _RaisingArgumentParser(prog=PROG, add_help=False)
    parser.add_argument("input_image")
    parser.add_argument("max_dimension", nargs="?")
    parser.add_argument("--output-dir", help="Directory for both outputs")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output to terminal")
    parser.add_argument("--log-file", help="Append the run log to this file")
    return parser


def parse_override(value: Optional[str]) -> Optional[int]:
    """Validate the optional max_dimension argument.

    Only plain digit strings are accepted; zero is rejected because it
    would produce an empty image.
    """
    if value is None:
        return None
    if not OVERRIDE_PATTERN.match(value):
        raise InvalidOverrideError("max_dimension must be a positive integer (pixels).")
    override = int(value)
    if override == 0:
        raise InvalidOverrideError("max_dimension must be greater than zero.")
    return override


def parse_args(argv: List[str]) -> ResizeRequest:
    """Turn the argument list (without the program name) into a ResizeRequest.

    Help flags are handled by the caller via wants_help() before this runs.

    Raises:
        UsageError: no arguments, unknown options, or a missing output or log directory.
        InvalidOverrideError: max_dimension is not a positive integer.
        InputNotFoundError: input_image is not an existing regular file.
    """
    if not argv:
        raise UsageError("an input image is required")

    args = _build_parser().parse_args(argv)

    override_max = parse_override(args.max_dimension)

    if not os.path.isfile(args.input_image):
        raise InputNotFoundError(f"File '{args.input_image}' not found")

    output_dir = resolve_output_dir(args.output_dir)
    if not os.path.isdir(output_dir):
        raise UsageError(f"Output directory '{output_dir}' does not exist")

    log_file = resolve_log_file(args.log_file)
    if log_file and not os.path.isdir(os.path.dirname(log_file) or os.curdir):
        raise UsageError(f"Log file directory for '{log_file}' does not exist")

    return ResizeRequest(
        input_path=args.input_image,
        override_max=override_max,
        output_dir=output_dir,
        verbose=resolve_verbose(args.verbose),
        log_file=log_file,
    )
