#!/usr/bin/env python3
"""
resize_images
Creates a thumbnail and a smaller version of a photo, sized by its aspect ratio

Usage:
    python3 main.py <input_image> [max_dimension]
    python3 main.py -h | --help
"""
import sys
from typing import List, Optional

from core.errors import ResizeImagesError, UsageError
from core.resize_runner import ResizeRunner
from utils.cli import parse_args, print_usage, wants_help
from utils.logger import logError, setup_logging, teardown_logging


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if wants_help(argv):
        print_usage()
        return 0

    try:
        request = parse_args(argv)
    except UsageError as e:
        if argv:
            logError(f"Error: {e}")
        print_usage()
        return e.exit_code
    except ResizeImagesError as e:
        logError(f"Error: {e}")
        return e.exit_code

    file_handler = None
    try:
        file_handler = setup_logging(request.verbose, request.log_file)
        runner = ResizeRunner(request.input_path, request.override_max, request.output_dir)
        runner.run()
    except ResizeImagesError as e:
        logError(f"Error: {e}")
        return e.exit_code
    finally:
        teardown_logging(file_handler)

    return 0


if __name__ == "__main__":
    sys.exit(main())
