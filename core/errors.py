"""
Error Types
Failures that end a resize_images run with a non-zero exit code
"""


class ResizeImagesError(Exception):
    """Base error; main() reports the message and exits with exit_code"""
    exit_code = 1


class UsageError(ResizeImagesError):
    """Missing or malformed command line arguments"""


class InputNotFoundError(ResizeImagesError):
    """Input path is not an existing regular file"""


class InvalidOverrideError(ResizeImagesError):
    """max_dimension is not a positive integer literal"""


class InvalidDimensionsError(ResizeImagesError):
    """Image reports a zero width or height"""


class CollaboratorFailure(ResizeImagesError):
    """Pillow could not read or write an image"""
