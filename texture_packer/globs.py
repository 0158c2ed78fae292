"""Global constants and configuration for texture_packer.

This module contains the package-wide defaults, the hard size limits and the
debug logging switches. It provides consistent access to these settings for
the packers, the atlas facade and the exporter.
"""

import logging
import os
import sys

logger = logging.getLogger("texture_packer")
logger.addHandler(logging.NullHandler())

DEFAULT_MAX_WIDTH = 1024
DEFAULT_MAX_HEIGHT = 1024
DEFAULT_ALLOW_ROTATION = True

# Largest canvas edge accepted by TexturePackerConfig
MAX_ATLAS_SIZE = 16384

debug_enabled = os.environ.get("TEXTURE_PACKER_DEBUG", "").lower() in ("1", "true", "yes", "on")

_debug_handler = None


def enable_debug_logging(stream=None) -> logging.Handler:
    """Attach a stream handler to the package logger and lower it to DEBUG.

    Calling it more than once reuses the handler created by the first call.
    """
    global _debug_handler, debug_enabled

    if _debug_handler is None:
        _debug_handler = logging.StreamHandler(stream or sys.stderr)
        _debug_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        logger.addHandler(_debug_handler)
    logger.setLevel(logging.DEBUG)
    debug_enabled = True
    return _debug_handler


def debug_print(*args) -> None:
    if debug_enabled:
        logger.debug(" ".join(str(arg) for arg in args))


if debug_enabled:
    enable_debug_logging()
