"""
pytspl
======

Byte-exact encoder for TSPL/TSPL2 label printer programs.

This package provides:
    - One immutable builder per TSPL command (SIZE, TEXT, BLOCK, BITMAP,
      BARCODE, QRCODE, DOWNLOAD, ...)
    - Validation of required fields, ranges and enumerations before any
      byte is produced
    - A Label sequencer that concatenates commands into one program
    - Pillow-based conversion of images into BITMAP payloads
    - Package-wide logging and JSON configuration

The encoder never talks to a printer; it only produces bytes. Sending them
(USB, TCP 9100, serial) is up to the caller.

Basic usage:
    >>> from pytspl import Label, get_logger
    >>> from pytspl.commands import Cls, Print, Size, Text
    >>>
    >>> logger = get_logger(__name__)
    >>> label = Label().extend(
    ...     Size(width=50, height=30, metric=True),
    ...     Cls(),
    ...     Text(x=10, y=10, font="3", rotation=0, x_multiplier=1,
    ...          y_multiplier=1).with_content("Hello", quote=True),
    ...     Print(sets=1),
    ... )
    >>> data = label.render()
    >>> logger.info(f"Generated {len(data)} bytes of TSPL")

Configuration:
    >>> import os
    >>> os.environ['TSPL_LOG_LEVEL'] = 'DEBUG'
    >>>
    >>> from pytspl import load_config, Label
    >>> config = load_config()
    >>> label = Label.from_config(config)

Version: 0.1.0
License: MIT
Python: 3.11+
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path

# =============================================================================
# VERSION METADATA
# =============================================================================

__version__ = "0.1.0"
__author__ = "pytspl Development Team"
__description__ = "Encoder for TSPL/TSPL2 label printer command programs"
__license__ = "MIT"
__python_requires__ = ">=3.11"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

# =============================================================================
# PYTHON VERSION CHECK
# =============================================================================

if sys.version_info < (3, 11):
    raise RuntimeError(
        f"pytspl requires Python 3.11 or newer. "
        f"Current version: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOG_LEVEL_ENV = "TSPL_LOG_LEVEL"
LOG_FILE_ENV = "TSPL_LOG_FILE"


def _setup_logging() -> None:
    """
    Initialise package-wide logging.

    Configures the "pytspl" logger with:
    - A console handler (stderr) at the package level
    - A rotating file handler when TSPL_LOG_FILE names a file
    - Format: [timestamp] LEVEL [module.function:line] message

    The level comes from the TSPL_LOG_LEVEL environment variable (DEBUG,
    INFO, WARNING, ERROR, CRITICAL; default WARNING). Unknown values fall
    back to WARNING.

    Called automatically on import. Idempotent: repeated calls do nothing
    once handlers are installed.
    """
    log_level_str = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.WARNING)

    root_logger = logging.getLogger("pytspl")
    if root_logger.handlers:
        return

    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file = os.environ.get(LOG_FILE_ENV)
    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_path,
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(
                f"Could not initialise file logging: {e}. Using console only."
            )

    root_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Return a logger inside the "pytspl" namespace.

    Names outside the namespace are prefixed, so ``get_logger("app")``
    yields "pytspl.app" and ``get_logger("__main__")`` yields
    "pytspl.main". Loggers inherit the package handlers.

    Args:
        module_name: Usually ``__name__``.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Rendering %d commands", 4)
    """
    if module_name == "pytspl" or module_name.startswith("pytspl."):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger("pytspl.main")
    clean_name = module_name.lstrip(".")
    return logging.getLogger(f"pytspl.{clean_name}")


_setup_logging()

# =============================================================================
# PUBLIC API
# =============================================================================

from pytspl.config import LabelConfig, load_config  # noqa: E402
from pytspl.exceptions import ConfigError, TSPLError, ValidationError  # noqa: E402
from pytspl.imaging import bitmap_from_image, pack_image  # noqa: E402
from pytspl.label import Label  # noqa: E402

__all__ = [
    # Metadata
    "__version__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # Logging
    "get_logger",
    # Configuration
    "LabelConfig",
    "load_config",
    # Exceptions
    "TSPLError",
    "ValidationError",
    "ConfigError",
    # Program
    "Label",
    # Imaging
    "bitmap_from_image",
    "pack_image",
]
