"""
Encoder configuration.

Only settings outside the wire protocol live here: the codec used for string
fields and the package log level. Separators, quoting and terminators are
protocol constants (see pytspl.formatting) and cannot be configured.

Example:
    >>> from pytspl.config import load_config
    >>> from pytspl import Label
    >>> config = load_config()           # ./tspl_config.json or defaults
    >>> label = Label.from_config(config)
"""

import codecs
import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Final, Optional

from pytspl.exceptions import ConfigError
from pytspl.formatting import DEFAULT_TEXT_ENCODING

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "LOG_LEVELS",
    "LabelConfig",
    "load_config",
]

logger: Final = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE: Final[str] = "tspl_config.json"

LOG_LEVELS: Final[Dict[str, int]] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LabelConfig:
    """
    Encoder settings.

    Attributes:
        text_encoding: Codec for fonts, file names and text content. Must
            match the printer CODEPAGE in effect.
        log_level: Level for the "pytspl" logger.

    Examples:
        >>> LabelConfig().text_encoding
        'utf-8'
        >>> LabelConfig(text_encoding="cp1252", log_level="DEBUG").log_level
        'DEBUG'
    """

    text_encoding: str = DEFAULT_TEXT_ENCODING
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate parameters."""
        try:
            codecs.lookup(self.text_encoding)
        except (LookupError, TypeError) as e:
            raise ConfigError(
                f"Unknown text_encoding: {self.text_encoding!r}",
                context={"text_encoding": self.text_encoding},
            ) from e
        if str(self.log_level).upper() not in LOG_LEVELS:
            raise ConfigError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, "
                f"got {self.log_level!r}"
            )
        object.__setattr__(self, "log_level", str(self.log_level).upper())

    def apply_logging(self) -> None:
        """Set the package logger level from this config."""
        logging.getLogger("pytspl").setLevel(LOG_LEVELS[self.log_level])


def load_config(config_path: Optional[Path] = None) -> LabelConfig:
    """
    Load configuration from a JSON file, falling back to defaults.

    Keys in the file override the defaults. A missing file, invalid JSON or
    a non-object top level logs a warning and yields the defaults; unknown
    keys are ignored with a warning.

    Args:
        config_path: JSON file. Defaults to ./tspl_config.json.

    Returns:
        LabelConfig instance.

    Raises:
        ConfigError: If the file is valid JSON but holds invalid values.
    """
    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_FILE)

    if not config_path.exists():
        logger.info(f"Config file {config_path} not found, using defaults")
        return LabelConfig()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = json.load(f)
        if not isinstance(user_config, dict):
            raise ValueError(
                f"config must be a JSON object, got {type(user_config).__name__}"
            )
    except json.JSONDecodeError as e:
        logger.warning(
            f"Could not parse {config_path}: invalid JSON at line {e.lineno}, "
            f"column {e.colno}. Using defaults."
        )
        return LabelConfig()
    except OSError as e:
        logger.warning(f"Could not read {config_path}: {e}. Using defaults.")
        return LabelConfig()
    except ValueError as e:
        logger.warning(f"Invalid config format: {e}. Using defaults.")
        return LabelConfig()

    known = {f.name for f in fields(LabelConfig)}
    unknown = sorted(set(user_config) - known)
    if unknown:
        logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")

    values: Dict[str, Any] = {k: v for k, v in user_config.items() if k in known}
    config = LabelConfig(**values)
    logger.info(f"Configuration loaded from {config_path}")
    logger.debug(f"Configuration: {config}")
    return config
