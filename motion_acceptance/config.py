# motion_acceptance/config.py
"""
Evaluation configuration.
"""

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .constants import MS_PER_SECOND
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class EvaluationConfig:
    """Settings shared by capture decoding and test evaluation."""
    # Reject capture windows whose magic header does not match
    verify_magic: bool = True

    # Keep evaluating other test/version pairs when one fails
    isolate_failures: bool = False

    # Description time units -> dataset time units (seconds -> ms)
    time_scale: float = MS_PER_SECOND

    # Time-series field separator; None means any whitespace
    delimiter: Optional[str] = None

    log_level: str = "INFO"

    def __post_init__(self):
        if self.time_scale <= 0:
            raise ConfigurationError(f"time_scale must be positive, got {self.time_scale}.")
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level}."
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EvaluationConfig":
        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                logger.warning(f"Ignoring unknown configuration key '{key}'")
        try:
            return cls(**{k: v for k, v in data.items() if k in known})
        except TypeError as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}") from exc

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "EvaluationConfig":
        """Load a configuration from a JSON file."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise ConfigurationError(f"Cannot load configuration {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration {path} must hold a JSON object.")
        logger.info(f"Loaded configuration from {path}")
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
