"""
Stack Lab - Configuration
=========================

Runtime defaults for the lab. Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied by the CLI on top of these)

Environment variables (all optional):
    STACKLAB_CAPACITY: Initial stack capacity (positive integer)
    STACKLAB_MAX_CAPACITY: Largest capacity a user may set
    STACKLAB_LOG_LEVEL: Logging level name (DEBUG, INFO, WARNING, ...)
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class LabConfig:
    """
    Configuration for a Stack Lab session.

    Attributes:
        default_capacity: Capacity of a fresh stack (default: 10)
        max_capacity: Upper bound for user-set capacities (default: no bound)
        log_level: Level name used when the CLI configures logging
    """

    default_capacity: int = 10
    max_capacity: Optional[int] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "LabConfig":
        """
        Create LabConfig from environment variables.

        Values that are not positive integers are ignored and the default
        is kept.

        Returns:
            LabConfig with values from environment variables
        """
        config = cls()

        if capacity := _positive_int_from_env("STACKLAB_CAPACITY"):
            config.default_capacity = capacity

        if max_capacity := _positive_int_from_env("STACKLAB_MAX_CAPACITY"):
            config.max_capacity = max_capacity

        if level := os.environ.get("STACKLAB_LOG_LEVEL"):
            config.log_level = level.upper()

        if config.max_capacity is not None and config.default_capacity > config.max_capacity:
            logger.warning(
                f"STACKLAB_CAPACITY {config.default_capacity} exceeds "
                f"STACKLAB_MAX_CAPACITY {config.max_capacity}; using the maximum"
            )
            config.default_capacity = config.max_capacity

        return config


def _positive_int_from_env(name: str) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None:
        return None
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"ignoring {name}={raw!r}: not an integer")
        return None
    if value <= 0:
        logger.warning(f"ignoring {name}={raw!r}: must be positive")
        return None
    return value


# Global config instance
_config: Optional[LabConfig] = None


def get_config() -> LabConfig:
    """Get the global configuration, reading the environment on first use."""
    global _config
    if _config is None:
        _config = LabConfig.from_env()
    return _config


def set_config(config: Optional[LabConfig]) -> None:
    """Replace the global configuration (None resets to the environment)."""
    global _config
    _config = config
