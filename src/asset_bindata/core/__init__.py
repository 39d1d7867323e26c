"""Core utilities for asset discovery.

This package contains the data model, identifier generation and
configuration validation used by the scanner, the pipeline and the
writers.
"""

from .naming import safe_function_name
from .types import Asset, Config, InputConfig
from .validator import ConfigError, validate_config, validate_config_with_error_details

__all__ = [
    "Asset",
    "Config",
    "ConfigError",
    "InputConfig",
    "safe_function_name",
    "validate_config",
    "validate_config_with_error_details",
]
