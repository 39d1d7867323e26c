"""asset-bindata - embed files into generated Python modules.

This package discovers the files of one or more input directories,
gives each a logical name and a unique identifier, and writes a Python
module that serves their contents through ``asset(name)``.
"""

__version__ = "0.1.0"

# Core library interface
from .pipeline import BindataPipeline, find_assets, translate
from .registry import WriterRegistry
from .scanner import InvalidFileError, find_files

# Core utilities
from .core import Asset, Config, ConfigError, InputConfig, safe_function_name
from .core import validate_config, validate_config_with_error_details

# CLI interface
from .cli import generate_bindata, main

# Register the built-in writers
WriterRegistry.discover_writers()

__all__ = [
    # Primary library interface
    "BindataPipeline",
    "WriterRegistry",
    "find_assets",
    "find_files",
    "translate",
    # Core utilities
    "Asset",
    "Config",
    "ConfigError",
    "InputConfig",
    "InvalidFileError",
    "safe_function_name",
    "validate_config",
    "validate_config_with_error_details",
    # CLI
    "generate_bindata",
    "main",
]
