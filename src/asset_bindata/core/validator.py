"""Configuration validation.

This module loads the configuration JSON Schema, validates a Config
against it and then checks the filesystem: inputs must exist and the
output must be a writable file location. Missing values are defaulted.
"""

import json
import os
import re
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import ValidationError

from .types import Config

# Path to the schema file shipped next to this module
SCHEMA_PATH = Path(__file__).parent / "config.schema.json"

# Output file name used when no output path is configured
DEFAULT_OUTPUT_NAME = "bindata.py"


class ConfigError(ValueError):
    """Raised when a configuration passes the schema but cannot be used."""


def load_schema() -> dict[str, Any]:
    """Load the JSON schema from disk.

    Returns:
        Dictionary containing the JSON Schema.

    Raises:
        FileNotFoundError: If schema file doesn't exist
        json.JSONDecodeError: If schema is invalid JSON
    """
    if not SCHEMA_PATH.exists():
        raise FileNotFoundError(f"Schema file not found: {SCHEMA_PATH}")

    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]


def validate_config(config: Config) -> None:
    """Validate a configuration and fill in defaults.

    Sets ``config.output`` to ``<cwd>/bindata.py`` when it is empty and
    creates the output's parent directory if needed.

    Args:
        config: The configuration to validate, updated in place

    Raises:
        ValidationError: If the configuration doesn't conform to the schema
        ConfigError: If an input is missing, an ignore pattern is invalid
            or the output path is a directory
    """
    jsonschema.validate(instance=config.to_dict(), schema=load_schema())

    for input_config in config.input:
        try:
            os.lstat(input_config.path)
        except OSError as e:
            raise ConfigError(f"Failed to stat input path '{input_config.path}': {e}") from e

    for pattern in config.ignore:
        try:
            re.compile(pattern)
        except re.error as e:
            raise ConfigError(f"Invalid ignore pattern '{pattern}': {e}") from e

    if not config.output:
        config.output = os.path.join(os.getcwd(), DEFAULT_OUTPUT_NAME)

    output = Path(config.output)
    if output.is_dir():
        raise ConfigError(f"Output path is a directory: {config.output}")

    if not output.exists():
        # The file will be created, make sure its directory exists
        output.parent.mkdir(parents=True, exist_ok=True)


def validate_config_with_error_details(config: Config) -> tuple[bool, str | None]:
    """Validate a configuration and return detailed error information.

    This is a convenience wrapper that catches validation errors and
    returns user-friendly error messages.

    Args:
        config: The configuration to validate

    Returns:
        Tuple of (is_valid, error_message). error_message is None if valid.
    """
    try:
        validate_config(config)
        return True, None
    except ValidationError as e:
        error_path = " -> ".join(str(p) for p in e.path) if e.path else "root"
        error_msg = f"Validation error at {error_path}: {e.message}"

        if e.instance:
            error_msg += f"\nInvalid value: {e.instance}"

        return False, error_msg
    except ConfigError as e:
        return False, str(e)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        return False, f"Schema error: {e}"
    except OSError as e:
        return False, f"Output path: {e}"
