"""Default settings and configuration checks

Every configurable value has a module-level default. A configuration
dictionary (usually loaded from YAML) only needs to name the values it
overrides.
"""

import logging

# Settings
DEFAULT_MIN_PASSWORD_LENGTH = 6
DEFAULT_MIN_GRADE = 0.0
DEFAULT_MAX_GRADE = 10.0
DEFAULT_PASS_THRESHOLD = 6.0

KNOWN_KEYS = (
    "min_password_length",
    "min_grade",
    "max_grade",
    "pass_threshold",
)

logger = logging.getLogger(__package__)

def _number(config: dict, key: str, default: float) -> float:
    value = config.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Setting '{key}' must be a number, got {value!r}")
    return float(value)

def check_config(config: dict) -> dict:
    """Validate a configuration dictionary and fill in the defaults

    Args:
        config (dict): Configuration dictionary, may be None or empty

    Returns:
        dict: New dictionary holding a value for every known setting

    Raises:
        ValueError: If the configuration is not a mapping or holds an
            invalid value
    """
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ValueError(f"Configuration must be a mapping, got {type(config).__name__}")

    for key in config:
        if key not in KNOWN_KEYS:
            logger.warning(f"Ignoring unknown setting: '{key}'")

    # Password length must be a positive integer
    min_password_length = config.get("min_password_length", DEFAULT_MIN_PASSWORD_LENGTH)
    if isinstance(min_password_length, bool) or not isinstance(min_password_length, int):
        raise ValueError(
            f"Setting 'min_password_length' must be an integer, got {min_password_length!r}"
        )
    if min_password_length < 1:
        raise ValueError(
            f"Setting 'min_password_length' must be at least 1, got {min_password_length}"
        )

    # Grade range
    min_grade = _number(config, "min_grade", DEFAULT_MIN_GRADE)
    max_grade = _number(config, "max_grade", DEFAULT_MAX_GRADE)
    if min_grade >= max_grade:
        raise ValueError(
            f"Setting 'min_grade' ({min_grade:g}) must be lower than "
            f"'max_grade' ({max_grade:g})"
        )

    pass_threshold = _number(config, "pass_threshold", DEFAULT_PASS_THRESHOLD)
    if not min_grade <= pass_threshold <= max_grade:
        raise ValueError(
            f"Setting 'pass_threshold' ({pass_threshold:g}) must be between "
            f"'min_grade' ({min_grade:g}) and 'max_grade' ({max_grade:g})"
        )

    return {
        "min_password_length": min_password_length,
        "min_grade": min_grade,
        "max_grade": max_grade,
        "pass_threshold": pass_threshold,
    }
