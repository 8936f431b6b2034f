"""Configuration management and validation."""

import yaml
import json
from pathlib import Path
from typing import Dict, Any, Union

from asat_hor.core.types import ValidationResult, BASE_ARM_QUALIFIERS
from asat_hor.core.exceptions import ConfigurationError
from asat_hor.modules.parser import MonomerParser


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def create_default_configuration() -> Dict[str, Any]:
    """
    Create default configuration.

    Returns:
        Default configuration dictionary
    """
    return {
        "grammar": {
            "extra_arm_qualifiers": [],
            "unique_chromosomes": False
        },
        "logging": {
            "level": "WARNING",
            "file": None
        }
    }


def load_configuration(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load and validate configuration from file.

    Missing sections and keys are filled from the defaults.

    Args:
        config_path: Path to configuration file (YAML or JSON)

    Returns:
        Validated configuration dictionary

    Raises:
        ConfigurationError: Invalid configuration
        FileNotFoundError: Configuration file not found
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, 'r') as f:
            if config_path.suffix.lower() in ['.yaml', '.yml']:
                config = yaml.safe_load(f)
            elif config_path.suffix.lower() == '.json':
                config = json.load(f)
            else:
                raise ConfigurationError(
                    f"Unsupported config file format: {config_path.suffix}", config_path
                )

    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Error parsing configuration file: {e}", config_path)

    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ConfigurationError("Configuration must be a mapping", config_path)

    try:
        return merge_configurations(create_default_configuration(), config)
    except ConfigurationError as e:
        raise ConfigurationError(str(e), config_path) from e


def validate_configuration_schema(config: Dict[str, Any]) -> ValidationResult:
    """
    Validate configuration structure and values.

    Args:
        config: Configuration dictionary

    Returns:
        ValidationResult with validation status
    """
    errors = []
    warnings = []

    known_sections = set(create_default_configuration())
    for section in config:
        if section not in known_sections:
            warnings.append(f"Unknown configuration section '{section}' - ignored")

    grammar = config.get("grammar", {})
    if not isinstance(grammar, dict):
        errors.append("'grammar' must be a dictionary")
    else:
        qualifiers = grammar.get("extra_arm_qualifiers", [])
        if not isinstance(qualifiers, list):
            errors.append("'grammar.extra_arm_qualifiers' must be a list")
        else:
            for qualifier in qualifiers:
                if not (isinstance(qualifier, str) and len(qualifier) == 1
                        and "A" <= qualifier <= "Z"):
                    errors.append(
                        f"Arm qualifier must be a single upper-case letter, got {qualifier!r}"
                    )
                elif qualifier in BASE_ARM_QUALIFIERS:
                    warnings.append(f"Arm qualifier '{qualifier}' is part of the base grammar")

        if not isinstance(grammar.get("unique_chromosomes", False), bool):
            errors.append("'grammar.unique_chromosomes' must be a boolean")

    logging_config = config.get("logging", {})
    if not isinstance(logging_config, dict):
        errors.append("'logging' must be a dictionary")
    else:
        level = logging_config.get("level", "WARNING")
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            errors.append(f"'logging.level' must be one of {LOG_LEVELS}, got {level!r}")
        log_file = logging_config.get("file")
        if log_file is not None and not isinstance(log_file, str):
            errors.append("'logging.file' must be a path string or null")

    return ValidationResult(
        is_valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
        details={"sections": sorted(config)}
    )


def merge_configurations(
    base_config: Dict[str, Any],
    override_config: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Merge configuration dictionaries with validation.

    Args:
        base_config: Base configuration
        override_config: Override parameters

    Returns:
        Merged configuration

    Raises:
        ConfigurationError: Merged configuration is invalid
    """
    def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge dictionaries."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = merge_dicts(result[key], value)
            else:
                result[key] = value
        return result

    merged = merge_dicts(base_config, override_config)

    validation_result = validate_configuration_schema(merged)
    if not validation_result.is_valid:
        raise ConfigurationError(
            f"Configuration validation failed: {validation_result.errors}"
        )

    return merged


def save_configuration(config: Dict[str, Any], output_path: Union[str, Path]) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration dictionary
        output_path: Output file path

    Raises:
        ConfigurationError: Error saving configuration
    """
    output_path = Path(output_path)

    if output_path.suffix.lower() not in ['.yaml', '.yml', '.json']:
        raise ConfigurationError(f"Unsupported output format: {output_path.suffix}", output_path)

    try:
        with open(output_path, 'w') as f:
            if output_path.suffix.lower() == '.json':
                json.dump(config, f, indent=2)
            else:
                yaml.dump(config, f, default_flow_style=False, indent=2)

    except (yaml.YAMLError, TypeError, IOError) as e:
        raise ConfigurationError(f"Error saving configuration: {e}", output_path)


def parser_from_config(config: Dict[str, Any]) -> MonomerParser:
    """
    Build a monomer parser from the 'grammar' section.

    Raises:
        ConfigurationError: Invalid grammar settings
    """
    validation_result = validate_configuration_schema(config)
    if not validation_result.is_valid:
        raise ConfigurationError(f"Configuration validation failed: {validation_result.errors}")

    grammar = config.get("grammar", {})
    return MonomerParser(
        extra_arm_qualifiers=grammar.get("extra_arm_qualifiers", []),
        unique_chromosomes=grammar.get("unique_chromosomes", False)
    )
