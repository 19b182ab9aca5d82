"""
Configuration validation module.
"""

from dataclasses import dataclass
from typing import Dict
from urllib.parse import urlparse


@dataclass
class ValidationResult:
    """Result of a configuration validation."""

    is_valid: bool
    message: str


def validate_log_level(level: str) -> ValidationResult:
    """Validate log level."""
    valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if level.upper() in valid_levels:
        return ValidationResult(True, "Valid log level")
    return ValidationResult(
        False, f"Invalid log level. Must be one of: {', '.join(valid_levels)}"
    )


def validate_log_file(path: str) -> ValidationResult:
    """Validate log file path."""
    try:
        from pathlib import Path

        log_dir = Path(path).parent
        if not log_dir.exists():
            return ValidationResult(False, f"Log directory does not exist: {log_dir}")
        return ValidationResult(True, "Valid log file path")
    except (TypeError, ValueError) as e:
        return ValidationResult(False, f"Invalid log file path: {str(e)}")


def validate_extern_docs_url(url: str) -> ValidationResult:
    """Validate the base URL used for native type links."""
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return ValidationResult(False, "Extern docs URL must be an absolute http(s) URL")
    if not url.endswith("/"):
        return ValidationResult(False, "Extern docs URL must end with '/'")
    return ValidationResult(True, "Valid extern docs URL")


def validate_config(config: Dict[str, str]) -> Dict[str, ValidationResult]:
    """Validate all configuration settings."""
    results = {}

    if "LOG_LEVEL" in config:
        results["LOG_LEVEL"] = validate_log_level(config["LOG_LEVEL"])

    if "LOG_FILE" in config:
        results["LOG_FILE"] = validate_log_file(config["LOG_FILE"])

    if "EXTERN_DOCS_URL" in config:
        results["EXTERN_DOCS_URL"] = validate_extern_docs_url(
            config["EXTERN_DOCS_URL"]
        )

    return results
