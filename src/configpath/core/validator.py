"""
Configuration validator module.

Validates the options a ConfigPath is constructed with. Only the shape of
the options is checked; the configuration data itself is never validated.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

# Options understood by DecoderRegistry.decode() plus compatibility flags
DECODER_OPTIONS = ('use_ext', 'force_decoders', 'driver_args', 'flatten_to_hash')


class ValidationResult:
    """Result of configuration validation."""

    def __init__(self):
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def is_valid(self) -> bool:
        """Check if validation passed."""
        return len(self.errors) == 0

    def add_error(self, message: str):
        """Add a validation error."""
        self.errors.append(message)

    def add_warning(self, message: str):
        """Add a validation warning."""
        self.warnings.append(message)


class ConfigValidator:
    """
    Validates construction options: source mode and decoder options.
    """

    def validate(self, files: Optional[Any], directory: Optional[Any],
                 decoder_options: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Validate all construction options.

        Args:
            files: Explicit file list, or None
            directory: Directory path, or None
            decoder_options: Options for the decoder registry

        Returns:
            ValidationResult with errors and warnings
        """
        result = ValidationResult()
        self.validate_sources(files, directory, result)
        self.validate_decoder_options(decoder_options or {}, result)
        return result

    def validate_sources(self, files: Optional[Any], directory: Optional[Any],
                         result: Optional[ValidationResult] = None) -> ValidationResult:
        """
        Check that exactly one of files/directory is given and is usable.

        The directory is only inspected once the mode itself is valid.
        """
        if result is None:
            result = ValidationResult()

        if files is not None and directory is not None:
            result.add_error("Specify either 'files' or 'directory', not both")
            return result
        if files is None and directory is None:
            result.add_error("One of 'files' or 'directory' is required")
            return result

        if files is not None:
            if isinstance(files, (str, bytes, os.PathLike)):
                result.add_error("'files' must be a list of paths, not a single path")
            elif not files:
                result.add_warning("'files' is empty")
            return result

        dir_path = Path(directory)
        if not dir_path.exists():
            result.add_error(f"Configuration directory does not exist: {dir_path}")
        elif not dir_path.is_dir():
            result.add_error(f"Configuration directory is not a directory: {dir_path}")
        elif not os.access(dir_path, os.R_OK | os.X_OK):
            result.add_error(f"Configuration directory is not readable: {dir_path}")

        return result

    def validate_decoder_options(self, options: Dict[str, Any],
                                 result: Optional[ValidationResult] = None) -> ValidationResult:
        """Check decoder option names and the types of known options."""
        if result is None:
            result = ValidationResult()

        unknown = sorted(set(options) - set(DECODER_OPTIONS))
        if unknown:
            result.add_error(f"Unknown decoder option(s): {', '.join(unknown)}")

        force = options.get('force_decoders')
        if force is not None and (isinstance(force, str) or not isinstance(force, (list, tuple))):
            result.add_error("'force_decoders' must be a list of format names")

        driver_args = options.get('driver_args')
        if driver_args is not None and not isinstance(driver_args, dict):
            result.add_error("'driver_args' must be a mapping of format name to arguments")

        return result
