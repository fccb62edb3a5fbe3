"""
Configuration loader module.

Responsible for resolving the ordered list of configuration files (from an
explicit list or a directory), decoding each one and merging them into a
single dictionary.
"""

import logging
import os
import warnings
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from configpath.core.decoders import DecoderRegistry, default_registry
from configpath.core.exceptions import DecodeError, FatalConfigError, SourceLoadWarning
from configpath.core.merger import merge_sources

logger = logging.getLogger(__name__)


class LoadResult:
    """Outcome of loading a set of configuration files."""

    def __init__(self):
        self.sources: List[Tuple[Path, Any]] = []
        self.warnings: List[str] = []

    @property
    def loaded_files(self) -> List[Path]:
        """Files that contributed to the merge, in merge order."""
        return [path for path, _ in self.sources]

    def add_source(self, path: Path, value: Any):
        self.sources.append((path, value))

    def add_warning(self, message: str):
        """Record a warning, log it and issue it as a SourceLoadWarning."""
        self.warnings.append(message)
        logger.warning(message)
        warnings.warn(message, SourceLoadWarning, stacklevel=3)


class ConfigLoader:
    """
    Loads and merges configuration from multiple files.

    Decoding is delegated to a DecoderRegistry; decoder options are passed
    through to it untouched.
    """

    def __init__(self, decoder_options: Optional[Dict[str, Any]] = None,
                 registry: Optional[DecoderRegistry] = None):
        """
        Initialize the configuration loader.

        Args:
            decoder_options: Options forwarded to the registry's decode()
                             (use_ext, force_decoders, driver_args)
            registry: Decoder registry (defaults to YAML/JSON/INI/TOML)
        """
        self.decoder_options = dict(decoder_options or {})
        # Accepted for compatibility, results are always keyed by file
        self.decoder_options.pop('flatten_to_hash', None)
        self.registry = registry or default_registry()

    def resolve_files(self, files: Optional[Sequence] = None,
                      directory: Optional[str] = None) -> List[Path]:
        """
        Determine the ordered list of files to load.

        Args:
            files: Explicit file list, used in the given order
            directory: Directory whose non-hidden regular files are loaded,
                       sorted by name

        Returns:
            Ordered list of file paths

        Raises:
            FatalConfigError: If the directory does not exist or cannot be read
        """
        if directory is None:
            return [Path(f) for f in (files or [])]

        dir_path = Path(directory)
        if not dir_path.is_dir():
            raise FatalConfigError(f"Configuration directory not found: {dir_path}")

        try:
            with os.scandir(dir_path) as entries:
                names = [
                    entry.name for entry in entries
                    if not entry.name.startswith('.') and entry.is_file()
                ]
        except OSError as e:
            raise FatalConfigError(f"Error reading configuration directory {dir_path}: {e}") from e

        return [dir_path / name for name in sorted(names)]

    def load(self, paths: Sequence, result: Optional[LoadResult] = None) -> LoadResult:
        """
        Decode each file in order.

        A file that is missing, cannot be decoded or decodes to nothing is
        skipped with a warning.

        Args:
            paths: Ordered file paths
            result: LoadResult to add to (a new one by default)

        Returns:
            LoadResult with the decoded sources and any warnings
        """
        if result is None:
            result = LoadResult()

        if not paths:
            result.add_warning("No configuration files found")
            return result

        for path in paths:
            path = Path(path)
            if not path.is_file():
                result.add_warning(f"Configuration file not found: {path}")
                continue

            try:
                value = self.registry.decode(path, **self.decoder_options)
            except DecodeError as e:
                result.add_warning(f"Skipping configuration file: {e}")
                continue

            if value is None:
                result.add_warning(f"Configuration file is empty: {path}")
                continue

            result.add_source(path, value)

        return result

    def build(self, paths: Sequence,
              result: Optional[LoadResult] = None) -> Tuple[Dict[str, Any], LoadResult]:
        """
        Load all files and merge them into a single dictionary.

        Args:
            paths: Ordered file paths; later files take precedence
            result: LoadResult to add to (a new one by default)

        Returns:
            Tuple of (merged configuration, LoadResult)
        """
        result = self.load(paths, result)
        config = merge_sources(result.sources)

        if not isinstance(config, dict):
            result.add_warning(
                f"Merged configuration is a {type(config).__name__}, not a mapping; using an empty configuration"
            )
            config = {}

        logger.info(f"Loaded {len(result.sources)} of {len(paths)} configuration file(s)")
        return config, result
