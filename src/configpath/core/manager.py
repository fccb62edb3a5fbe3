"""
Configuration management module.

Provides path-based access to configuration merged from several files,
with a clean separation of concerns:
- ConfigValidator: Validates construction options
- ConfigLoader: Resolves, decodes and merges the source files
- accessor.resolve: Walks the merged tree along a path
- OverrideLayer: Masks values for tests and sessions
- ConfigPath: Facade that orchestrates the above
"""

import logging
import warnings
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from configpath.core.accessor import ABSENT, resolve
from configpath.core.decoders import DecoderRegistry
from configpath.core.exceptions import FatalConfigError
from configpath.core.loader import ConfigLoader, LoadResult
from configpath.core.overrides import NOT_PRESENT, OverrideLayer
from configpath.core.validator import ConfigValidator

logger = logging.getLogger(__name__)


class ConfigPath:
    """
    Path-based configuration access over one or more merged files.

    The merged configuration is built lazily on first access and cached
    until reload(). Later files take precedence over earlier ones.

    Example:
        config = ConfigPath(files=['base.yml', 'local.yml'])
        config.fetch('database/hosts/0/name')
    """

    def __init__(self, files: Optional[Sequence] = None,
                 directory: Optional[str] = None,
                 decoder_options: Optional[Dict[str, Any]] = None,
                 convert_empty_to_none: bool = False,
                 registry: Optional[DecoderRegistry] = None):
        """
        Initialize the configuration.

        Args:
            files: Ordered list of configuration files
            directory: Directory whose non-hidden files are loaded in name order
            decoder_options: Options passed through to the decoders
                             (use_ext, force_decoders, driver_args)
            convert_empty_to_none: Return None from fetch() for empty mappings
            registry: Decoder registry (defaults to YAML/JSON/INI/TOML)

        Raises:
            FatalConfigError: If both or neither of files/directory are given,
                              or the directory cannot be read
        """
        validation_result = ConfigValidator().validate(files, directory, decoder_options)

        if not validation_result.is_valid():
            error_messages = '\n'.join(validation_result.errors)
            raise FatalConfigError(f"Invalid configuration options:\n{error_messages}")

        for warning in validation_result.warnings:
            warnings.warn(f"Configuration warning: {warning}", UserWarning, stacklevel=2)

        self._files: List[Path] = [Path(f) for f in files] if files is not None else []
        self._directory = Path(directory) if directory is not None else None
        self.convert_empty_to_none = convert_empty_to_none

        self.loader = ConfigLoader(decoder_options, registry)
        self.overrides = OverrideLayer()

        self._config: Optional[Dict[str, Any]] = None
        self._load_result: Optional[LoadResult] = None

    @property
    def files(self) -> List[Path]:
        """Files added explicitly (the file list, or files added to a directory)."""
        return list(self._files)

    @property
    def directory(self) -> Optional[Path]:
        return self._directory

    @property
    def is_loaded(self) -> bool:
        """Whether the merged configuration is currently cached."""
        return self._config is not None

    @property
    def config(self) -> Dict[str, Any]:
        """A copy of the merged configuration, built on first access."""
        return deepcopy(self._merged())

    @property
    def warnings(self) -> List[str]:
        """Warnings from the most recent build."""
        if self._load_result is None:
            return []
        return list(self._load_result.warnings)

    def source_files(self) -> List[Path]:
        """
        Ordered list of files a build would load.

        Raises:
            FatalConfigError: If the directory can no longer be read
        """
        if self._directory is None:
            return list(self._files)
        return self.loader.resolve_files(directory=self._directory) + self._files

    def _merged(self) -> Dict[str, Any]:
        if self._config is None:
            self._build()
        return self._config

    def _build(self):
        result = LoadResult()
        try:
            paths = self.source_files()
        except FatalConfigError as e:
            # Directory removed since construction
            result.add_warning(f"{e}; loading added files only")
            paths = list(self._files)

        logger.debug(f"Building configuration from {len(paths)} file(s)")
        self._config, self._load_result = self.loader.build(paths, result)

    def fetch(self, path: str) -> Any:
        """
        Get the value at a path.

        Overrides are checked first. Otherwise the merged configuration is
        walked segment by segment ('a/b/0/c'). A missing path and a stored
        null both return None. Mappings and lists are returned as copies, so
        changing them does not affect later fetches.

        Args:
            path: Slash-delimited path; a leading slash is ignored

        Returns:
            The value, or None if the path does not resolve
        """
        value = self.overrides.lookup(path)
        if value is not NOT_PRESENT:
            return value

        value = resolve(self._merged(), path)
        if value is ABSENT:
            return None
        if isinstance(value, (dict, list)):
            if self.convert_empty_to_none and isinstance(value, dict) and not value:
                return None
            return deepcopy(value)
        return value

    def override(self, path: str, value: Any):
        """
        Mask the value at a path.

        The override applies to the exact path string only and lasts until
        clear_overrides() or reload().
        """
        if self._config is None:
            self._build()
        self.overrides.set(path, value)

    mask = override

    def clear_overrides(self):
        """Remove all overrides."""
        self.overrides.clear()

    clear_mask = clear_overrides

    def add_file(self, path):
        """
        Add a file to the end of the source list.

        The file is not read until the next reload().
        """
        self._files.append(Path(path))

    def reload(self):
        """Discard the merged configuration and all overrides."""
        logger.debug(f"Reloading configuration; clearing {len(self.overrides)} override(s)")
        self._config = None
        self._load_result = None
        self.overrides.clear()
