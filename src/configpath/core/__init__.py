"""
Configuration core modules.

Contains the main configuration components:
- ConfigPath: Main facade for path-based configuration access
- ConfigLoader: Resolves, decodes and merges configuration files
- ConfigValidator: Validates construction options
- DecoderRegistry: Per-format file decoders
- OverrideLayer: Path-keyed value overrides
"""

from configpath.core.exceptions import ConfigError, FatalConfigError, DecodeError, SourceLoadWarning
from configpath.core.manager import ConfigPath
from configpath.core.loader import ConfigLoader, LoadResult
from configpath.core.validator import ConfigValidator, ValidationResult
from configpath.core.decoders import DecoderRegistry, default_registry
from configpath.core.merger import merge, merge_all
from configpath.core.accessor import ABSENT, resolve, split_path
from configpath.core.overrides import NOT_PRESENT, OverrideLayer

__all__ = [
    'ConfigError',
    'FatalConfigError',
    'DecodeError',
    'SourceLoadWarning',
    'ConfigPath',
    'ConfigLoader',
    'LoadResult',
    'ConfigValidator',
    'ValidationResult',
    'DecoderRegistry',
    'default_registry',
    'merge',
    'merge_all',
    'ABSENT',
    'resolve',
    'split_path',
    'NOT_PRESENT',
    'OverrideLayer',
]
