"""
Path-based access to configuration merged from multiple files.

Main entry point:
    from configpath import ConfigPath

    config = ConfigPath(directory='conf.d')
    host = config.fetch('database/hosts/0/name')
"""

from configpath.core import (
    ConfigError,
    FatalConfigError,
    DecodeError,
    SourceLoadWarning,
    ConfigPath,
    ConfigLoader,
    LoadResult,
    ConfigValidator,
    ValidationResult,
    DecoderRegistry,
    default_registry,
    merge,
    merge_all,
    ABSENT,
    resolve,
    split_path,
    NOT_PRESENT,
    OverrideLayer,
)

__version__ = '0.1.0'

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
