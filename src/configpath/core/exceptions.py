"""
Exceptions and warnings raised by the configuration core.
"""


class ConfigError(Exception):
    """Base exception for configuration errors."""
    pass


class FatalConfigError(ConfigError):
    """Raised when a ConfigPath cannot be constructed from its options."""
    pass


class DecodeError(ConfigError):
    """Raised when a single configuration file cannot be decoded."""

    def __init__(self, path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class SourceLoadWarning(UserWarning):
    """Issued when a source contributes nothing to the merged configuration."""
    pass
