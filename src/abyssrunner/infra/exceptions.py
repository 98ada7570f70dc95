class LevelDecodeError(Exception):
    """Raised when a level pack cannot be read or fails validation."""


class ConfigError(Exception):
    """Raised when the config file exists but cannot be used."""
