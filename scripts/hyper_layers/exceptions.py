"""Exceptions raised while loading and compiling Hyper layer definitions."""


class ConfigError(ValueError):
    """Base exception for invalid layer definitions."""


class UnknownKeyCodeError(ConfigError):
    """Raised when a key is not part of the recognized key code vocabulary."""

    def __init__(self, key_code: str, location: str | None = None):
        self.key_code = key_code
        self.location = location
        where = f" ({location})" if location else ""
        super().__init__(f"Unknown key code '{key_code}'{where}")
