"""Custom exceptions for textsel."""


class ConfigError(ValueError):
    """Exception raised when the select configuration is malformed."""

    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(f"Invalid textobjects.select option {key!r}: {message}")
