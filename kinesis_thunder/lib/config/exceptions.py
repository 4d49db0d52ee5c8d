from typing import Optional


class ConfigValidationError(Exception):
    """Raised when a module configuration is malformed, before any resource is declared"""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key
