from typing import Optional


class DechoError(Exception):
    """Base for every failure that ends an invocation with exit code 1."""


class ConfigError(DechoError):
    pass


class InputError(DechoError):
    pass


class TransportError(DechoError):
    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
