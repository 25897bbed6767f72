"""Output exceptions."""


class NetworkWriteError(Exception):
    """Raised when a rendered document cannot be written."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)
