"""Errors raised by client_utils helpers."""


class ClientUtilsError(Exception):
    """Base class for errors raised by this library."""


class RetrierAlreadyStartedError(ClientUtilsError, RuntimeError):
    """Raised when a running Retrier is started or reconfigured."""

    def __init__(self, message: str = "Retrier already started"):
        super().__init__(message)
