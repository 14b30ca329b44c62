class ShellError(Exception):
    """Base class for errors raised by the shell itself."""


class ConnectionFailedError(ShellError):
    """
    Raised when a connection cannot be opened or its liveness check fails.

    The message is the transport's own description of the failure, so callers
    can print it verbatim.
    """

    def __init__(self, address: str, message: str):
        super().__init__(message)
        self.address = address
