"""Custom exceptions for the host context."""


class UnknownJobTypeError(ValueError):
    """
    Exception raised when a job type name or id is not in the host registry.

    Attributes:
        token: The name or id that failed to resolve
    """

    def __init__(self, token, message: str = None):
        self.token = token
        if message is None:
            message = f'Unknown job type: "{token}"'
        super().__init__(message)
