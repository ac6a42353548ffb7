from fastapi import HTTPException, status


class PayloadTooLargeError(HTTPException):
    """Raised when submitted source files exceed the configured scan limits."""

    def __init__(self, message: str):
        super().__init__(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=message,
        )
