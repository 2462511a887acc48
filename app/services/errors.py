class BaseServiceError(Exception):
    detail: str = "Unknown service error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.detail


class InvalidInputError(BaseServiceError):
    detail = "Invalid input. 'data' field must be an array."


class InternalFailureError(BaseServiceError):
    detail = "Internal server error"
