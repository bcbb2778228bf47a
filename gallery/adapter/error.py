"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class NetworkFailureError(AdapterError):
    """The request never produced a response (connection, timeout)."""

    pass


class ApiResponseError(AdapterError):
    """The API answered with a non-success status."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"API error {status_code}: {detail}")

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    @property
    def is_validation_error(self) -> bool:
        return self.status_code in (400, 422)
