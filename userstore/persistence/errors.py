"""Normalized store error types."""


class StoreError(Exception):
    """Base class for all store errors."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class StoreUnavailableError(StoreError):
    """Failed to open the database."""

    pass


class QueryFailedError(StoreError):
    """A statement failed at the driver level."""

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        sql: str | None = None,
    ) -> None:
        super().__init__(message, cause)
        self.sql = sql


class NotFoundError(StoreError):
    """No row matched the requested id."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"user {user_id} not found")
        self.user_id = user_id
