"""Error taxonomy shared by services and the HTTP layer."""

from fastapi import status


class CatalogError(Exception):
    """Base error. Carries the HTTP status the API layer should answer with."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(CatalogError):
    """Bad pagination params, invalid foreign key reference, rejected upload."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(CatalogError):
    status_code = status.HTTP_404_NOT_FOUND


class StorageError(CatalogError):
    """Database failure. The detail is generic; the cause is only logged."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
