"""
API error taxonomy.

These derive from `HTTPException`, so FastAPI renders them as
`{"detail": "<message>"}` with the matching status code.
"""

from __future__ import annotations

from fastapi import HTTPException, status


class ApiError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str, *, headers: dict[str, str] | None = None) -> None:
        super().__init__(status_code=type(self).status_code, detail=detail, headers=headers)


class ClientInputError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class Unauthorized(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, detail: str = "Unauthorized") -> None:
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class UpstreamAuthError(ApiError):
    pass


# Raw driver message, no classification.
class StorageError(ApiError):
    pass
