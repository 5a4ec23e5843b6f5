"""Interface layer error mapping."""

from fastapi import HTTPException, status

from pingtag.domain.error import (
    AlreadySubscribedError,
    DescriptionTooLongError,
    DomainError,
    DuplicateTagError,
    ForbiddenError,
    InvalidTagNameError,
    QuotaExceededError,
    StorageError,
    TagNotFoundError,
)

# Most specific first; the first matching class wins
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (InvalidTagNameError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (DescriptionTooLongError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (DuplicateTagError, status.HTTP_409_CONFLICT),
    (QuotaExceededError, status.HTTP_409_CONFLICT),
    (AlreadySubscribedError, status.HTTP_409_CONFLICT),
    (TagNotFoundError, status.HTTP_404_NOT_FOUND),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (StorageError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error to an HTTPException.

    Errors without a mapping (e.g. CorruptStateError) become a 500.
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error)
    )
