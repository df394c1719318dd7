from typing import Dict, Optional

from fastapi import status

from riskengine.domain.errors import ErrorKind
from riskengine.libs.result import Error

STATUS_BY_KIND = {
    ErrorKind.validation.value: status.HTTP_400_BAD_REQUEST,
    ErrorKind.authentication.value: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.authorization.value: status.HTTP_403_FORBIDDEN,
    ErrorKind.not_found.value: status.HTTP_404_NOT_FOUND,
    ErrorKind.conflict.value: status.HTTP_409_CONFLICT,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error, overrides: Optional[Dict[str, int]] = None):
    """
    Convert a use case Error into the matching HTTP exception.

    Args:
        error: Error returned by a use case
        overrides: Status code per error code, for routes that deviate from
            the default status of the error's kind
    """
    if overrides and error.code in overrides:
        raise ClientError(error, status_code=overrides[error.code])

    status_code = STATUS_BY_KIND.get(error.kind)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
