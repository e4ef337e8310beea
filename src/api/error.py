from typing import Dict

from fastapi import status

from src.domain.result import Error, ErrorKind


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.validation: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.domain: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.authentication: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.authorization: status.HTTP_403_FORBIDDEN,
    ErrorKind.not_found: status.HTTP_404_NOT_FOUND,
}


def raise_for_error(error: Error) -> None:
    """Raise the HTTP exception matching a use case error."""
    status_code = STATUS_BY_KIND.get(error.kind)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
