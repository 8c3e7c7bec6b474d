from fastapi import status
from libs.result import Error
from src.app.use_cases.errors import STORE_FAILURE


class ClientError(Exception):
    """Request could not be served because of the caller's input"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(base_error.message)
        self.base_error = base_error
        self.status_code = status_code


class ServerError(Exception):
    """Request failed on our side; details are logged, never returned"""

    def __init__(self, base_error: Error):
        super().__init__(base_error.message)
        self.base_error = base_error


def raise_for_error(error: Error) -> None:
    """Translate a use case error into the matching API exception"""
    if error.code == STORE_FAILURE:
        raise ServerError(error)
    if error.code.endswith("_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
