from http import HTTPStatus
from typing import Any


class InternalException(Exception):
    """
    All internal exceptions should inherit from this. Callers translating to a
    transport use `status_code` and surface only `message`, never `context`.
    """

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    default_detail = 'Internal failure.'
    default_code = 'internal_failure'

    def __init__(self, message: str | None = None, context: dict[Any, Any] | Any = None):
        self.message = message or self.default_detail
        self.context = context or dict()
        super().__init__(self.message)

    def __str__(self) -> str:
        return f'{self.__class__.__name__}({self.message})'


class NotFoundException(InternalException):
    status_code = HTTPStatus.NOT_FOUND
    default_detail = 'Not found.'
    default_code = 'not_found'


class InvalidStateException(InternalException):
    status_code = HTTPStatus.BAD_REQUEST
    default_detail = 'Invalid state for this operation.'
    default_code = 'invalid_state'
