"""
Guard verdicts.

Guards never raise for business-rule violations; they return either
``Approved(value)`` or ``Rejected(code, detail)``. Callers branch on ``ok``.
"""
from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus
from typing import Generic, Literal, Optional, TypeVar, Union

from catalog_core.core.config import settings

T = TypeVar("T")


class ErrorCode(str, Enum):
    NOT_FOUND = "NotFound"
    FORBIDDEN = "Forbidden"
    DUPLICATE_SLUG = "DuplicateSlug"
    PARENT_NOT_FOUND = "ParentNotFound"
    CIRCULAR_REFERENCE = "CircularReference"
    HAS_PRODUCTS = "HasProducts"
    HAS_CHILDREN = "HasChildren"
    INVALID_PRICE = "InvalidPrice"
    INVALID_DATE_RANGE = "InvalidDateRange"


@dataclass(frozen=True)
class Approved(Generic[T]):
    """Validated, persistence-ready value"""
    value: T
    ok: Literal[True] = True


@dataclass(frozen=True)
class Rejected:
    """Structured rejection; ``detail`` is an operator-facing message"""
    code: ErrorCode
    detail: Optional[str] = None
    ok: Literal[False] = False


GuardResult = Union[Approved[T], Rejected]


_HTTP_STATUS = {
    ErrorCode.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorCode.FORBIDDEN: HTTPStatus.FORBIDDEN,
    ErrorCode.DUPLICATE_SLUG: HTTPStatus.CONFLICT,
    ErrorCode.PARENT_NOT_FOUND: HTTPStatus.UNPROCESSABLE_ENTITY,
    ErrorCode.CIRCULAR_REFERENCE: HTTPStatus.UNPROCESSABLE_ENTITY,
    ErrorCode.HAS_PRODUCTS: HTTPStatus.CONFLICT,
    ErrorCode.HAS_CHILDREN: HTTPStatus.CONFLICT,
    ErrorCode.INVALID_PRICE: HTTPStatus.UNPROCESSABLE_ENTITY,
    ErrorCode.INVALID_DATE_RANGE: HTTPStatus.UNPROCESSABLE_ENTITY,
}


def http_status_for(
    rejection: Rejected, conceal_forbidden: Optional[bool] = None
) -> HTTPStatus:
    """
    Map a rejection to the HTTP status a route handler should answer with.

    With concealment on, ``Forbidden`` is reported as ``404`` so an
    unauthorized actor cannot probe for the existence of a resource.
    """
    if conceal_forbidden is None:
        conceal_forbidden = settings.CONCEAL_FORBIDDEN
    if rejection.code == ErrorCode.FORBIDDEN and conceal_forbidden:
        return HTTPStatus.NOT_FOUND
    return _HTTP_STATUS[rejection.code]
