"""
Exception hierarchy used inside the service layer.

Validators, the serializer, and the store raise these; each public
service method catches them and turns them into a ``ServiceResult``.
None of them reach the routes.
"""

from http import HTTPStatus


class ServiceError(Exception):
    """Base class: a failure that maps onto a single HTTP status."""

    status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Malformed input or a broken business rule."""

    status = HTTPStatus.BAD_REQUEST


class PayloadError(ValidationError):
    """A JSON request body that could not be turned into an entity."""


class NotFoundError(ServiceError):
    """The entity does not exist, or an update matched no row."""

    status = HTTPStatus.NOT_FOUND


class ConflictError(ServiceError):
    """A natural key already belongs to a different record."""

    status = HTTPStatus.CONFLICT


class DuplicateDepartmentNumberError(ConflictError):
    """Raised by the store when the ``(company, dept_no)`` constraint fires."""

    def __init__(self, company: str, dept_no: str):
        super().__init__(
            f"Department number '{dept_no}' is already in use for company '{company}'."
        )
        self.company = company
        self.dept_no = dept_no
