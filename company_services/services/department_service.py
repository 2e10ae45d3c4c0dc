"""
Department service — list, fetch, create, update and delete departments.

Every write follows the same pipeline, short-circuiting on the first
failure: validate input, check the tenant, check ``dept_no`` uniqueness,
persist, then map the store's answer onto a result.

The uniqueness check is a read followed by a write with no lock held
between them.  Two concurrent requests can both pass it; the database
unique constraint then rejects the loser, which is reported exactly as
if the read had caught it.
"""

import logging
from http import HTTPStatus

from company_services.errors import (
    ConflictError,
    DuplicateDepartmentNumberError,
    NotFoundError,
    PayloadError,
    ServiceError,
    ValidationError,
)
from company_services.models.organization import Department
from company_services.results import ServiceResult
from company_services.serializers import CompanySerializer
from company_services.services.common import rejected, server_error
from company_services.store import CompanyStore
from company_services.validators import check_tenant, validate_department

logger = logging.getLogger(__name__)


class DepartmentService:
    """
    Business rules for departments.

    Args:
        store:        Persistence primitives.
        serializer:   Converts entities to and from the wire format.
        company_name: The configured tenant; fixed for the service's life.
    """

    def __init__(
        self,
        store: CompanyStore,
        serializer: CompanySerializer,
        company_name: str,
    ):
        self.store = store
        self.serializer = serializer
        self.company_name = company_name

    # -- Reads -------------------------------------------------------------

    def list_departments(self, company: str | None) -> ServiceResult:
        """
        Return all departments for ``company``.

        An unknown company and an empty table both produce a 200 with an
        explanatory ``error`` message rather than a failure status.
        """
        empty_message = f"No departments found for the specified company: {company}."
        if not check_tenant(self.company_name, company):
            logger.info("Department list requested for unknown company %r", company)
            return ServiceResult.empty(empty_message)

        try:
            departments = self.store.get_all_departments(company)
            if not departments:
                return ServiceResult.empty(empty_message)
            return ServiceResult.ok(self.serializer.departments_to_list(departments))
        except Exception as exc:  # pylint: disable=broad-exception-caught
            return server_error(
                logger,
                f"Unable to connect to the database. Detailed message: {exc}",
            )

    def get_department(self, company: str | None, dept_id: int) -> ServiceResult:
        """Return one department, or 400 / 404 / 500 descriptors."""
        try:
            self._require_tenant(
                company,
                f"Invalid company name provided: {company}. "
                f"Expected: {self.company_name}.",
            )
            dept = self.store.get_department(company, dept_id)
            if dept is None:
                raise NotFoundError(
                    f"Department ID {dept_id} does not exist for company {company}."
                )
            return ServiceResult.ok(self.serializer.department_to_dict(dept))
        except ServiceError as exc:
            return rejected(logger, exc)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            return server_error(
                logger, f"Database connection failed. Error details: {exc}"
            )

    # -- Writes ------------------------------------------------------------

    def insert_department(
        self,
        company: str | None,
        dept_name: str | None,
        dept_no: str | None,
        location: str | None,
    ) -> ServiceResult:
        """
        Create a department after checking the tenant and ``dept_no``.

        A ``dept_no`` already used in this company is a 400 here (the
        update path reports the same situation as 409).

        Returns:
            201 with ``{"success": <department>}`` on success.
        """
        duplicate_message = (
            f"Department number '{dept_no}' is already in use. "
            "Please provide a unique department number."
        )
        try:
            self._require_tenant(
                company,
                f"Invalid company name provided. Expected: '{self.company_name}' "
                f"but received: '{company}'.",
            )
            validate_department(dept_name, dept_no)

            if self.store.get_department_by_no(company, dept_no) is not None:
                raise ValidationError(duplicate_message)

            new_dept = Department(
                company=company,
                dept_name=dept_name,
                dept_no=dept_no,
                location=location,
            )
            try:
                inserted = self.store.insert_department(new_dept)
            except DuplicateDepartmentNumberError as exc:
                raise ValidationError(duplicate_message) from exc

            if inserted is None:
                logger.error("Store returned no row for department %s", dept_no)
                return ServiceResult.error(
                    HTTPStatus.INTERNAL_SERVER_ERROR,
                    "Insertion of the new department failed. "
                    "Please try again later or contact support.",
                )

            logger.info(
                "Created department %s (%s) id=%d for %s",
                inserted.dept_no,
                inserted.dept_name,
                inserted.id,
                company,
            )
            return ServiceResult.created(
                {"success": self.serializer.department_to_dict(inserted)}
            )
        except ServiceError as exc:
            return rejected(logger, exc)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            return server_error(
                logger,
                f"An unexpected error occurred: {exc}. Please contact support.",
            )

    def update_department(self, payload: str | bytes | None) -> ServiceResult:
        """
        Replace a department from a JSON payload.

        The row is matched on ``(company, id)`` from the payload.  A
        ``deptNo`` held by a *different* department of the same company
        is a 409 conflict.
        """
        try:
            try:
                candidate = self.serializer.load_department(payload)
            except PayloadError as exc:
                raise PayloadError(
                    f"Department update failed due to invalid JSON format: {exc.message}"
                ) from exc
            validate_department(candidate.dept_name, candidate.dept_no)

            conflict_message = (
                f"Department number '{candidate.dept_no}' is already assigned "
                "to a different department."
            )
            holder = self.store.get_department_by_no(candidate.company, candidate.dept_no)
            if holder is not None and holder.id != candidate.id:
                raise ConflictError(conflict_message)

            try:
                updated = self.store.update_department(candidate)
            except DuplicateDepartmentNumberError as exc:
                raise ConflictError(conflict_message) from exc

            if updated is None:
                raise NotFoundError(
                    "The specified department does not exist or could not be updated."
                )

            logger.info("Updated department id=%d", updated.id)
            return ServiceResult.ok(self.serializer.department_to_dict(updated))
        except ServiceError as exc:
            return rejected(logger, exc)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            return server_error(logger, f"Department update failed: {exc}")

    def delete_department(self, company: str | None, dept_id: int) -> ServiceResult:
        """Delete a department; a second delete of the same id is a 404."""
        try:
            self._require_tenant(
                company,
                f"Invalid company name provided. Expected: '{self.company_name}', "
                f"but got: '{company}'.",
            )
            if self.store.get_department(company, dept_id) is None:
                raise NotFoundError(
                    f"Department with ID '{dept_id}' not found in company '{company}'."
                )

            deleted_rows = self.store.delete_department(company, dept_id)
            if deleted_rows == 0:
                logger.error("Delete of department id=%d affected no rows", dept_id)
                return ServiceResult.error(
                    HTTPStatus.INTERNAL_SERVER_ERROR,
                    f"No changes made. Department with ID '{dept_id}' could not be "
                    "deleted or may already have been removed.",
                )

            logger.info("Deleted department id=%d from %s", dept_id, company)
            return ServiceResult.ok(
                {
                    "success": f"Department with ID '{dept_id}' successfully "
                    f"deleted from company '{company}'."
                }
            )
        except ServiceError as exc:
            return rejected(logger, exc)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            return server_error(
                logger,
                "An unexpected error occurred while attempting to delete the "
                f"department: {exc}.",
            )

    # -- Helpers -----------------------------------------------------------

    def _require_tenant(self, company: str | None, message: str) -> None:
        if not check_tenant(self.company_name, company):
            raise ValidationError(message)
