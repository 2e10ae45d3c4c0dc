"""
Helpers shared by the department and employee services.
"""

import logging
from http import HTTPStatus

from company_services.errors import ServiceError
from company_services.results import ServiceResult


def rejected(logger: logging.Logger, exc: ServiceError) -> ServiceResult:
    """Turn a service-layer exception into its error descriptor."""
    logger.info("Request rejected (%d): %s", exc.status, exc.message)
    return ServiceResult.error(exc.status, exc.message)


def server_error(logger: logging.Logger, message: str) -> ServiceResult:
    """
    Log the active exception and return a 500 descriptor.

    Must be called from inside an ``except`` block.
    """
    logger.exception("Store failure: %s", message)
    return ServiceResult.error(HTTPStatus.INTERNAL_SERVER_ERROR, message)
