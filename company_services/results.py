"""
Result descriptor returned by every public service method.

A ``ServiceResult`` is an HTTP status plus a JSON-ready body.  Routes
render it with ``jsonify`` and never inspect it further.

Note that some lookups report "nothing found" as ``200`` with an
``{"error": ...}`` body (see ``empty``).  Callers tell "no data" apart
from "failure" by the body, not the status.
"""

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any


@dataclass(frozen=True)
class ServiceResult:
    """Outcome of a service call: status code and response body."""

    status: HTTPStatus
    body: Any

    @classmethod
    def ok(cls, body: Any) -> "ServiceResult":
        return cls(HTTPStatus.OK, body)

    @classmethod
    def created(cls, body: Any) -> "ServiceResult":
        return cls(HTTPStatus.CREATED, body)

    @classmethod
    def error(cls, status: HTTPStatus, message: str) -> "ServiceResult":
        return cls(status, {"error": message})

    @classmethod
    def empty(cls, message: str) -> "ServiceResult":
        """Successful status carrying an error-shaped body."""
        return cls(HTTPStatus.OK, {"error": message})

    @property
    def is_success(self) -> bool:
        return 200 <= int(self.status) < 300

    @property
    def is_empty(self) -> bool:
        """True for a success status whose body only explains an absence."""
        return (
            self.is_success
            and isinstance(self.body, dict)
            and set(self.body) == {"error"}
        )

    @property
    def message(self) -> str | None:
        """The ``error`` message, when the body has one."""
        if isinstance(self.body, dict):
            return self.body.get("error")
        return None
