"""SDK exception hierarchy."""

from __future__ import annotations

import enum
from typing import Any

import httpx
from pydantic import ValidationError

from horizon_sdk.models.errors import Problem, ResultCodes


class ErrorKind(str, enum.Enum):
    INVALID_PARAMETER = "invalid_parameter"
    NO_MORE_RESULTS = "no_more_results"
    SERVER_ERROR = "server_error"
    TRANSPORT_ERROR = "transport_error"


class HorizonError(Exception):
    """Base for every error raised by the SDK.

    Callers branch on :attr:`kind` rather than on the concrete class.
    """

    kind: ErrorKind


class InvalidParameterError(HorizonError):
    """Raised when a request descriptor is malformed. Never reaches the network."""

    kind = ErrorKind.INVALID_PARAMETER

    def __init__(self, parameter: str, message: str) -> None:
        self.parameter = parameter
        super().__init__(f"Invalid {parameter}: {message}")


class NoMoreResultsError(HorizonError):
    """Raised when a page has no records to derive a cursor from."""

    kind = ErrorKind.NO_MORE_RESULTS

    def __init__(self, direction: str) -> None:
        self.direction = direction
        super().__init__(f"No more results in the {direction} direction")


class HorizonHTTPError(HorizonError):
    """Raised when Horizon returns a non-2xx response or an error frame."""

    kind = ErrorKind.SERVER_ERROR

    def __init__(
        self,
        status: int,
        problem: Problem | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        self.status = status
        self.problem = problem
        self.response = response
        title = problem.title if problem else f"HTTP {status}"
        detail = f" - {problem.detail}" if problem and problem.detail else ""
        super().__init__(f"[{status}] Horizon error: {title}{detail}")

    @classmethod
    def from_response(cls, response: httpx.Response) -> HorizonHTTPError:
        """Build from an httpx response, attempting to parse the problem document."""
        problem: Problem | None = None
        try:
            body = response.json()
            if isinstance(body, dict):
                problem = Problem.model_validate(body)
        except (ValueError, ValidationError):
            problem = None
        return cls(status=response.status_code, problem=problem, response=response)

    @classmethod
    def from_frame(cls, data: Any) -> HorizonHTTPError:
        """Build from the payload of an SSE ``error`` event."""
        problem: Problem | None = None
        if isinstance(data, dict):
            try:
                problem = Problem.model_validate(data)
            except ValidationError:
                problem = None
        status = problem.status if problem and problem.status else 500
        return cls(status=status, problem=problem)

    @property
    def result_codes(self) -> ResultCodes | None:
        return self.problem.result_codes if self.problem else None

    @property
    def result_xdr(self) -> str | None:
        """Base64 transaction result blob, exactly as Horizon sent it."""
        return self.problem.result_xdr if self.problem else None

    @property
    def envelope_xdr(self) -> str | None:
        return self.problem.envelope_xdr if self.problem else None


class HorizonNetworkError(HorizonError):
    """Raised when a transport-level error occurs (connection refused, reset, bad frame, etc.)."""

    kind = ErrorKind.TRANSPORT_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
