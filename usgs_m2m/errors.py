"""Client error hierarchy and envelope conversion.

All client-specific errors extend M2MError. They are raised inside the
decoder and the operation methods, then caught at the public boundary by
``returns_envelope`` and turned into a failed envelope:
{ success: False, data: None, error: {code, message}, meta }.
No M2MError escapes a public client operation.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, TypeVar

from usgs_m2m.models.envelope import Envelope, ErrorInfo, Meta

logger = logging.getLogger(__name__)

# Synthetic code for every failure detected by the client itself
CLIENT_ERROR_CODE = -1

F = TypeVar("F", bound=Callable[..., Envelope])


# ---------------------------------------------------------------------------
# Error hierarchy
# ---------------------------------------------------------------------------


class M2MError(Exception):
    """Base error for all client-side failures."""

    code: int | None = CLIENT_ERROR_CODE
    message: str = "M2M client error"

    def __init__(
        self,
        message: str | None = None,
        *,
        code: int | None = None,
        error_type: str | None = None,
        meta: Meta | None = None,
    ) -> None:
        self.message = message if message is not None else self.__class__.message
        if code is not None:
            self.code = code
        self.error_type = error_type
        self.meta = meta
        super().__init__(self.message)

    def to_error_info(self) -> ErrorInfo:
        return ErrorInfo(code=self.code, message=self.message, error_type=self.error_type)

    def to_envelope(self) -> Envelope[Any]:
        """Build the failed envelope for this error."""
        return Envelope(
            success=False,
            data=None,
            error=self.to_error_info(),
            meta=self.meta if self.meta is not None else Meta(),
        )


class ParameterError(M2MError):
    """Required parameter missing, empty or malformed; raised before any I/O."""

    message = "Invalid or missing parameter"


class TransportError(M2MError):
    """The HTTP request could not be performed (connection, DNS, TLS, timeout)."""

    message = "Failed to perform HTTP request"


class HttpStatusError(M2MError):
    """The server answered with a status other than 200."""

    message = "HTTP error code"

    def __init__(self, http_status: int) -> None:
        self.http_status = http_status
        super().__init__(f"HTTP error code: {http_status}")


class ResponseParseError(M2MError):
    """The response body is not valid JSON."""

    message = "JSON parse error"

    def __init__(self, details: str) -> None:
        super().__init__(f"JSON parse error: {details}")


class ApiError(M2MError):
    """The API reported an errorCode in an otherwise valid response."""

    code = None  # Set from the response when it is an integer
    message = ""


class MissingDataError(M2MError):
    """The response has no error code but no usable 'data' either."""

    message = "response missing expected 'data' field"


class ResponseShapeError(M2MError):
    """The 'data' payload does not have the shape the operation expects."""

    message = "Unexpected 'data' shape"


# ---------------------------------------------------------------------------
# Boundary conversion
# ---------------------------------------------------------------------------


def returns_envelope(func: F) -> F:
    """Turn any M2MError raised by an operation into a failed envelope.

    This is the only place a failed operation is logged: one warning per
    failed envelope, whether it was raised or returned by the operation.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Envelope:
        try:
            envelope = func(*args, **kwargs)
        except M2MError as exc:
            envelope = exc.to_envelope()

        if not envelope.success:
            logger.warning(
                "%s failed: %s",
                func.__name__,
                envelope.error.message,
                extra={
                    "error_code": envelope.error.code,
                    "request_id": envelope.meta.request_id,
                    "session_id": envelope.meta.session_id,
                },
            )
        return envelope

    return wrapper  # type: ignore[return-value]
