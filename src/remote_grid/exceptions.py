"""Exception hierarchy for remote-grid."""

from __future__ import annotations

from typing import Any


class RemoteGridError(Exception):
    """Root exception for the remote-grid package."""


# ── Translation ──────────────────────────────────────────────────────


class TranslationError(RemoteGridError):
    """Base class for filter descriptors that cannot be translated.

    Only raised by a strict translator; the default translator drops the
    offending descriptor and logs a warning.
    """


class UnknownOperatorError(TranslationError):
    """Raised when a descriptor carries an operator outside the grid set."""

    def __init__(self, field: str, operator: str) -> None:
        self.field = field
        self.operator = operator
        super().__init__(f"Unknown operator {operator!r} for field {field!r}")


class CoercionError(TranslationError):
    """Raised when a value cannot be coerced to its declared type."""

    def __init__(self, value: Any, value_type: str, reason: str = "") -> None:
        self.value = value
        self.value_type = value_type
        self.reason = reason
        msg = f"Cannot coerce {value!r} to {value_type}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


# ── Transport ────────────────────────────────────────────────────────


class TransportError(RemoteGridError):
    """Base class for failures raised by a transport adapter."""

    def __init__(self, message: str, *, url: str = "", method: str = "") -> None:
        self.url = url
        self.method = method
        super().__init__(message)


class ServerResponseError(TransportError):
    """The server answered with an error status."""

    def __init__(
        self,
        status_code: int,
        body: Any = None,
        *,
        url: str = "",
        method: str = "",
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"{method} {url} failed with HTTP {status_code}", url=url, method=method
        )


class ServerValidationError(ServerResponseError):
    """The server rejected the request payload (HTTP 422)."""


class NoResponseError(TransportError):
    """The request was sent but no response was received."""


class RequestNotSentError(TransportError):
    """The request could not be built or sent."""


# ── Response ─────────────────────────────────────────────────────────


class ResponseShapeError(RemoteGridError):
    """Raised when a page response lacks ``data``/``meta.total``.

    Also raised when ``meta.total`` is not an integer.
    """

    def __init__(self, reason: str, body: Any = None) -> None:
        self.reason = reason
        self.body = body
        super().__init__(f"Malformed page response: {reason}")
