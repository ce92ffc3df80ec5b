"""Root error class for the event-export error hierarchy."""

from __future__ import annotations

from typing import Any, ClassVar


class BaseError(Exception):
    """Root of every export failure.

    An export either completes or raises exactly one of these; nothing is
    retried internally.  ``retryable`` only tells the *caller* whether sending
    the same request again may succeed.

    Args:
        message: Human-readable description, safe to show to the user.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra JSON-serialisable context.
        cause: Lower-level exception this error stands for.
    """

    default_code: ClassVar[str] = "base_error"
    retryable: ClassVar[bool] = False

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        """Serialise for an HTTP error body.

        The cause is left out unless *include_cause* is set, since it may
        carry data-source internals.
        """
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.retryable:
            payload["retryable"] = True
        if include_cause and self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def log_fields(self) -> dict[str, Any]:
        """Structured fields for a log event; never includes the raw cause."""
        return {"code": self.code, "error": type(self).__name__, "retryable": self.retryable}


__all__ = ["BaseError"]
