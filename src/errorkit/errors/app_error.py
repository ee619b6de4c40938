"""AppError - the canonical failure record.

Every failure that crosses a handler boundary ends up as an AppError, either
raised directly by application code with a known kind, or synthesized by
``normalize_error`` from whatever was caught.
"""

import traceback
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from errorkit.errors.kinds import ErrorKind


class ErrorPayload(BaseModel):
    """Transport shape of an AppError for clients and log pipelines."""

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    name: str
    message: str
    code: str
    status_code: int = Field(alias="statusCode")
    timestamp: str
    context: Any = None


class AppError(Exception):
    """Structured application error.

    Args:
        message: Human-readable description
        kind: Classification of the failure
        status_code: Protocol-style status, independent of ``kind``
        is_operational: True for expected/handled conditions, False for
            unexpected or programmer-level faults
        context: Arbitrary diagnostic payload
    """

    _READ_ONLY = frozenset(
        {"message", "kind", "status_code", "is_operational", "timestamp", "context", "trace"}
    )

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.UNKNOWN,
        status_code: int = 500,
        is_operational: bool = True,
        context: Optional[Any] = None,
    ):
        super().__init__(message)
        self.__dict__.update(
            message=message,
            kind=kind,
            status_code=status_code,
            is_operational=is_operational,
            timestamp=datetime.now(timezone.utc),
            context=context,
        )
        self.__dict__["trace"] = self._capture_trace(message)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._READ_ONLY:
            raise AttributeError(f"{type(self).__name__}.{name} is read-only")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in self._READ_ONLY:
            raise AttributeError(f"{type(self).__name__}.{name} is read-only")
        super().__delattr__(name)

    def __reduce__(self):
        return (_restore, (type(self), dict(self.__dict__)))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={getattr(self.kind, 'name', self.kind)}, "
            f"status_code={self.status_code}, message={self.message!r})"
        )

    @property
    def name(self) -> str:
        return "AppError"

    def _capture_trace(self, message: str) -> Optional[str]:
        """Render the construction-site stack, innermost frame first."""
        try:
            # Drop this helper and __init__ itself
            frames = traceback.extract_stack()[:-2]
            lines = [f"{type(self).__name__}: {message}"]
            for frame in reversed(frames):
                lines.append(f'  File "{frame.filename}", line {frame.lineno}, in {frame.name}')
            return "\n".join(lines)
        except Exception:
            return None

    def to_payload(self) -> ErrorPayload:
        """Build the transport model for this error."""
        return ErrorPayload(
            name=self.name,
            message=self.message,
            code=str(getattr(self.kind, "value", self.kind)),
            status_code=self.status_code,
            timestamp=self.timestamp.isoformat(),
            context=self.context,
        )

    def to_dict(self) -> dict:
        """Serialize to ``{name, message, code, statusCode, timestamp, context}``."""
        return self.to_payload().model_dump(by_alias=True)


def _restore(cls: type, state: dict) -> AppError:
    error = cls.__new__(cls, state.get("message", ""))
    error.__dict__.update(state)
    return error
