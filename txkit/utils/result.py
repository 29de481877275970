from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar('T')


class ErrorKind(str, Enum):
    """Why a typed helper call did not produce a value."""
    NO_SUCH_EVENT = "NO_SUCH_EVENT"
    DECODE_FAILURE = "DECODE_FAILURE"
    TRANSPORT_FAILURE = "TRANSPORT_FAILURE"
    TRANSACTION_FAILED = "TRANSACTION_FAILED"
    NOT_SUCCESSFUL = "NOT_SUCCESSFUL"
    FILESYSTEM = "FILESYSTEM"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a helper call: a value, an error kind, or both.

    A failed transaction wait is the one case carrying both, since the
    partial receipt is still useful to the caller.
    """
    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def err(cls, kind: ErrorKind, message: str = "", value: Any = None) -> "Result[T]":
        return cls(value=value, error=kind, message=message)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap_or(self, default: Any) -> Any:
        """Return the value on success, otherwise ``default``."""
        return self.value if self.error is None else default
