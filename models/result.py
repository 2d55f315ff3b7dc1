from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ResultStatus(Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    STORAGE_ERROR = "storage_error"


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """Outcome of a LedgerStore call.

    Storage faults never escape the store as exceptions; they come back here
    with status STORAGE_ERROR and a short reason for display.
    """
    status: ResultStatus
    value: Optional[T] = None
    reason: str = ""

    @classmethod
    def success(cls, value: Optional[T] = None) -> "StoreResult[T]":
        return cls(ResultStatus.OK, value)

    @classmethod
    def not_found(cls, reason: str) -> "StoreResult[T]":
        return cls(ResultStatus.NOT_FOUND, None, reason)

    @classmethod
    def storage_error(cls, reason: str) -> "StoreResult[T]":
        return cls(ResultStatus.STORAGE_ERROR, None, reason)

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.OK

    def value_or(self, default: T) -> T:
        """The value on success, else default (the old sentinel behaviour)."""
        return self.value if self.ok else default
