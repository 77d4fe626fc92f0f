from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Outcome of a lookup stage: either a value or an error message.

    Stages return this instead of raising so callers only need to branch on
    :attr:`ok`.
    """

    value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: T) -> "OperationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, message: str) -> "OperationResult[T]":
        return cls(error=message or "Unknown error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise ValueError(f"cannot unwrap failed result: {self.error}")
        return self.value  # type: ignore[return-value]


__all__ = ["OperationResult"]
