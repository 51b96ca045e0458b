"""Explicit success/error value returned by the ``try_*`` client operations."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

from .core.exceptions import DecodeError, HTTPStatusError, TransportError

T = TypeVar("T")

FetchError = Union[TransportError, DecodeError, HTTPStatusError]


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """
    Outcome of one fetch: either ``value`` or ``error`` is set, never both.

    Example:
        >>> result = client.try_fetch_post(1)
        >>> if result.ok:
        ...     print(result.value.title)
        ... elif isinstance(result.error, TransportError):
        ...     print("network down")
    """

    value: Optional[T] = None
    error: Optional[FetchError] = None

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("FetchResult needs exactly one of value or error")

    @classmethod
    def success(cls, value: T) -> "FetchResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: FetchError) -> "FetchResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value
