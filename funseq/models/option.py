"""Optional value container: present with a value, or absent."""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from ..errors import AbsentValueError, InvalidArgumentError, NullReferenceError

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Option(Generic[A]):
    """
    Immutable optional value.

    A present Option never holds None. Two present options are equal when
    their values are equal, and every absent option equals every other.
    Instances are hashable whenever the held value is.
    """
    _value: Any = None
    _present: bool = False

    def __post_init__(self) -> None:
        if self._present == (self._value is None):
            raise InvalidArgumentError(
                "Option must be built with Option.of(), Option.absent() or Option.from_nullable()",
                argument="value",
            )

    @classmethod
    def of(cls, value: A) -> "Option[A]":
        """Wrap a non-None value."""
        if value is None:
            raise NullReferenceError("Option.of() requires a value", argument="value")
        return cls(value, True)

    @classmethod
    def absent(cls) -> "Option[Any]":
        """Return the shared absent instance."""
        return _ABSENT

    @classmethod
    def from_nullable(cls, value: Optional[A]) -> "Option[A]":
        """Wrap value, mapping None to absent."""
        if value is None:
            return _ABSENT
        return cls(value, True)

    @property
    def is_present(self) -> bool:
        return self._present

    def get(self) -> A:
        """Return the held value; raises AbsentValueError when absent."""
        if not self._present:
            raise AbsentValueError("Option.get() called on an absent value")
        return self._value

    def or_else(self, default: A) -> A:
        return self._value if self._present else default

    def map(self, function: Callable[[A], Optional[B]]) -> "Option[B]":
        """Apply function to a present value; a None result becomes absent."""
        if not self._present:
            return _ABSENT
        return Option.from_nullable(function(self._value))

    def __repr__(self) -> str:
        if self._present:
            return f"Option.of({self._value!r})"
        return "Option.absent()"


_ABSENT: Option[Any] = Option()
