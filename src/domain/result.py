"""
Result Types

Use cases return Result[T] instead of raising for business outcomes.
The API boundary maps Error.kind to an HTTP status.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Category of a failed operation"""

    validation = "validation"
    authentication = "authentication"
    authorization = "authorization"
    not_found = "not_found"
    domain = "domain"
    internal = "internal"


@dataclass(frozen=True)
class Error:
    code: str
    message: str
    kind: ErrorKind = ErrorKind.internal
    errors: Dict[str, List[str]] = field(default_factory=dict)
    reason: Optional[str] = None

    @classmethod
    def validation(
        cls, errors: Dict[str, List[str]], message: str = "The given data was invalid."
    ) -> "Error":
        return cls("VALIDATION_FAILED", message, ErrorKind.validation, errors)

    @classmethod
    def authentication(
        cls, code: str = "UNAUTHENTICATED", message: str = "Unauthenticated."
    ) -> "Error":
        return cls(code, message, ErrorKind.authentication)

    @classmethod
    def authorization(
        cls, code: str = "FORBIDDEN", message: str = "This action is unauthorized."
    ) -> "Error":
        return cls(code, message, ErrorKind.authorization)

    @classmethod
    def not_found(cls, code: str, message: str) -> "Error":
        return cls(code, message, ErrorKind.not_found)

    @classmethod
    def domain(cls, code: str, field_name: str, message: str) -> "Error":
        """Business-rule violation reported against a single input field"""
        return cls(code, message, ErrorKind.domain, {field_name: [message]})


class Result(Generic[T]):
    __slots__ = ("_value", "_error")

    def __init__(self, value: Optional[T] = None, error: Optional[Error] = None):
        self._value = value
        self._error = error

    def is_ok(self) -> bool:
        return self._error is None

    def is_err(self) -> bool:
        return self._error is not None

    @property
    def value(self) -> T:
        if self._error is not None:
            raise ValueError(f"Result is an error: {self._error.code}")
        return self._value

    @property
    def error(self) -> Error:
        if self._error is None:
            raise ValueError("Result is not an error")
        return self._error

    def __repr__(self) -> str:
        if self.is_ok():
            return f"Ok({self._value!r})"
        return f"Err({self._error.code!r})"


class Return:
    @staticmethod
    def ok(value: Optional[T] = None) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result:
        return Result(error=error)
