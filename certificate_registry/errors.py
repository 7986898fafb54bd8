# certificate_registry/errors.py

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Union


class ErrorCode(IntEnum):
    """Failure codes returned by the registry. Values are part of the public contract."""

    UNAUTHORIZED = 1
    NOT_FOUND = 3
    INVALID_COURSE = 400
    INVALID_GRADE = 402
    NOT_ADMIN = 401
    DUPLICATE_ID = 409


class RegistryError(Exception):
    """Raised when a failed result is unwrapped."""

    def __init__(self, code: ErrorCode):
        super().__init__(f"{code.name} ({int(code)})")
        self.code = code


@dataclass(frozen=True)
class Ok:
    value: Any

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Err:
    code: ErrorCode

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def name(self) -> str:
        return self.code.name

    def unwrap(self) -> Any:
        raise RegistryError(self.code)


Result = Union[Ok, Err]
