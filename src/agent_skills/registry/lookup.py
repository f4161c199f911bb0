"""
Lookup Results

Every keyed accessor of the registry reports one of three outcomes:
- found: the key resolved (and, for reads, the file was read)
- not_found: the key is not in the catalog
- read_error: the key resolved but the file could not be read

Callers that only care about presence use unwrap_or() / .value.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar('T')


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    READ_ERROR = "read_error"


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """Outcome of a keyed lookup or read"""
    status: LookupStatus
    key: str
    value: Optional[T] = None
    path: Optional[str] = None
    error: Optional[Exception] = None

    @classmethod
    def hit(cls, key: str, value: T, path: Optional[str] = None) -> 'Lookup[T]':
        return cls(LookupStatus.FOUND, key, value=value, path=path)

    @classmethod
    def missing(cls, key: str) -> 'Lookup[T]':
        return cls(LookupStatus.NOT_FOUND, key)

    @classmethod
    def failed(cls, key: str, path: str, error: Exception) -> 'Lookup[T]':
        return cls(LookupStatus.READ_ERROR, key, path=path, error=error)

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @property
    def not_found(self) -> bool:
        return self.status is LookupStatus.NOT_FOUND

    @property
    def read_error(self) -> bool:
        return self.status is LookupStatus.READ_ERROR

    def unwrap_or(self, default: Optional[T] = None) -> Optional[T]:
        """Return the value when found, otherwise default"""
        return self.value if self.found else default

    def __bool__(self) -> bool:
        return self.found
