"""Record types and the indexed in-memory store that backs the sample providers."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import ClassVar, Generic, Iterator, TypeVar

__all__ = [
    "ProviderError",
    "NotFoundError",
    "AlreadyExistsError",
    "AddError",
    "Person",
    "User",
    "RecordStore",
    "seeded_user_store",
]

JAVA_PACKAGE = "com.dubbogo.pixiu"
_ZERO_TIME = "0001-01-01T00:00:00Z"


class ProviderError(Exception):
    """Base class for errors reported by a provider call."""

    default_message: ClassVar[str] = "provider error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class NotFoundError(ProviderError):
    """The requested record does not exist."""

    default_message = "not found"


class AlreadyExistsError(ProviderError):
    """A record with the same name is already stored."""

    default_message = "data is exist"


class AddError(ProviderError):
    """The store refused the record."""

    default_message = "add error"


def _format_time(value: datetime | None) -> str:
    """Format a timestamp as RFC 3339 with trailing fractional zeros trimmed."""
    if value is None:
        return _ZERO_TIME
    text = value.strftime("%Y-%m-%dT%H:%M:%S")
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")
    offset = value.utcoffset()
    if offset is None or not offset:
        return text + "Z"
    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    hours, minutes = divmod(abs(total) // 60, 60)
    return f"{text}{sign}{hours:02d}:{minutes:02d}"


@dataclass
class Person:
    """A named record with a unique positive code."""

    id: str = ""
    code: int = 0
    name: str = ""
    age: int = 0
    time: datetime | None = None

    JAVA_CLASS_NAME: ClassVar[str | None] = None

    def to_dict(self) -> dict:
        """Return the JSON form, leaving out empty fields as the wire format does."""
        result: dict = {}
        if self.id:
            result["id"] = self.id
        if self.code:
            result["code"] = self.code
        if self.name:
            result["name"] = self.name
        if self.age:
            result["age"] = self.age
        result["time"] = _format_time(self.time)
        return result

    def java_class_name(self) -> str:
        """Return the Java class name this record is serialised as."""
        return self.JAVA_CLASS_NAME or f"{JAVA_PACKAGE}.{type(self).__name__}"


@dataclass
class User(Person):
    """A user record."""

    JAVA_CLASS_NAME: ClassVar[str | None] = f"{JAVA_PACKAGE}.User"


R = TypeVar("R", bound=Person)


@dataclass
class RecordStore(Generic[R]):
    """Thread-safe store indexing records by name and by code."""

    _by_name: dict[str, R] = field(default_factory=dict, init=False, repr=False)
    _by_code: dict[int, R] = field(default_factory=dict, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def add(self, record: R) -> bool:
        """Store the record; return False if its name or code is empty or taken."""
        if not record.name or record.code <= 0:
            return False
        with self._lock:
            if record.name in self._by_name or record.code in self._by_code:
                return False
            self._by_name[record.name] = record
            self._by_code[record.code] = record
            return True

    def get_by_name(self, name: str) -> R | None:
        """Return the record with this name, or None."""
        with self._lock:
            return self._by_name.get(name)

    def get_by_code(self, code: int) -> R | None:
        """Return the record with this code, or None."""
        with self._lock:
            return self._by_code.get(code)

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_name)

    def __iter__(self) -> Iterator[R]:
        with self._lock:
            return iter(list(self._by_name.values()))


_SEED_TIME = datetime(2021, 8, 1, 10, 8, 41, tzinfo=timezone.utc)


def seeded_user_store() -> RecordStore[User]:
    """Return a store holding the two sample users "tc" and "ic"."""
    store: RecordStore[User] = RecordStore()
    store.add(User(id="0001", code=1, name="tc", age=18, time=_SEED_TIME))
    store.add(User(id="0002", code=2, name="ic", age=88, time=_SEED_TIME))
    return store