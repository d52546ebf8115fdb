"""Student and teacher services: two record kinds served side by side."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, ClassVar, Generic, TypeVar

from .records import (
    JAVA_PACKAGE,
    AddError,
    AlreadyExistsError,
    NotFoundError,
    Person,
    RecordStore,
)

__all__ = [
    "Student",
    "Teacher",
    "StudentProvider",
    "TeacherProvider",
    "seeded_student_store",
    "seeded_teacher_store",
]

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT_DELAY = 10.0


@dataclass
class Student(Person):
    """A student record."""

    JAVA_CLASS_NAME: ClassVar[str | None] = f"{JAVA_PACKAGE}.StudentService"


@dataclass
class Teacher(Person):
    """A teacher record."""

    JAVA_CLASS_NAME: ClassVar[str | None] = f"{JAVA_PACKAGE}.TeacherService"


def seeded_student_store(now: datetime) -> RecordStore[Student]:
    """Return a store holding the two sample students, stamped with ``now``."""
    store: RecordStore[Student] = RecordStore()
    store.add(Student(id="0001", code=1, name="tc-student", age=18, time=now))
    store.add(Student(id="0002", code=2, name="ic-student", age=88, time=now))
    return store


def seeded_teacher_store(now: datetime) -> RecordStore[Teacher]:
    """Return a store holding the two sample teachers, stamped with ``now``."""
    store: RecordStore[Teacher] = RecordStore()
    store.add(Teacher(id="0001", code=1, name="tc-teacher", age=18, time=now))
    store.add(Teacher(id="0002", code=2, name="ic-teacher", age=88, time=now))
    return store


R = TypeVar("R", bound=Person)


class _RecordService(Generic[R]):
    """Shared create/query/update logic over one record store."""

    kind: ClassVar[str] = "Record"

    def __init__(
        self,
        store: RecordStore[R],
        timeout_delay: float,
        sleep: Callable[[float], None],
    ) -> None:
        self.store = store
        self.timeout_delay = timeout_delay
        self._sleep = sleep

    def _create(self, record: R | None) -> R:
        log.info("Req Create%s data:%r", self.kind, record)
        if record is None:
            raise NotFoundError()
        if self.store.get_by_name(record.name) is not None:
            raise AlreadyExistsError()
        if not self.store.add(record):
            raise AddError()
        return record

    def _by_name(self, name: str) -> R | None:
        log.info("Req Get%sByName name:%r", self.kind, name)
        found = self.store.get_by_name(name)
        if found is not None:
            log.info("Req Get%sByName result:%r", self.kind, found)
        return found

    def _by_code(self, code: int) -> R | None:
        log.info("Req Get%sByCode code:%r", self.kind, code)
        found = self.store.get_by_code(code)
        if found is not None:
            log.info("Req Get%sByCode result:%r", self.kind, found)
        return found

    def _timeout(self, name: str) -> R | None:
        log.info("Req Get%sByName name:%r", self.kind, name)
        self._sleep(self.timeout_delay)
        found = self.store.get_by_name(name)
        if found is not None:
            log.info("Req Get%sByName result:%r", self.kind, found)
        return found

    def _by_name_and_age(self, name: str, age: int) -> R | None:
        log.info("Req Get%sByNameAndAge name:%s, age:%d", self.kind, name, age)
        found = self.store.get_by_name(name)
        if found is not None and found.age == age:
            log.info("Req Get%sByNameAndAge result:%r", self.kind, found)
        return found

    def _update(self, name: str, changes: R) -> bool:
        target = self.store.get_by_name(name)
        if target is None:
            raise NotFoundError()
        if changes.id:
            target.id = changes.id
        if changes.age >= 0:
            target.age = changes.age
        return True


class StudentProvider(_RecordService[Student]):
    """Serves student records, as the gateway's student service."""

    kind = "Student"

    def __init__(
        self,
        store: RecordStore[Student] | None = None,
        *,
        timeout_delay: float = DEFAULT_TIMEOUT_DELAY,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if store is None:
            store = seeded_student_store(datetime.now(timezone.utc))
        super().__init__(store, timeout_delay, sleep)

    def create_student(self, student: Student | None) -> Student:
        """Store a new student and return it."""
        return self._create(student)

    def get_student_by_name(self, name: str) -> Student | None:
        """Return the student with this name, or None."""
        return self._by_name(name)

    def get_student_by_code(self, code: int) -> Student | None:
        """Return the student with this code, or None."""
        return self._by_code(code)

    def get_student_timeout(self, name: str) -> Student | None:
        """Look a student up by name after a delay longer than the gateway waits."""
        return self._timeout(name)

    def get_student_by_name_and_age(self, name: str, age: int) -> Student | None:
        """Return the student with this name; the age only decides what is logged."""
        return self._by_name_and_age(name, age)

    def update_student(self, student: Student) -> bool:
        """Update the stored student that has the same name as ``student``."""
        log.info("Req UpdateStudent data:%r", student)
        return self._update(student.name, student)

    def update_student_by_name(self, name: str, student: Student) -> bool:
        """Update the stored student called ``name`` from the fields of ``student``."""
        log.info("Req UpdateStudentByName data:%r", student)
        return self._update(name, student)

    def reference(self) -> str:
        """Return the name the service is registered under."""
        return "StudentProvider"


class TeacherProvider(_RecordService[Teacher]):
    """Serves teacher records, as the gateway's teacher service."""

    kind = "Teacher"

    def __init__(
        self,
        store: RecordStore[Teacher] | None = None,
        *,
        timeout_delay: float = DEFAULT_TIMEOUT_DELAY,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if store is None:
            store = seeded_teacher_store(datetime.now(timezone.utc))
        super().__init__(store, timeout_delay, sleep)

    def create_teacher(self, teacher: Teacher | None) -> Teacher:
        """Store a new teacher and return it."""
        return self._create(teacher)

    def get_teacher_by_name(self, name: str) -> Teacher | None:
        """Return the teacher with this name, or None."""
        return self._by_name(name)

    def get_teacher_by_code(self, code: int) -> Teacher | None:
        """Return the teacher with this code, or None."""
        return self._by_code(code)

    def get_teacher_timeout(self, name: str) -> Teacher | None:
        """Look a teacher up by name after a delay longer than the gateway waits."""
        return self._timeout(name)

    def get_teacher_by_name_and_age(self, name: str, age: int) -> Teacher | None:
        """Return the teacher with this name; the age only decides what is logged."""
        return self._by_name_and_age(name, age)

    def update_teacher(self, teacher: Teacher) -> bool:
        """Update the stored teacher that has the same name as ``teacher``."""
        log.info("Req UpdateTeacher data:%r", teacher)
        return self._update(teacher.name, teacher)

    def update_teacher_by_name(self, name: str, teacher: Teacher) -> bool:
        """Update the stored teacher called ``name`` from the fields of ``teacher``."""
        log.info("Req UpdateTeacherByName data:%r", teacher)
        return self._update(name, teacher)

    def reference(self) -> str:
        """Return the name the service is registered under."""
        return "TeacherProvider"