"""The user service exposed to the gateway: create, query and update users."""

from __future__ import annotations

import logging
import time
from typing import Callable

from .records import (
    AddError,
    AlreadyExistsError,
    NotFoundError,
    RecordStore,
    User,
    seeded_user_store,
)

__all__ = ["UserProvider"]

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT_DELAY = 10.0


class UserProvider:
    """Serves user records from a store, as the gateway's user service."""

    def __init__(
        self,
        store: RecordStore[User] | None = None,
        *,
        timeout_delay: float = DEFAULT_TIMEOUT_DELAY,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.store: RecordStore[User] = store if store is not None else seeded_user_store()
        self.timeout_delay = timeout_delay
        self._sleep = sleep

    def create_user(self, user: User | None) -> User:
        """Store a new user and return it."""
        log.info("Req CreateUser data:%r", user)
        if user is None:
            raise NotFoundError()
        if self.store.get_by_name(user.name) is not None:
            raise AlreadyExistsError()
        if not self.store.add(user):
            raise AddError()
        return user

    def get_user_by_name(self, name: str) -> User | None:
        """Return the user with this name, or None."""
        log.info("Req GetUserByName name:%r", name)
        found = self.store.get_by_name(name)
        if found is not None:
            log.info("Req GetUserByName result:%r", found)
        return found

    def get_user_by_code(self, code: int) -> User | None:
        """Return the user with this code, or None."""
        log.info("Req GetUserByCode code:%r", code)
        found = self.store.get_by_code(code)
        if found is not None:
            log.info("Req GetUserByCode result:%r", found)
        return found

    def get_user_timeout(self, name: str) -> User | None:
        """Look a user up by name after a delay longer than the gateway waits."""
        log.info("Req GetUserByName name:%r", name)
        self._sleep(self.timeout_delay)
        found = self.store.get_by_name(name)
        if found is not None:
            log.info("Req GetUserByName result:%r", found)
        return found

    def get_user_by_name_and_age(self, name: str, age: int) -> User | None:
        """Return the user with this name; the age only decides what is logged."""
        log.info("Req GetUserByNameAndAge name:%s, age:%d", name, age)
        found = self.store.get_by_name(name)
        if found is not None and found.age == age:
            log.info("Req GetUserByNameAndAge result:%r", found)
        return found

    def update_user(self, user: User) -> bool:
        """Update the stored user that has the same name as ``user``."""
        log.info("Req UpdateUser data:%r", user)
        return self._update(user.name, user)

    def update_user_by_name(self, name: str, user: User) -> bool:
        """Update the stored user called ``name`` from the fields of ``user``."""
        log.info("Req UpdateUserByName data:%r", user)
        return self._update(name, user)

    def reference(self) -> str:
        """Return the name the service is registered under."""
        return "UserProvider"

    def _update(self, name: str, changes: User) -> bool:
        target = self.store.get_by_name(name)
        if target is None:
            raise NotFoundError()
        if changes.id:
            target.id = changes.id
        if changes.age >= 0:
            target.age = changes.age
        return True