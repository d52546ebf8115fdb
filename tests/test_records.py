import threading
from datetime import datetime, timedelta, timezone

import pytest

from gateway_samples.records import (
    AddError,
    AlreadyExistsError,
    NotFoundError,
    Person,
    ProviderError,
    RecordStore,
    User,
    seeded_user_store,
)


def test_seeded_store_holds_tc_and_ic():
    store = seeded_user_store()
    assert len(store) == 2
    tc = store.get_by_name("tc")
    assert (tc.id, tc.code, tc.age) == ("0001", 1, 18)
    ic = store.get_by_code(2)
    assert (ic.id, ic.name, ic.age) == ("0002", "ic", 88)


def test_seeded_store_time_is_fixed():
    tc = seeded_user_store().get_by_name("tc")
    assert tc.to_dict()["time"] == "2021-08-01T10:08:41Z"


def test_name_and_code_index_same_object():
    store = seeded_user_store()
    assert store.get_by_name("tc") is store.get_by_code(1)


def test_missing_lookups_return_none():
    store = seeded_user_store()
    assert store.get_by_name("nobody") is None
    assert store.get_by_code(99) is None


@pytest.mark.parametrize(
    "user",
    [
        User(id="x", code=5, name="", age=1),
        User(id="x", code=0, name="dubbogo", age=1),
        User(id="x", code=-3, name="dubbogo", age=1),
    ],
)
def test_add_rejects_empty_name_or_bad_code(user):
    store = seeded_user_store()
    assert store.add(user) is False
    assert len(store) == 2


def test_add_rejects_duplicate_name_or_code():
    store = seeded_user_store()
    assert store.add(User(id="0003", code=3, name="tc")) is False
    assert store.add(User(id="0003", code=1, name="dubbogo")) is False
    assert store.get_by_code(3) is None
    assert store.get_by_name("dubbogo") is None
    assert len(store) == 2


def test_add_new_record_is_retrievable():
    store = seeded_user_store()
    user = User(id="0003", code=3, name="dubbogo", age=99)
    assert store.add(user) is True
    assert store.get_by_name("dubbogo") is user
    assert store.get_by_code(3) is user
    assert len(store) == 3


def test_iteration_yields_all_records():
    store = seeded_user_store()
    assert sorted(u.name for u in store) == ["ic", "tc"]


def test_to_dict_omits_empty_fields():
    user = User(name="dubbogo")
    assert user.to_dict() == {"name": "dubbogo", "time": "0001-01-01T00:00:00Z"}


def test_to_dict_full_record():
    user = User(id="0003", code=3, name="dubbogo", age=99,
                time=datetime(2021, 8, 1, 10, 8, 41, tzinfo=timezone.utc))
    data = user.to_dict()
    assert data["id"] == "0003"
    assert data["code"] == 3
    assert data["age"] == 99
    assert data["time"] == "2021-08-01T10:08:41Z"


def test_to_dict_keeps_offset_and_fraction():
    tz = timezone(timedelta(hours=8))
    user = User(name="a", code=1, time=datetime(2021, 8, 1, 10, 8, 41, 500000, tzinfo=tz))
    assert user.to_dict()["time"] == "2021-08-01T10:08:41.5+08:00"


def test_java_class_names():
    assert User().java_class_name() == "com.dubbogo.pixiu.User"
    assert Person().java_class_name().startswith("com.dubbogo.pixiu.")


def test_error_messages():
    assert str(NotFoundError()) == "not found"
    assert str(AlreadyExistsError()) == "data is exist"
    assert str(AddError()) == "add error"
    with pytest.raises(ProviderError):
        raise NotFoundError()


def test_concurrent_adds_keep_codes_unique():
    store: RecordStore[User] = RecordStore()

    def worker(offset):
        for code in range(1, 51):
            store.add(User(code=code, name=f"n{code}-{offset}"))

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(store) == 50
    assert {store.get_by_name(u.name).code for u in store} == set(range(1, 51))