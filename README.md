# gateway-samples

In-memory backend services for trying out an API gateway. Everything runs on
the Python standard library.

## What is inside

- `gateway_samples.records` — the `Person` dataclass and its `User` subclass,
  a thread-safe `RecordStore` indexed by name and by code, and
  `seeded_user_store()`, which returns a store holding the two sample users
  `tc` (code 1, age 18) and `ic` (code 2, age 88).
  - `Person.to_dict()` gives the JSON form, leaving out empty `id`, `code`,
    `name` and `age` and always writing `time` as RFC 3339.
  - `Person.java_class_name()` gives the class name the record is serialised as
    (`com.dubbogo.pixiu.User` for users).
  - `RecordStore.add(record)` returns `False` when the name is empty, the code
    is not positive, or either is already taken; `get_by_name` and
    `get_by_code` return the record or `None`.
  - Errors: `NotFoundError`, `AlreadyExistsError` and `AddError`, all
    subclasses of `ProviderError`.
- `gateway_samples.user_provider` — `UserProvider`, an RPC-style user
  service over a store: `create_user`, `get_user_by_name`, `get_user_by_code`,
  `get_user_by_name_and_age`, `update_user`, `update_user_by_name`,
  `reference`, and `get_user_timeout`, which sleeps (10 seconds by default)
  before looking up, for testing gateway timeouts. The delay and the sleep
  function can be passed in.
- `gateway_samples.school` — `StudentProvider` and `TeacherProvider`, the same
  service shape for `Student` and `Teacher` records, with
  `seeded_student_store(now)` and `seeded_teacher_store(now)`.

## Installing

```
pip install .
```

## Using it

```python
from gateway_samples.user_provider import UserProvider
from gateway_samples.records import User, AlreadyExistsError

provider = UserProvider()
print(provider.get_user_by_name("tc").to_dict())

provider.create_user(User(id="0003", code=3, name="dubbogo", age=99))
try:
    provider.create_user(User(id="0004", code=4, name="dubbogo", age=1))
except AlreadyExistsError as exc:
    print(exc)  # data is exist
```

## What it does not do

The package holds the services' logic only. It has no command, no network
server or RPC transport to expose the providers, no HTTP apps, and no
persistent storage: records live in memory for the life of the process.

## Tests

```
pip install ".[test]"
pytest
```