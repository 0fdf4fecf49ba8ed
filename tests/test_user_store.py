# tests/test_user_store.py
import threading

from user_backend_api.app.core.errors import StoreErrorKind
from user_backend_api.app.services.user_store import (
    DEMO_USERS,
    EMAIL_EXISTS,
    EMPTY_FIELDS,
    USER_NOT_FOUND,
    UserStore,
    seed_demo_users,
)


def test_scenario_from_fresh_store(store):
    a, error = store.create("A", "a@x.com")
    assert error is None and a.id == 1

    b, error = store.create("B", "b@x.com")
    assert error is None and b.id == 2

    dup, error = store.create("C", "a@x.com")
    assert dup is None
    assert error.kind is StoreErrorKind.CONFLICT

    updated, error = store.update(2, "B2", "")
    assert error is None
    assert updated.name == "B2"
    assert updated.email == "b@x.com"

    assert store.delete(1) is True
    missing, error = store.get_by_id(1)
    assert missing is None
    assert error.kind is StoreErrorKind.NOT_FOUND

    users = store.list_all()
    assert [u.id for u in users] == [2]


def test_create_sets_fields_and_timestamps(store):
    user, error = store.create("Alice", "alice@example.com")
    assert error is None
    assert user.name == "Alice"
    assert user.email == "alice@example.com"
    assert user.createdAt == user.updatedAt == "2024-01-01 12:00:00"


def test_create_then_get_returns_equal_record(store):
    created, _ = store.create("Alice", "alice@example.com")
    fetched, error = store.get_by_id(created.id)
    assert error is None
    assert fetched == created


def test_create_rejects_empty_fields_without_consuming_id(store):
    for name, email in (("", "a@x.com"), ("A", ""), ("", "")):
        user, error = store.create(name, email)
        assert user is None
        assert error.kind is StoreErrorKind.INVALID_ARGUMENT
        assert error.message == EMPTY_FIELDS
    assert store.next_id == 1
    assert store.list_all() == []


def test_duplicate_email_is_conflict_regardless_of_name(store):
    store.create("Alice", "same@example.com")
    user, error = store.create("Alice", "same@example.com")
    assert user is None
    assert error.kind is StoreErrorKind.CONFLICT
    assert error.message == EMAIL_EXISTS
    assert store.next_id == 2


def test_email_comparison_is_case_sensitive(store):
    store.create("Alice", "alice@example.com")
    user, error = store.create("Alice Upper", "ALICE@example.com")
    assert error is None
    assert user.id == 2


def test_email_can_be_reused_after_delete(store):
    store.create("Alice", "alice@example.com")
    store.delete(1)
    user, error = store.create("Alice again", "alice@example.com")
    assert error is None
    assert user.id == 2


def test_ids_are_never_reused(store):
    store.create("A", "a@x.com")
    store.create("B", "b@x.com")
    store.delete(2)
    user, _ = store.create("C", "c@x.com")
    assert user.id == 3
    assert store.next_id == 4


def test_update_with_empty_fields_only_refreshes_updated_at(store):
    created, _ = store.create("Alice", "alice@example.com")
    updated, error = store.update(created.id, "", "")
    assert error is None
    assert updated.name == created.name
    assert updated.email == created.email
    assert updated.createdAt == created.createdAt
    assert updated.updatedAt > created.updatedAt


def test_update_treats_none_like_empty(store):
    created, _ = store.create("Alice", "alice@example.com")
    updated, error = store.update(created.id, None, None)
    assert error is None
    assert (updated.name, updated.email) == ("Alice", "alice@example.com")


def test_update_to_own_email_is_allowed(store):
    created, _ = store.create("Alice", "alice@example.com")
    updated, error = store.update(created.id, "Alicia", "alice@example.com")
    assert error is None
    assert updated.name == "Alicia"


def test_update_conflict_leaves_record_untouched(store):
    store.create("Alice", "alice@example.com")
    bob, _ = store.create("Bob", "bob@example.com")

    result, error = store.update(bob.id, "Robert", "alice@example.com")
    assert result is None
    assert error.kind is StoreErrorKind.CONFLICT

    current, _ = store.get_by_id(bob.id)
    assert current == bob


def test_update_unknown_id(store):
    result, error = store.update(42, "X", "x@x.com")
    assert result is None
    assert error.kind is StoreErrorKind.NOT_FOUND
    assert error.message == USER_NOT_FOUND


def test_delete_unknown_id_returns_false(store):
    assert store.delete(7) is False


def test_list_all_returns_copies(store):
    store.create("Alice", "alice@example.com")
    listed = store.list_all()
    listed[0].name = "Mallory"
    listed.clear()

    fetched, _ = store.get_by_id(1)
    assert fetched.name == "Alice"
    assert len(store.list_all()) == 1


def test_get_by_id_returns_copy(store):
    store.create("Alice", "alice@example.com")
    fetched, _ = store.get_by_id(1)
    fetched.email = "other@example.com"
    assert store.email_exists("alice@example.com")
    assert not store.email_exists("other@example.com")


def test_listing_keeps_insertion_order(store):
    for i in range(5):
        store.create(f"user{i}", f"user{i}@example.com")
    store.update(2, "renamed", "")
    assert [u.id for u in store.list_all()] == [1, 2, 3, 4, 5]


def test_user_exists(store):
    store.create("Alice", "alice@example.com")
    assert store.user_exists(1)
    assert not store.user_exists(2)


def test_emails_stay_unique_over_mixed_operations(store):
    ops = [
        ("create", "A", "a@x.com"),
        ("create", "B", "b@x.com"),
        ("update", 2, "a@x.com"),
        ("create", "C", "c@x.com"),
        ("update", 3, "b@x.com"),
        ("delete", 2, None),
        ("update", 3, "b@x.com"),
        ("create", "D", "b@x.com"),
        ("update", 1, "c@x.com"),
    ]
    for op, first, second in ops:
        if op == "create":
            store.create(first, second)
        elif op == "update":
            store.update(first, "", second)
        else:
            store.delete(first)
        emails = [u.email for u in store.list_all()]
        assert len(emails) == len(set(emails))


def test_seed_demo_users():
    store = seed_demo_users(UserStore())
    users = store.list_all()
    assert [(u.name, u.email) for u in users] == list(DEMO_USERS)
    assert [u.id for u in users] == [1, 2, 3]
    assert store.next_id == 4


def test_default_clock_uses_timestamp_layout():
    store = UserStore()
    user, _ = store.create("Alice", "alice@example.com")
    # YYYY-MM-DD HH:MM:SS
    assert len(user.createdAt) == 19
    assert user.createdAt[4] == "-" and user.createdAt[10] == " " and user.createdAt[13] == ":"


def test_concurrent_creates_keep_ids_and_emails_unique(store):
    workers = 8
    per_worker = 25
    barrier = threading.Barrier(workers)

    def create_batch(worker: int) -> None:
        barrier.wait()
        for i in range(per_worker):
            store.create(f"w{worker}-{i}", f"user{i}@example.com")
            store.create(f"w{worker}-own-{i}", f"w{worker}-{i}@example.com")

    threads = [threading.Thread(target=create_batch, args=(w,)) for w in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    users = store.list_all()
    ids = [u.id for u in users]
    emails = [u.email for u in users]
    # One winner per shared address plus every worker's own addresses.
    assert len(users) == per_worker + workers * per_worker
    assert len(set(ids)) == len(ids)
    assert len(set(emails)) == len(emails)
    assert store.next_id == len(users) + 1
    assert ids == sorted(ids)
