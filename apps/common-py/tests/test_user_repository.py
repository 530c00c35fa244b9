"""Tests for the in-memory user repository."""

import threading
import uuid

import pytest

from users_common.exceptions import NotFoundError


@pytest.mark.unit
class TestInMemoryUserRepository:
    def test_insert_assigns_fresh_id(self, repository, make_user) -> None:
        supplied = uuid.uuid4()
        user = make_user().model_copy(update={"id": supplied})

        stored = repository.insert(user)

        assert stored.id is not None
        assert stored.id != supplied
        assert repository.find_by_id(supplied) is None
        assert repository.find_by_id(stored.id) == stored

    def test_logins_may_repeat(self, repository, make_user) -> None:
        first = repository.insert(make_user(login="alice"))
        second = repository.insert(make_user(login="alice"))

        assert first.id != second.id
        assert repository.count() == 2

    def test_find_returns_copies(self, repository, make_user) -> None:
        stored = repository.insert(make_user())

        found = repository.find_by_id(stored.id)
        found.login = "mallory"

        assert repository.find_by_id(stored.id).login == "alice"

    def test_find_missing_returns_none(self, repository) -> None:
        assert repository.find_by_id(uuid.uuid4()) is None

    def test_update_replaces_user(self, repository, make_user) -> None:
        stored = repository.insert(make_user())

        repository.update(stored.model_copy(update={"first_name": "Alicia"}))

        assert repository.find_by_id(stored.id).first_name == "Alicia"

    def test_update_missing_user_raises(self, repository, make_user) -> None:
        with pytest.raises(NotFoundError):
            repository.update(make_user().model_copy(update={"id": uuid.uuid4()}))

    def test_delete(self, repository, make_user) -> None:
        stored = repository.insert(make_user())

        repository.delete(stored.id)

        assert repository.find_by_id(stored.id) is None
        assert repository.count() == 0

    def test_delete_missing_user_raises(self, repository) -> None:
        with pytest.raises(NotFoundError):
            repository.delete(uuid.uuid4())

    def test_get_page_keeps_insertion_order(self, repository, make_user) -> None:
        for login in ("c", "a", "b", "d", "e"):
            repository.insert(make_user(login=login))

        first, total = repository.get_page(1, 2)
        second, _ = repository.get_page(2, 2)
        third, _ = repository.get_page(3, 2)

        assert total == 5
        assert [u.login for u in first + second + third] == ["c", "a", "b", "d", "e"]
        assert repository.get_page(1, 2)[0] == first

    def test_get_page_past_the_end_is_empty(self, repository, make_user) -> None:
        repository.insert(make_user())

        assert repository.get_page(4, 10) == ([], 1)

    def test_get_page_rejects_unclamped_input(self, repository) -> None:
        with pytest.raises(ValueError):
            repository.get_page(0, 10)

    def test_concurrent_inserts(self, repository, make_user) -> None:
        def insert_many() -> None:
            for i in range(50):
                repository.insert(make_user(login=f"user{i}"))

        threads = [threading.Thread(target=insert_many) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        items, total = repository.get_page(1, 1000)
        assert total == 400
        assert len({user.id for user in items}) == 400
